"""Data models for ai-skills."""

from ai_skills.models.assistant import AssistantConfig as AssistantConfig
from ai_skills.models.content import CatalogItem as CatalogItem
from ai_skills.models.content import ContentType as ContentType
from ai_skills.models.install import InstallMethod as InstallMethod
from ai_skills.models.install import InstallOptions as InstallOptions
from ai_skills.models.install import InstallResult as InstallResult
from ai_skills.models.install import InstallScope as InstallScope
from ai_skills.models.install import InstallSummary as InstallSummary
from ai_skills.models.lock import LockDocument as LockDocument
from ai_skills.models.lock import LockEntry as LockEntry
from ai_skills.models.source import ContentSource as ContentSource
from ai_skills.models.source import FetchedSkill as FetchedSkill
from ai_skills.models.source import GitHubSource as GitHubSource
from ai_skills.models.source import LocalSource as LocalSource
from ai_skills.models.source import UrlSource as UrlSource
