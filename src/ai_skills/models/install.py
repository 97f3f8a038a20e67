"""Installation plan and result models."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, cast

from ai_skills.models.assistant import AssistantConfig
from ai_skills.models.content import CatalogItem

InstallScope = Literal["project", "global"]
InstallMethod = Literal["symlink", "copy"]


def validate_install_scope(value: str) -> InstallScope:
    """Validate and return install scope.

    Raises:
        ValueError: If value is not a valid install scope
    """
    if value not in ("project", "global"):
        raise ValueError(f"Invalid install scope: {value}")
    return cast(InstallScope, value)


def validate_install_method(value: str) -> InstallMethod:
    """Validate and return install method.

    Raises:
        ValueError: If value is not a valid install method
    """
    if value not in ("symlink", "copy"):
        raise ValueError(f"Invalid install method: {value}")
    return cast(InstallMethod, value)


@dataclass(frozen=True)
class InstallOptions:
    """Resolved plan for one install operation."""

    items: list[CatalogItem]
    assistants: list[AssistantConfig]
    scope: InstallScope
    method: InstallMethod


@dataclass(frozen=True)
class InstallResult:
    """Outcome of installing one item for one assistant."""

    item: CatalogItem
    assistant: AssistantConfig
    success: bool
    path: Path
    error: str | None = None


@dataclass(frozen=True)
class InstallSummary:
    """Aggregate result of one install operation."""

    total: int
    successful: int
    failed: int
    results: list[InstallResult]

    @property
    def failures(self) -> list[InstallResult]:
        return [r for r in self.results if not r.success]
