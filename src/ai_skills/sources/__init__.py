"""Source resolution: parse source strings and fetch their content."""

from ai_skills.sources.fetch import fetch_skill as fetch_skill
from ai_skills.sources.fetch import fetch_skill_from_source as fetch_skill_from_source
from ai_skills.sources.fetch import list_github_skills as list_github_skills
from ai_skills.sources.parse import get_source_display_string as get_source_display_string
from ai_skills.sources.parse import parse_source as parse_source
