"""Content type and catalog item models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ai_skills.errors import UnknownContentType

BUILTIN_SOURCE = "builtin"


class ContentType(Enum):
    """Kind of installable content."""

    SKILLS = "skills"
    AGENTS = "agents"
    COMMANDS = "commands"
    RULES = "rules"
    PROMPTS = "prompts"

    @classmethod
    def parse(cls, value: str) -> "ContentType":
        """Parse a content type name, accepting singular forms.

        Raises:
            UnknownContentType: If value names no content type
        """
        normalized = value.strip().lower()
        for content_type in cls:
            if normalized in (content_type.value, content_type.value[:-1]):
                return content_type
        raise UnknownContentType(value)

    @property
    def file_name(self) -> str:
        """Canonical markdown file name inside an item directory."""
        return CONTENT_FILE_NAMES[self]

    @property
    def display_name(self) -> str:
        return CONTENT_DISPLAY_NAMES[self]


CONTENT_FILE_NAMES: dict[ContentType, str] = {
    ContentType.SKILLS: "SKILL.md",
    ContentType.AGENTS: "AGENT.md",
    ContentType.COMMANDS: "COMMAND.md",
    ContentType.RULES: "RULE.md",
    ContentType.PROMPTS: "PROMPT.md",
}

CONTENT_DISPLAY_NAMES: dict[ContentType, str] = {
    ContentType.SKILLS: "Skills",
    ContentType.AGENTS: "Agents",
    ContentType.COMMANDS: "Commands",
    ContentType.RULES: "Rules",
    ContentType.PROMPTS: "Prompts",
}

CONTENT_TYPE_HINTS: dict[ContentType, str] = {
    ContentType.SKILLS: "Best practices and coding guidelines",
    ContentType.AGENTS: "Specialized AI personas for specific tasks",
    ContentType.COMMANDS: "Reusable AI command templates",
    ContentType.RULES: "Code style and linting rules",
    ContentType.PROMPTS: "Pre-built prompt templates",
}


@dataclass(frozen=True)
class CatalogItem:
    """A unit of installable content.

    Builtin items carry the directory holding their canonical file in `path`.
    Fetched items carry their markdown in `content` and have no `path`.
    `source` is the display string recorded in the lock file.
    """

    id: str
    name: str
    description: str
    type: ContentType
    path: Path | None = None
    content: str | None = None
    source: str = BUILTIN_SOURCE

    def read_content(self) -> str:
        """Return the item's markdown, reading the canonical file if needed.

        Raises:
            FileNotFoundError: If the item has neither content nor a readable file
        """
        if self.content is not None:
            return self.content
        if self.path is None:
            raise FileNotFoundError(f"Item '{self.id}' has no content and no source path")
        return (self.path / self.type.file_name).read_text(encoding="utf-8")
