"""Assistant configuration model."""

from dataclasses import dataclass, field

from ai_skills.models.content import ContentType


@dataclass(frozen=True)
class AssistantConfig:
    """Static description of one AI assistant.

    Attributes:
        id: Stable identifier used on the command line and in the lock file
        name: Display name
        description: One-line description shown in prompts
        paths: Root-relative destination directory per supported content type.
            Content types missing from the mapping are unsupported.
        detect_dirs: Home-relative directories whose presence means installed
        detect_project_dirs: Project-relative directories whose presence means installed
        detect_binaries: Executable names looked up on PATH
        bridge_file: Root-relative bridge file this assistant reads, if any
    """

    id: str
    name: str
    description: str
    paths: dict[ContentType, str]
    detect_dirs: tuple[str, ...] = field(default_factory=tuple)
    detect_project_dirs: tuple[str, ...] = field(default_factory=tuple)
    detect_binaries: tuple[str, ...] = field(default_factory=tuple)
    bridge_file: str | None = None

    def supports(self, content_type: ContentType) -> bool:
        return content_type in self.paths
