"""Bridge files: small stubs telling each assistant to read `.ai/`.

Several assistants may read the same file (AGENTS.md, GEMINI.md); each file
is planned once. Existing bridge files are never replaced unless the caller
asks for overwrite, since users are expected to edit them.
"""

from dataclasses import dataclass
from pathlib import Path

from ai_skills.io.guarded_write import guarded_write_text
from ai_skills.io.lock import AI_DIR_NAME
from ai_skills.models.assistant import AssistantConfig
from ai_skills.models.content import CONTENT_TYPE_HINTS, ContentType

CURSOR_RULE_SUFFIX = ".mdc"


@dataclass(frozen=True)
class BridgeFile:
    """A planned bridge file, relative to the installation root."""

    file_path: str
    content: str
    description: str


@dataclass(frozen=True)
class BridgeWriteResult:
    """Root-relative paths written and skipped."""

    written: list[str]
    skipped: list[str]


def render_bridge_content(file_path: str) -> str:
    """Render the pointer text for one bridge file."""
    lines = [
        "# AI Configuration",
        "",
        f"This project keeps its AI assistant instructions in the `{AI_DIR_NAME}/` directory.",
        "Before starting work, read the content installed there:",
        "",
    ]
    for content_type in ContentType:
        lines.append(
            f"- `{AI_DIR_NAME}/{content_type.value}/` - {CONTENT_TYPE_HINTS[content_type]}"
        )
    lines.extend(
        [
            "",
            "Each item is a directory holding one markdown file "
            "(SKILL.md, AGENT.md, COMMAND.md, RULE.md or PROMPT.md).",
            "Follow those instructions in addition to anything written below.",
            "",
        ]
    )
    body = "\n".join(lines)

    if file_path.endswith(CURSOR_RULE_SUFFIX):
        header = (
            "---\n"
            f"description: Read project AI configuration from {AI_DIR_NAME}/\n"
            "globs:\n"
            "alwaysApply: true\n"
            "---\n\n"
        )
        return header + body
    return body


def generate_bridge_files(assistants: list[AssistantConfig]) -> list[BridgeFile]:
    """Plan one bridge file per distinct path needed by the given assistants.

    Order follows the first assistant that needs each file.
    """
    readers: dict[str, list[str]] = {}
    for assistant in assistants:
        if assistant.bridge_file is None:
            continue
        names = readers.setdefault(assistant.bridge_file, [])
        if assistant.name not in names:
            names.append(assistant.name)

    return [
        BridgeFile(
            file_path=file_path,
            content=render_bridge_content(file_path),
            description=f"Context for {', '.join(names)}",
        )
        for file_path, names in readers.items()
    ]


def write_bridge_files(
    files: list[BridgeFile], root: Path, overwrite: bool = False
) -> BridgeWriteResult:
    """Write planned bridge files under root.

    Existing files are skipped unless overwrite is True.
    """
    written: list[str] = []
    skipped: list[str] = []
    for bridge in files:
        if guarded_write_text(root / bridge.file_path, bridge.content, overwrite=overwrite):
            written.append(bridge.file_path)
        else:
            skipped.append(bridge.file_path)
    return BridgeWriteResult(written=written, skipped=skipped)
