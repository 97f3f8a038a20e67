"""Registry of supported AI assistants.

The registry is a fixed table. Adding an assistant or a content type is an
edit to ASSISTANTS, not a new code path. Definition order is the display and
default-selection order.
"""

import logging
from pathlib import Path

from ai_skills.errors import UnknownAssistant
from ai_skills.integrations.shell import ShellOps
from ai_skills.models.assistant import AssistantConfig
from ai_skills.models.content import CONTENT_DISPLAY_NAMES, ContentType

logger = logging.getLogger(__name__)

_S = ContentType.SKILLS
_A = ContentType.AGENTS
_C = ContentType.COMMANDS
_R = ContentType.RULES
_P = ContentType.PROMPTS

ASSISTANTS: tuple[AssistantConfig, ...] = (
    AssistantConfig(
        id="claude-code",
        name="Claude Code",
        description="Anthropic's agentic coding CLI",
        paths={_S: ".claude/skills", _A: ".claude/agents", _C: ".claude/commands"},
        detect_dirs=(".claude",),
        detect_binaries=("claude",),
        bridge_file="CLAUDE.md",
    ),
    AssistantConfig(
        id="github-copilot",
        name="GitHub Copilot",
        description="GitHub's AI pair programmer",
        paths={_S: ".github/skills", _A: ".github/agents", _P: ".github/prompts"},
        detect_dirs=(".copilot",),
        detect_binaries=("copilot",),
        bridge_file=".github/copilot-instructions.md",
    ),
    AssistantConfig(
        id="cursor",
        name="Cursor",
        description="AI-first code editor",
        paths={_S: ".cursor/skills", _C: ".cursor/commands", _R: ".cursor/rules"},
        detect_dirs=(".cursor",),
        detect_project_dirs=(".cursor",),
        detect_binaries=("cursor",),
        bridge_file=".cursor/rules/ai-config.mdc",
    ),
    AssistantConfig(
        id="windsurf",
        name="Windsurf",
        description="Codeium's agentic editor",
        paths={_S: ".windsurf/skills", _R: ".windsurf/rules"},
        detect_dirs=(".codeium/windsurf", ".windsurf"),
        detect_binaries=("windsurf",),
        bridge_file=".windsurfrules",
    ),
    AssistantConfig(
        id="gemini-cli",
        name="Gemini CLI",
        description="Google's Gemini in the terminal",
        paths={_S: ".gemini/skills", _A: ".gemini/agents", _C: ".gemini/commands"},
        detect_dirs=(".gemini",),
        detect_binaries=("gemini",),
        bridge_file="GEMINI.md",
    ),
    AssistantConfig(
        id="antigravity",
        name="Antigravity",
        description="Google's agent-first IDE",
        paths={_S: ".agent/skills", _R: ".agent/rules"},
        detect_dirs=(".antigravity",),
        detect_binaries=("antigravity",),
        bridge_file="GEMINI.md",
    ),
    AssistantConfig(
        id="codex",
        name="Codex",
        description="OpenAI's coding agent CLI",
        paths={_S: ".codex/skills", _P: ".codex/prompts"},
        detect_dirs=(".codex",),
        detect_binaries=("codex",),
        bridge_file="AGENTS.md",
    ),
    AssistantConfig(
        id="amp",
        name="Amp",
        description="Sourcegraph's coding agent",
        paths={_S: ".agents/skills", _C: ".agents/commands"},
        detect_dirs=(".config/amp",),
        detect_binaries=("amp",),
        bridge_file="AGENTS.md",
    ),
    AssistantConfig(
        id="cline",
        name="Cline",
        description="Autonomous coding agent for VS Code",
        paths={_S: ".cline/skills", _R: ".clinerules"},
        detect_dirs=(".cline",),
        detect_project_dirs=(".clinerules",),
        bridge_file="AGENTS.md",
    ),
    AssistantConfig(
        id="roo-code",
        name="Roo Code",
        description="Multi-mode coding agent for VS Code",
        paths={_S: ".roo/skills", _C: ".roo/commands", _R: ".roo/rules"},
        detect_dirs=(".roo",),
        detect_project_dirs=(".roo",),
        bridge_file="AGENTS.md",
    ),
    AssistantConfig(
        id="continue",
        name="Continue",
        description="Open-source AI code assistant",
        paths={_R: ".continue/rules", _P: ".continue/prompts"},
        detect_dirs=(".continue",),
        detect_binaries=("cn",),
    ),
    AssistantConfig(
        id="goose",
        name="Goose",
        description="Block's open-source agent",
        paths={_S: ".goose/skills"},
        detect_dirs=(".config/goose",),
        detect_binaries=("goose",),
        bridge_file="AGENTS.md",
    ),
    AssistantConfig(
        id="opencode",
        name="OpenCode",
        description="Terminal-based coding agent",
        paths={_S: ".opencode/skills", _A: ".opencode/agent", _C: ".opencode/command"},
        detect_dirs=(".config/opencode",),
        detect_binaries=("opencode",),
        bridge_file="AGENTS.md",
    ),
    AssistantConfig(
        id="kiro",
        name="Kiro",
        description="Agentic IDE with steering files",
        paths={_S: ".kiro/skills", _R: ".kiro/steering"},
        detect_dirs=(".kiro",),
        detect_binaries=("kiro",),
    ),
    AssistantConfig(
        id="trae",
        name="Trae",
        description="Adaptive AI IDE",
        paths={_S: ".trae/skills", _R: ".trae/rules"},
        detect_dirs=(".trae",),
        detect_binaries=("trae",),
    ),
    AssistantConfig(
        id="augment",
        name="Augment",
        description="Context-aware coding agent",
        paths={_S: ".augment/skills", _C: ".augment/commands", _R: ".augment/rules"},
        detect_dirs=(".augment",),
        detect_binaries=("auggie",),
    ),
    AssistantConfig(
        id="droid",
        name="Droid",
        description="Factory's software development agent",
        paths={_S: ".factory/skills", _A: ".factory/droids", _C: ".factory/commands"},
        detect_dirs=(".factory",),
        detect_binaries=("droid",),
        bridge_file="AGENTS.md",
    ),
    AssistantConfig(
        id="kilo-code",
        name="Kilo Code",
        description="Open-source coding agent for VS Code",
        paths={_S: ".kilocode/skills", _R: ".kilocode/rules"},
        detect_dirs=(".kilocode",),
        detect_project_dirs=(".kilocode",),
        bridge_file="AGENTS.md",
    ),
)


def get_all_assistants() -> list[AssistantConfig]:
    """All assistants in registry order."""
    return list(ASSISTANTS)


def get_assistant(assistant_id: str) -> AssistantConfig | None:
    for assistant in ASSISTANTS:
        if assistant.id == assistant_id:
            return assistant
    return None


def get_assistants_by_ids(assistant_ids: list[str]) -> list[AssistantConfig]:
    """Resolve ids to configs in registry order.

    Raises:
        UnknownAssistant: If any id is not in the registry
    """
    known = {a.id for a in ASSISTANTS}
    unknown = [i for i in assistant_ids if i not in known]
    if unknown:
        raise UnknownAssistant(unknown)
    wanted = set(assistant_ids)
    return [a for a in ASSISTANTS if a.id in wanted]


def get_assistants_for_content_type(content_type: ContentType) -> list[AssistantConfig]:
    """Assistants whose destination mapping includes the content type."""
    return [a for a in ASSISTANTS if a.supports(content_type)]


def get_content_type_display_name(content_type: ContentType) -> str:
    return CONTENT_DISPLAY_NAMES[content_type]


def is_assistant_installed(
    assistant: AssistantConfig, shell: ShellOps, home: Path, cwd: Path
) -> bool:
    """Check an assistant's detection predicate.

    Filesystem errors count as "not detected".
    """
    try:
        for rel in assistant.detect_dirs:
            if (home / rel).is_dir():
                return True
        for rel in assistant.detect_project_dirs:
            if (cwd / rel).is_dir():
                return True
    except OSError as e:
        logger.debug("Detection of %s failed: %s", assistant.id, e)
        return False

    return any(
        shell.get_installed_tool_path(binary) is not None for binary in assistant.detect_binaries
    )


def detect_installed_assistants(shell: ShellOps, home: Path, cwd: Path) -> list[AssistantConfig]:
    """Assistants present on this machine, in registry order."""
    detected = [a for a in ASSISTANTS if is_assistant_installed(a, shell, home, cwd)]
    logger.debug("Detected assistants: %s", [a.id for a in detected])
    return detected
