"""User configuration loaded from ~/.ai/config.toml.

All keys are optional. Missing file means defaults.

Example:
    default_scope = "project"
    default_method = "symlink"
    assistants = ["claude-code", "cursor"]
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

import tomlkit

from ai_skills.models.install import (
    InstallMethod,
    InstallScope,
    validate_install_method,
    validate_install_scope,
)

CONFIG_KEYS = ("default_scope", "default_method", "assistants")


@dataclass(frozen=True)
class AiSkillsConfig:
    """Immutable user defaults for non-interactive installs."""

    default_scope: InstallScope = "project"
    default_method: InstallMethod = "symlink"
    assistants: list[str] = field(default_factory=list)

    def with_value(self, key: str, value: str) -> "AiSkillsConfig":
        """Return a new config with one key set from its string form.

        Raises:
            ValueError: If the key is unknown or the value is invalid
        """
        match key:
            case "default_scope":
                return replace(self, default_scope=validate_install_scope(value))
            case "default_method":
                return replace(self, default_method=validate_install_method(value))
            case "assistants":
                ids = [part.strip() for part in value.split(",") if part.strip()]
                return replace(self, assistants=ids)
            case _:
                raise ValueError(f"Invalid config key: {key}")

    def get_value(self, key: str) -> str:
        """Render one key for display.

        Raises:
            ValueError: If the key is unknown
        """
        match key:
            case "default_scope":
                return self.default_scope
            case "default_method":
                return self.default_method
            case "assistants":
                return ",".join(self.assistants)
            case _:
                raise ValueError(f"Invalid config key: {key}")


def config_path_for(home: Path) -> Path:
    return home / ".ai" / "config.toml"


def load_config(home: Path) -> AiSkillsConfig:
    """Load config.toml if present; otherwise return defaults.

    Raises:
        ValueError: If a value is invalid
    """
    path = config_path_for(home)
    if not path.exists():
        return AiSkillsConfig()

    data = tomllib.loads(path.read_text(encoding="utf-8"))
    return AiSkillsConfig(
        default_scope=validate_install_scope(str(data.get("default_scope", "project"))),
        default_method=validate_install_method(str(data.get("default_method", "symlink"))),
        assistants=[str(x) for x in data.get("assistants", [])],
    )


def save_config(home: Path, config: AiSkillsConfig) -> Path:
    """Save config.toml, creating ~/.ai if needed. Returns the written path."""
    path = config_path_for(home)
    path.parent.mkdir(parents=True, exist_ok=True)

    doc = tomlkit.document()
    doc.add(tomlkit.comment("ai-skills user configuration"))
    doc["default_scope"] = config.default_scope
    doc["default_method"] = config.default_method
    if config.assistants:
        doc["assistants"] = config.assistants

    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return path
