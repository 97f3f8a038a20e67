"""Application context with dependency injection.

AiSkillsContext holds every collaborator that touches the outside world
(network, PATH lookup, clock, filesystem roots). It is created once at the
CLI entry point and threaded through commands via click's context object.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from ai_skills.config import AiSkillsConfig, load_config
from ai_skills.integrations.http import HttpClient, RealHttpClient
from ai_skills.integrations.shell import RealShellOps, ShellOps
from ai_skills.integrations.time import RealTime, Time
from ai_skills.models.install import InstallScope

HOME_ENV_VAR = "AI_SKILLS_HOME"


@dataclass(frozen=True)
class AiSkillsContext:
    """Immutable context holding all dependencies for ai-skills operations.

    Attributes:
        http: HTTP client for GitHub and URL sources
        shell: PATH lookup for assistant detection
        time: Clock for lock file timestamps
        cwd: Project scope root
        home: Global scope root
        config: User defaults from ~/.ai/config.toml
        debug: Show full stack traces for errors
    """

    http: HttpClient
    shell: ShellOps
    time: Time
    cwd: Path
    home: Path
    config: AiSkillsConfig = field(default_factory=AiSkillsConfig)
    debug: bool = False

    def scope_root(self, scope: InstallScope) -> Path:
        """Installation root for a scope."""
        if scope == "global":
            return self.home
        return self.cwd


def resolve_home() -> Path:
    """Global scope root: $AI_SKILLS_HOME if set, else the user's home directory."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home()


def create_context(*, debug: bool) -> AiSkillsContext:
    """Create production context with real implementations.

    Called once at the CLI entry point.
    """
    home = resolve_home()
    return AiSkillsContext(
        http=RealHttpClient(),
        shell=RealShellOps(),
        time=RealTime(),
        cwd=Path.cwd(),
        home=home,
        config=load_config(home),
        debug=debug,
    )
