"""Tests for the top-level command group."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from ai_skills.cli import cli
from ai_skills.config import AiSkillsConfig
from ai_skills.context import HOME_ENV_VAR, AiSkillsContext, resolve_home
from ai_skills.version import __version__
from tests.fakes.context import create_test_context


def test_version(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(cli, ["--version"], obj=test_ctx)

    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(cli, ["-h"], obj=test_ctx)

    assert result.exit_code == 0
    for name in ("add", "remove", "list", "search", "update", "init", "bridge", "serve"):
        assert name in result.output


def test_serve_prints_notice(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(cli, ["web"], obj=test_ctx)

    assert result.exit_code == 0
    assert "not bundled" in result.output


def test_config_defaults_apply_to_yes_installs(cli_runner: CliRunner, tmp_path: Path) -> None:
    config = AiSkillsConfig(default_method="copy", assistants=["windsurf"])
    ctx = create_test_context(tmp_path, config=config)

    result = cli_runner.invoke(cli, ["add", "clean-code", "-y"], obj=ctx)

    assert result.exit_code == 0, result.output
    destination = ctx.cwd / ".windsurf" / "skills" / "clean-code"
    assert destination.is_dir()
    assert not destination.is_symlink()


def test_resolve_home_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(HOME_ENV_VAR, str(tmp_path))

    assert resolve_home() == tmp_path


def test_resolve_home_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(HOME_ENV_VAR, raising=False)

    assert resolve_home() == Path.home()
