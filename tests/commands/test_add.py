"""Tests for the add command and its shortcuts."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from ai_skills.cli import cli
from ai_skills.context import AiSkillsContext
from ai_skills.io.lock import get_installed_items
from tests.fakes.context import create_test_context
from tests.fakes.http import FakeHttpClient
from tests.fakes.shell import FakeShellOps

RAW = "https://raw.githubusercontent.com"


def test_add_builtin_skill(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(
        cli, ["add", "clean-code", "-y", "-a", "claude-code"], obj=test_ctx
    )

    assert result.exit_code == 0, result.output
    assert (test_ctx.cwd / ".claude" / "skills" / "clean-code").is_symlink()
    assert (test_ctx.cwd / ".ai" / "skills" / "clean-code" / "SKILL.md").is_file()
    assert (test_ctx.cwd / "CLAUDE.md").is_file()
    assert "Successfully installed" in result.output
    assert [e.assistants for e in get_installed_items(test_ctx.cwd)] == [["claude-code"]]


def test_add_keeps_existing_bridge_file(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    (test_ctx.cwd / "CLAUDE.md").write_text("# Mine\n", encoding="utf-8")

    result = cli_runner.invoke(cli, ["i", "clean-code", "-y", "-a", "claude-code"], obj=test_ctx)

    assert result.exit_code == 0, result.output
    assert (test_ctx.cwd / "CLAUDE.md").read_text(encoding="utf-8") == "# Mine\n"


def test_add_global_copy(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(
        cli,
        ["install", "clean-code", "-y", "-g", "--method", "copy", "-a", "cursor,claude-code"],
        obj=test_ctx,
    )

    assert result.exit_code == 0, result.output
    for rel in (".claude/skills/clean-code", ".cursor/skills/clean-code"):
        destination = test_ctx.home / rel
        assert destination.is_dir()
        assert not destination.is_symlink()
    assert not (test_ctx.cwd / "CLAUDE.md").exists()
    assert get_installed_items(test_ctx.home)[0].assistants == ["claude-code", "cursor"]


def test_add_from_github(cli_runner: CliRunner, tmp_path: Path) -> None:
    http = FakeHttpClient(
        responses={f"{RAW}/acme/skills/main/react/SKILL.md": (200, "---\nname: React\n---\n")}
    )
    ctx = create_test_context(tmp_path, http=http)

    result = cli_runner.invoke(cli, ["add", "acme/skills/react", "-y", "-a", "codex"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert (ctx.cwd / ".codex" / "skills" / "react").is_symlink()
    assert (ctx.cwd / "AGENTS.md").is_file()
    assert get_installed_items(ctx.cwd)[0].source == "github:acme/skills/react"


def test_add_uses_detected_assistants(cli_runner: CliRunner, tmp_path: Path) -> None:
    ctx = create_test_context(tmp_path, shell=FakeShellOps(installed_tools={"goose": "/bin/goose"}))

    result = cli_runner.invoke(cli, ["add", "clean-code", "-y"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert (ctx.cwd / ".goose" / "skills" / "clean-code").is_symlink()


def test_add_without_assistants_fails(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(cli, ["add", "clean-code", "-y"], obj=test_ctx)

    assert result.exit_code == 1
    assert "No assistants" in result.output


def test_add_unparseable_source(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(
        cli, ["add", "not-a-source", "-y", "-a", "claude-code"], obj=test_ctx
    )

    assert result.exit_code == 1
    assert "Error: Unable to parse source: not-a-source" in result.output
    assert not (test_ctx.cwd / ".ai").exists()


def test_add_fetch_failure(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(cli, ["add", "acme/missing", "-y", "-a", "codex"], obj=test_ctx)

    assert result.exit_code == 1
    assert "Failed to fetch" in result.output


def test_add_unknown_agent(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(cli, ["add", "clean-code", "-y", "-a", "notepad"], obj=test_ctx)

    assert result.exit_code == 1
    assert "Unknown assistant(s): notepad" in result.output


def test_add_reports_conflict(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    foreign = test_ctx.cwd / ".claude" / "skills" / "clean-code"
    foreign.mkdir(parents=True)

    result = cli_runner.invoke(
        cli, ["add", "clean-code", "-y", "-a", "claude-code,cursor"], obj=test_ctx
    )

    assert result.exit_code == 0, result.output
    assert "Failed: clean-code → Claude Code" in result.output
    assert "Installed 1/2" in result.output
    assert not foreign.is_symlink()


def test_add_agent_type(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(
        cli, ["add", "code-reviewer", "-t", "agent", "-y", "-a", "claude-code"], obj=test_ctx
    )

    assert result.exit_code == 0, result.output
    assert (test_ctx.cwd / ".claude" / "agents" / "code-reviewer" / "AGENT.md").is_file()


def test_add_all_rules(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(
        cli, ["add", "--all", "-t", "rules", "-a", "windsurf"], obj=test_ctx
    )

    assert result.exit_code == 0, result.output
    installed = sorted(p.name for p in (test_ctx.cwd / ".windsurf" / "rules").iterdir())
    assert installed == ["no-console-log", "prefer-early-return"]


def test_add_prompts_for_scope_and_method(
    cli_runner: CliRunner, test_ctx: AiSkillsContext
) -> None:
    result = cli_runner.invoke(
        cli, ["add", "clean-code", "-a", "claude-code"], obj=test_ctx, input="project\ncopy\n"
    )

    assert result.exit_code == 0, result.output
    destination = test_ctx.cwd / ".claude" / "skills" / "clean-code"
    assert destination.is_dir()
    assert not destination.is_symlink()


def test_interactive_wizard(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    """No command starts the wizard: type, items, assistants, scope, method, confirm."""
    answers = "skills\n1\n1\nproject\nsymlink\ny\n"

    result = cli_runner.invoke(cli, [], obj=test_ctx, input=answers)

    assert result.exit_code == 0, result.output
    assert (test_ctx.cwd / ".claude" / "skills" / "clean-code").is_symlink()


def test_content_type_shortcut_add(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(
        cli, ["rules", "add", "no-console-log", "-y", "-a", "cursor"], obj=test_ctx
    )

    assert result.exit_code == 0, result.output
    assert (test_ctx.cwd / ".cursor" / "rules" / "no-console-log").is_symlink()
    assert (test_ctx.cwd / ".cursor" / "rules" / "ai-config.mdc").is_file()


def test_content_type_shortcut_lists(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(cli, ["agents"], obj=test_ctx)

    assert result.exit_code == 0, result.output
    assert "Available agents" in result.output
    assert "code-reviewer" in result.output


def test_builtin_skill_shortcut(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(cli, ["clean-code", "-y", "-a", "claude-code"], obj=test_ctx)

    assert result.exit_code == 0, result.output
    assert (test_ctx.cwd / ".claude" / "skills" / "clean-code").is_symlink()


def test_unknown_command(cli_runner: CliRunner, test_ctx: AiSkillsContext) -> None:
    result = cli_runner.invoke(cli, ["frobnicate"], obj=test_ctx)

    assert result.exit_code == 2


def test_add_parent_directory_source(
    cli_runner: CliRunner,
    test_ctx: AiSkillsContext,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    skill_dir = tmp_path / "sources" / "helper"
    (skill_dir / "sub").mkdir(parents=True)
    (skill_dir / "SKILL.md").write_text("---\nname: Helper\n---\n", encoding="utf-8")
    cli_runner.invoke(cli, ["add", "clean-code", "-y", "-a", "claude-code"], obj=test_ctx)
    monkeypatch.chdir(skill_dir / "sub")

    result = cli_runner.invoke(cli, ["add", "../", "-y", "-a", "claude-code"], obj=test_ctx)

    assert result.exit_code == 0, result.output
    assert sorted(e.id for e in get_installed_items(test_ctx.cwd)) == ["clean-code", "helper"]
    skills = test_ctx.cwd / ".claude" / "skills"
    assert (skills / "clean-code" / "SKILL.md").is_file()
    assert (skills / "helper" / "SKILL.md").is_file()
