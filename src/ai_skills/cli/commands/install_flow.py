"""Steps shared by add, update and the content-type shortcuts."""

import click

from ai_skills.assistants import (
    detect_installed_assistants,
    get_assistants_by_ids,
    get_assistants_for_content_type,
)
from ai_skills.cli import prompts
from ai_skills.cli.output import error, info, success, user_output
from ai_skills.context import AiSkillsContext
from ai_skills.models.assistant import AssistantConfig
from ai_skills.models.content import CatalogItem, ContentType
from ai_skills.models.install import InstallMethod, InstallScope, InstallSummary
from ai_skills.operations.bridge import generate_bridge_files, write_bridge_files


def detect(ctx: AiSkillsContext) -> list[AssistantConfig]:
    return detect_installed_assistants(ctx.shell, ctx.home, ctx.cwd)


def resolve_assistants(
    ctx: AiSkillsContext,
    content_type: ContentType,
    agent_ids: list[str],
    *,
    install_all: bool,
    yes: bool,
) -> list[AssistantConfig]:
    """Pick target assistants from flags, config, detection, or a prompt.

    Raises:
        UnknownAssistant: If an explicit id is not in the registry
        SystemExit: If no assistant ends up selected
    """
    if agent_ids:
        assistants = get_assistants_by_ids(agent_ids)
    elif install_all:
        assistants = get_assistants_for_content_type(content_type)
    elif yes and ctx.config.assistants:
        assistants = get_assistants_by_ids(ctx.config.assistants)
    elif yes:
        assistants = [a for a in detect(ctx) if a.supports(content_type)]
    else:
        assistants = prompts.select_assistants(content_type, detect(ctx))

    if not assistants:
        error("No assistants selected or detected. Install an AI assistant or pass --agent.")
        raise SystemExit(1)
    return assistants


def resolve_scope(ctx: AiSkillsContext, *, is_global: bool, yes: bool) -> InstallScope:
    if is_global:
        return "global"
    if yes:
        return ctx.config.default_scope
    return prompts.select_scope(ctx.config.default_scope)


def resolve_method(ctx: AiSkillsContext, method: str | None, *, yes: bool) -> InstallMethod:
    if method == "copy":
        return "copy"
    if method == "symlink":
        return "symlink"
    if yes:
        return ctx.config.default_method
    return prompts.select_method(ctx.config.default_method)


def report_install_summary(summary: InstallSummary, items: list[CatalogItem]) -> None:
    """Print successes and a per-pair breakdown of failures."""
    if summary.total == 0:
        error("None of the selected assistants support this content type")
        return

    for result in summary.results:
        if result.success:
            success(f"{result.item.name} → {result.assistant.name} ({result.path})")
    for result in summary.failures:
        error(f"Failed: {result.item.name} → {result.assistant.name}: {result.error}")

    if summary.failed > 0:
        info(f"Installed {summary.successful}/{summary.total}")
    else:
        names = ", ".join(item.name for item in items)
        info(f"Successfully installed {names} ({summary.successful} destinations)")


def auto_generate_bridge_files(ctx: AiSkillsContext, assistants: list[AssistantConfig]) -> None:
    """Create missing bridge files after a project install. Never overwrites."""
    files = generate_bridge_files(assistants)
    result = write_bridge_files(files, ctx.cwd)
    if result.written:
        info(f"Generated context files: {', '.join(result.written)}")


def exit_for_summary(summary: InstallSummary) -> None:
    """Exit non-zero when nothing could be installed."""
    if summary.successful == 0:
        raise SystemExit(1)


def confirm_or_abort(message: str, *, yes: bool) -> None:
    if yes:
        return
    if not click.confirm(message, default=True, err=True):
        user_output("Cancelled")
        raise SystemExit(0)
