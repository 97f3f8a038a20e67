"""Add command: install content from the catalog, GitHub, a URL or a path."""

import click

from ai_skills.cli import prompts
from ai_skills.cli.commands.install_flow import (
    auto_generate_bridge_files,
    confirm_or_abort,
    detect,
    exit_for_summary,
    report_install_summary,
    resolve_assistants,
    resolve_method,
    resolve_scope,
)
from ai_skills.cli.commands.options import install_options
from ai_skills.cli.output import error, info
from ai_skills.context import AiSkillsContext
from ai_skills.error_boundary import cli_error_boundary
from ai_skills.io.catalog import find_catalog_item, load_content_type
from ai_skills.models.content import CatalogItem, ContentType
from ai_skills.models.install import InstallOptions, InstallScope
from ai_skills.operations.install import install_items
from ai_skills.sources.fetch import fetch_skill_from_source, to_catalog_item


@click.command("add")
@click.argument("source", required=False)
@install_options
@click.pass_obj
@cli_error_boundary
def add(
    ctx: AiSkillsContext,
    source: str | None,
    is_global: bool,
    agent_ids: list[str],
    content_type: ContentType | None,
    yes: bool,
    install_all: bool,
    method: str | None,
) -> None:
    """Install items from the builtin catalog, GitHub, a URL or a local path.

    Examples:

        ai-skills add clean-code            # builtin skill

        ai-skills add owner/repo            # GitHub repository

        ai-skills add ./my-skill            # local directory

        ai-skills add --all -t rules -y     # every builtin rule
    """
    resolved_type = content_type or ContentType.SKILLS

    if source is None and install_all:
        _install_all(ctx, resolved_type, agent_ids, is_global, method)
        return

    if source is None:
        options = run_interactive_install(ctx)
        _run_install(ctx, options)
        return

    items = [_resolve_item(ctx, source, resolved_type)]
    assistants = resolve_assistants(
        ctx, resolved_type, agent_ids, install_all=install_all, yes=yes
    )
    scope = resolve_scope(ctx, is_global=is_global, yes=yes)
    install_method = resolve_method(ctx, method, yes=yes)
    _run_install(ctx, InstallOptions(items, assistants, scope, install_method))


def _resolve_item(ctx: AiSkillsContext, source: str, content_type: ContentType) -> CatalogItem:
    """Builtin lookup by id or name first, then parse and fetch the source."""
    builtin = find_catalog_item(content_type, source)
    if builtin is not None:
        return builtin

    info(f"Fetching from {source}...")
    fetched = fetch_skill_from_source(source, ctx.http, content_type)
    info(f"Found: {fetched.name}")
    return to_catalog_item(fetched, content_type)


def _install_all(
    ctx: AiSkillsContext,
    content_type: ContentType,
    agent_ids: list[str],
    is_global: bool,
    method: str | None,
) -> None:
    items = load_content_type(content_type)
    if not items:
        error(f"No {content_type.value} available")
        raise SystemExit(1)

    if agent_ids:
        assistants = resolve_assistants(ctx, content_type, agent_ids, install_all=True, yes=True)
    else:
        assistants = [a for a in detect(ctx) if a.supports(content_type)]
    if not assistants:
        error("No assistants detected. Install an AI assistant first.")
        raise SystemExit(1)

    names = ", ".join(a.name for a in assistants)
    info(f"Installing {len(items)} {content_type.value} to {names}...")
    scope: InstallScope = "global" if is_global else "project"
    install_method = resolve_method(ctx, method, yes=True)
    _run_install(ctx, InstallOptions(items, assistants, scope, install_method))


def _run_install(ctx: AiSkillsContext, options: InstallOptions) -> None:
    summary = install_items(
        options.items, options.assistants, options.scope, options.method, ctx
    )
    report_install_summary(summary, options.items)
    if summary.successful > 0 and options.scope == "project":
        auto_generate_bridge_files(ctx, options.assistants)
    exit_for_summary(summary)


def run_interactive_install(ctx: AiSkillsContext) -> InstallOptions:
    """Wizard: type, items, assistants, scope, method, confirmation."""
    content_type = prompts.select_content_type()
    catalog = load_content_type(content_type)
    if not catalog:
        error(f"No {content_type.value} available")
        raise SystemExit(1)

    items = prompts.select_items(catalog, content_type)
    assistants = resolve_assistants(ctx, content_type, [], install_all=False, yes=False)
    scope = prompts.select_scope(ctx.config.default_scope)
    method = prompts.select_method(ctx.config.default_method)

    names = ", ".join(item.name for item in items)
    targets = ", ".join(a.name for a in assistants)
    confirm_or_abort(f"Install {names} to {targets} ({scope}, {method})?", yes=False)
    return InstallOptions(items, assistants, scope, method)
