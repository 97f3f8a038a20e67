"""List command: catalog statistics, available items, or installed items."""

import click
from rich.table import Table

from ai_skills.cli.commands.options import global_option, type_option
from ai_skills.cli.output import info, machine_output, stdout_console
from ai_skills.context import AiSkillsContext
from ai_skills.error_boundary import cli_error_boundary
from ai_skills.io.catalog import get_catalog_stats, load_content_type
from ai_skills.io.lock import get_installed_items, get_installed_items_by_type
from ai_skills.models.content import ContentType
from ai_skills.models.install import InstallScope


@click.command("list")
@click.argument("type_arg", metavar="[TYPE]", required=False)
@click.option("--installed", is_flag=True, help="List installed items instead of the catalog")
@global_option
@type_option
@click.pass_obj
@cli_error_boundary
def list_items(
    ctx: AiSkillsContext,
    type_arg: str | None,
    installed: bool,
    is_global: bool,
    content_type: ContentType | None,
) -> None:
    """List available or installed items.

    Examples:

        ai-skills list                 # catalog summary

        ai-skills list skills          # available skills

        ai-skills list --installed     # installed in this project
    """
    resolved_type = ContentType.parse(type_arg) if type_arg else content_type

    if installed:
        scope: InstallScope = "global" if is_global else "project"
        _list_installed(ctx, scope, resolved_type)
        return

    if resolved_type is not None:
        _list_available(resolved_type)
        return

    stats = get_catalog_stats()
    machine_output("\nai-skills catalog:\n")
    for ct in ContentType:
        machine_output(f"  {ct.display_name + ':':<10}{stats[ct]}")
    machine_output("  ─────────────")
    machine_output(f"  {'Total:':<10}{sum(stats.values())}\n")
    machine_output("Use 'ai-skills list <type>' to see items")


def _list_available(content_type: ContentType) -> None:
    items = load_content_type(content_type)
    if not items:
        info(f"No {content_type.value} available")
        return

    machine_output(f"\nAvailable {content_type.value}:\n")
    for item in items:
        machine_output(f"  {item.name}")
        machine_output(f"    {item.description}\n")


def _list_installed(
    ctx: AiSkillsContext, scope: InstallScope, content_type: ContentType | None
) -> None:
    root = ctx.scope_root(scope)
    if content_type is not None:
        entries = get_installed_items_by_type(content_type, root)
    else:
        entries = get_installed_items(root)

    if not entries:
        info("No items installed")
        return

    table = Table(title=f"Installed items ({scope})")
    table.add_column("Item", overflow="fold")
    table.add_column("Assistants", overflow="fold")
    table.add_column("Source", overflow="fold")
    table.add_column("Installed", overflow="fold")
    for entry in entries:
        table.add_row(
            f"{entry.type.value}/{entry.id}",
            ", ".join(entry.assistants),
            entry.source,
            entry.installed_at,
        )
    stdout_console().print(table)
