"""Remove command for uninstalling items."""

import logging

import click

from ai_skills.assistants import get_assistant
from ai_skills.cli.commands.options import global_option, type_option
from ai_skills.cli.output import error, success, user_output
from ai_skills.context import AiSkillsContext
from ai_skills.error_boundary import cli_error_boundary
from ai_skills.io.lock import get_installed_items_by_type, remove_installed_item
from ai_skills.models.content import CatalogItem, ContentType
from ai_skills.models.install import InstallScope
from ai_skills.operations.install import remove_canonical_copy, uninstall_item

logger = logging.getLogger(__name__)


@click.command("remove")
@click.argument("name")
@global_option
@type_option
@click.pass_obj
@cli_error_boundary
def remove(
    ctx: AiSkillsContext, name: str, is_global: bool, content_type: ContentType | None
) -> None:
    """Remove an installed item from every assistant it was installed for.

    Examples:

        ai-skills remove clean-code

        ai-skills rm code-reviewer -t agents --global
    """
    scope: InstallScope = "global" if is_global else "project"
    resolved_type = content_type or ContentType.SKILLS
    root = ctx.scope_root(scope)

    entry = next(
        (e for e in get_installed_items_by_type(resolved_type, root) if e.id == name), None
    )
    if entry is None:
        error(f"{name} is not installed ({resolved_type.value}, {scope})")
        raise SystemExit(1)

    item = CatalogItem(
        id=entry.id, name=entry.id, description="", type=entry.type, source=entry.source
    )

    removed = 0
    for assistant_id in entry.assistants:
        assistant = get_assistant(assistant_id)
        if assistant is None:
            logger.debug("Lock entry references unknown assistant %s", assistant_id)
            continue
        if uninstall_item(item, assistant, scope, ctx):
            removed += 1
        else:
            user_output(f"  {assistant.name}: nothing to remove")

    remove_canonical_copy(item, scope, ctx)
    remove_installed_item(root, resolved_type, name)
    success(f"Removed {name} from {removed} assistant(s)")
