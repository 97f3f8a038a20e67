"""Update command: re-fetch installed items and reinstall them in place."""

import logging

import click

from ai_skills.assistants import get_assistant
from ai_skills.cli.commands.options import global_option
from ai_skills.cli.output import error, info, success
from ai_skills.context import AiSkillsContext
from ai_skills.error_boundary import cli_error_boundary
from ai_skills.errors import SourceFetchFailed, UnparseableSource
from ai_skills.io.catalog import find_catalog_item
from ai_skills.io.lock import get_installed_items
from ai_skills.models.assistant import AssistantConfig
from ai_skills.models.content import CatalogItem
from ai_skills.models.install import InstallMethod, InstallScope
from ai_skills.models.lock import LockEntry
from ai_skills.operations.install import detect_install_method, install_items
from ai_skills.sources.fetch import fetch_skill, to_catalog_item
from ai_skills.sources.parse import parse_display_string

logger = logging.getLogger(__name__)


@click.command("update")
@global_option
@click.pass_obj
@cli_error_boundary
def update(ctx: AiSkillsContext, is_global: bool) -> None:
    """Update all installed items from their recorded sources.

    Each item is reinstalled to the assistants recorded in the lock file,
    keeping the symlink or copy method it was installed with. A failure
    for one item does not stop the others.
    """
    scope: InstallScope = "global" if is_global else "project"
    entries = get_installed_items(ctx.scope_root(scope))

    if not entries:
        info("No items installed")
        return

    info(f"Updating {len(entries)} installed item(s)...")
    failed = 0
    for entry in entries:
        try:
            item = resolve_lock_entry(ctx, entry)
        except (SourceFetchFailed, UnparseableSource) as e:
            error(f"{entry.type.value}/{entry.id}: {e}")
            failed += 1
            continue

        assistants = _known_assistants(entry)
        if not assistants:
            error(f"{entry.type.value}/{entry.id}: no known assistants recorded")
            failed += 1
            continue

        method = _installed_method(ctx, item, assistants, scope)
        summary = install_items([item], assistants, scope, method, ctx)
        for result in summary.failures:
            error(f"{entry.id} → {result.assistant.name}: {result.error}")
        if summary.failed > 0:
            failed += 1
        else:
            success(f"Updated {entry.type.value}/{entry.id}")

    if failed:
        error(f"{failed} of {len(entries)} item(s) failed to update")
        raise SystemExit(1)


def resolve_lock_entry(ctx: AiSkillsContext, entry: LockEntry) -> CatalogItem:
    """Rebuild an installable item from its lock entry.

    Raises:
        SourceFetchFailed: If a remote or local source cannot be read
        UnparseableSource: If the recorded source cannot be interpreted
    """
    source = parse_display_string(entry.source)
    if source is None:
        item = find_catalog_item(entry.type, entry.id)
        if item is None:
            raise SourceFetchFailed(
                f"builtin:{entry.type.value}/{entry.id}", None, "no longer bundled"
            )
        return item

    fetched = fetch_skill(source, ctx.http, entry.type)
    item = to_catalog_item(fetched, entry.type)
    if item.id != entry.id:
        logger.debug("Source now derives id %s; keeping installed id %s", item.id, entry.id)
        item = CatalogItem(
            id=entry.id,
            name=item.name,
            description=item.description,
            type=item.type,
            content=item.content,
            source=entry.source,
        )
    return item


def _known_assistants(entry: LockEntry) -> list[AssistantConfig]:
    assistants: list[AssistantConfig] = []
    for assistant_id in entry.assistants:
        assistant = get_assistant(assistant_id)
        if assistant is not None:
            assistants.append(assistant)
    return assistants


def _installed_method(
    ctx: AiSkillsContext,
    item: CatalogItem,
    assistants: list[AssistantConfig],
    scope: InstallScope,
) -> InstallMethod:
    for assistant in assistants:
        method = detect_install_method(item, assistant, scope, ctx)
        if method is not None:
            return method
    return ctx.config.default_method
