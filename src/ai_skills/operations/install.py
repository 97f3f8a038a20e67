"""Install and uninstall items for assistants.

Layout for a scope root:

    <root>/.ai/<type>/<id>/<FILE>.md          canonical copy (symlink method)
    <root>/<assistant path>/<id>              symlink to the canonical copy,
                                              or an independent copy

Each (item, assistant) pair succeeds or fails on its own. Content this tool
did not create at a destination is reported as a conflict and left in place.
"""

import logging
import os
import shutil
from pathlib import Path

from ai_skills.context import AiSkillsContext
from ai_skills.errors import DestinationConflict
from ai_skills.io.guarded_write import guarded_write, remove_path
from ai_skills.io.lock import AI_DIR_NAME, load_lock, save_lock
from ai_skills.models.assistant import AssistantConfig
from ai_skills.models.content import CatalogItem
from ai_skills.models.install import (
    InstallMethod,
    InstallResult,
    InstallScope,
    InstallSummary,
)
from ai_skills.models.lock import LockDocument, LockEntry

logger = logging.getLogger(__name__)


_RESERVED_IDS = frozenset({"", ".", ".."})


def _checked_id(item: CatalogItem) -> str:
    """Return the item id, refusing ids that would escape their type directory."""
    if item.id in _RESERVED_IDS or "/" in item.id or os.sep in item.id:
        raise DestinationConflict(item.id or "<empty>", "is not a usable item identifier")
    return item.id


def get_canonical_dir(root: Path, item: CatalogItem) -> Path:
    """Directory holding the single shared copy of an item.

    Raises:
        DestinationConflict: If the item id is empty, a dot segment or has a separator
    """
    return root / AI_DIR_NAME / item.type.value / _checked_id(item)


def get_destination(root: Path, assistant: AssistantConfig, item: CatalogItem) -> Path:
    """Assistant-specific destination directory for an item.

    Raises:
        KeyError: If the assistant does not support the item's content type
        DestinationConflict: If the item id is not usable as a directory name
    """
    return root / assistant.paths[item.type] / _checked_id(item)


def _link_target(link: Path) -> Path:
    return Path(os.path.normpath(link.parent / os.readlink(link)))


def _write_item_dir(item: CatalogItem, directory: Path) -> None:
    if item.path is not None and item.content is None:
        shutil.copytree(item.path, directory)
        return
    directory.mkdir(parents=True)
    (directory / item.type.file_name).write_text(item.read_content(), encoding="utf-8")


def write_canonical_copy(root: Path, item: CatalogItem) -> Path:
    """Write (or rewrite) the canonical copy under .ai/. Returns its directory."""
    canonical = get_canonical_dir(root, item)
    remove_path(canonical)
    canonical.parent.mkdir(parents=True, exist_ok=True)
    _write_item_dir(item, canonical)
    return canonical


def _install_symlink(destination: Path, canonical: Path) -> None:
    if destination == canonical:
        return

    def is_link_to_canonical(path: Path) -> bool:
        return path.is_symlink() and _link_target(path) == canonical

    target = os.path.relpath(canonical, destination.parent)
    written = guarded_write(
        destination,
        lambda p: p.symlink_to(target, target_is_directory=True),
        is_owned=is_link_to_canonical,
    )
    if not written:
        raise DestinationConflict(
            str(destination), "already exists and is not a link to the installed copy"
        )


def _matches_item(path: Path, item: CatalogItem) -> bool:
    """Whether a directory holds exactly the item file with the item's content."""
    item_file = path / item.type.file_name
    if [child.name for child in path.iterdir()] != [item.type.file_name]:
        return False
    expected = item.read_content().encode("utf-8")
    return item_file.is_file() and item_file.read_bytes() == expected


def _install_copy(destination: Path, item: CatalogItem, canonical: Path, recorded: bool) -> None:
    """Copy an item to its destination.

    An existing directory is replaced only when the lock records this item for
    the assistant, when it is empty, or when it already holds exactly the item.
    """

    def is_previous_install(path: Path) -> bool:
        if path.is_symlink():
            return _link_target(path) == canonical
        if path.is_dir():
            return recorded or not any(path.iterdir()) or _matches_item(path, item)
        return False

    written = guarded_write(
        destination,
        lambda p: _write_item_dir(item, p),
        is_owned=is_previous_install,
    )
    if not written:
        raise DestinationConflict(
            str(destination), "already exists and was not installed by ai-skills"
        )


def install_items(
    items: list[CatalogItem],
    assistants: list[AssistantConfig],
    scope: InstallScope,
    method: InstallMethod,
    ctx: AiSkillsContext,
) -> InstallSummary:
    """Install every item for every assistant that supports its content type.

    Pairs whose assistant does not support the item's type are skipped.
    After all pairs are attempted, one lock entry per item with at least one
    successful pair is recorded.

    Raises:
        LockReadWriteFailure: If the lock document cannot be updated
    """
    root = ctx.scope_root(scope)
    lock = load_lock(root)
    results: list[InstallResult] = []

    for item in items:
        supporting = [a for a in assistants if a.supports(item.type)]
        if not supporting:
            logger.debug("No selected assistant supports %s/%s", item.type.value, item.id)
            continue

        recorded = lock.find(item.type, item.id)
        canonical: Path | None = None
        canonical_error: str | None = None
        try:
            canonical = get_canonical_dir(root, item)
            if method == "symlink":
                write_canonical_copy(root, item)
        except DestinationConflict as e:
            canonical_error = str(e)
        except OSError as e:
            canonical_error = f"could not write {canonical}: {e}"

        for assistant in supporting:
            if canonical is None or canonical_error is not None:
                destination = root / assistant.paths[item.type]
                results.append(
                    InstallResult(item, assistant, False, destination, canonical_error)
                )
                continue
            destination = get_destination(root, assistant, item)
            try:
                if method == "symlink":
                    _install_symlink(destination, canonical)
                else:
                    was_recorded = recorded is not None and assistant.id in recorded.assistants
                    _install_copy(destination, item, canonical, was_recorded)
            except (DestinationConflict, OSError) as e:
                logger.debug("Install of %s for %s failed: %s", item.id, assistant.id, e)
                results.append(InstallResult(item, assistant, False, destination, str(e)))
                continue
            results.append(InstallResult(item, assistant, True, destination))

    _record_successes(root, lock, results, ctx)

    successful = sum(1 for r in results if r.success)
    return InstallSummary(
        total=len(results),
        successful=successful,
        failed=len(results) - successful,
        results=results,
    )


def _record_successes(
    root: Path, document: LockDocument, results: list[InstallResult], ctx: AiSkillsContext
) -> None:
    installed: dict[tuple[str, str], tuple[CatalogItem, list[str]]] = {}
    for result in results:
        if not result.success:
            continue
        key = (result.item.type.value, result.item.id)
        _, assistant_ids = installed.setdefault(key, (result.item, []))
        assistant_ids.append(result.assistant.id)

    if not installed:
        return

    timestamp = ctx.time.now_iso()
    for item, assistant_ids in installed.values():
        previous = document.find(item.type, item.id)
        merged = list(previous.assistants) if previous is not None else []
        merged.extend(a for a in assistant_ids if a not in merged)
        document = document.upsert(
            LockEntry(
                id=item.id,
                type=item.type,
                source=item.source,
                assistants=merged,
                installed_at=timestamp,
            )
        )
    save_lock(root, document)


def uninstall_item(
    item: CatalogItem,
    assistant: AssistantConfig,
    scope: InstallScope,
    ctx: AiSkillsContext,
) -> bool:
    """Remove the destination for one (item, assistant, scope).

    Does not touch the lock document or the canonical copy.

    Returns:
        True if something was removed, False if nothing was present
    """
    if not assistant.supports(item.type):
        return False
    root = ctx.scope_root(scope)
    destination = get_destination(root, assistant, item)
    if destination == get_canonical_dir(root, item):
        return False
    return remove_path(destination)


def remove_canonical_copy(item: CatalogItem, scope: InstallScope, ctx: AiSkillsContext) -> bool:
    """Remove the .ai/ copy of an item. Returns whether it existed."""
    return remove_path(get_canonical_dir(ctx.scope_root(scope), item))


def detect_install_method(
    item: CatalogItem,
    assistant: AssistantConfig,
    scope: InstallScope,
    ctx: AiSkillsContext,
) -> InstallMethod | None:
    """Infer how an existing installation was made, or None if nothing is installed."""
    if not assistant.supports(item.type):
        return None
    destination = get_destination(ctx.scope_root(scope), assistant, item)
    if destination.is_symlink():
        return "symlink"
    if destination.is_dir():
        return "copy"
    return None
