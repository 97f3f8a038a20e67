"""Lock file I/O for .ai/.skill-lock.json.

The lock document records which items are installed in a scope root so that
list, remove and update work without re-scanning installed files. Writes
are whole-document rewrites through a temporary file and a rename. There is
no locking across processes.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ai_skills.errors import LockReadWriteFailure
from ai_skills.models.content import ContentType
from ai_skills.models.lock import LockDocument, LockEntry

logger = logging.getLogger(__name__)

AI_DIR_NAME = ".ai"
LOCK_FILE_NAME = ".skill-lock.json"


def lock_path_for(root: Path) -> Path:
    """Get the lock file path for a scope root."""
    return root / AI_DIR_NAME / LOCK_FILE_NAME


def load_lock(root: Path) -> LockDocument:
    """Load the lock document for a scope root.

    Returns an empty document if the file doesn't exist.

    Raises:
        LockReadWriteFailure: If the file is unreadable, not JSON, or not a lock document
    """
    lock_path = lock_path_for(root)
    if not lock_path.exists():
        return LockDocument.empty()

    try:
        data = json.loads(lock_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise LockReadWriteFailure(str(lock_path), str(e)) from e
    except json.JSONDecodeError as e:
        raise LockReadWriteFailure(str(lock_path), f"invalid JSON: {e}") from e

    try:
        return LockDocument.model_validate(data)
    except ValidationError as e:
        raise LockReadWriteFailure(str(lock_path), f"invalid lock document: {e}") from e


def save_lock(root: Path, document: LockDocument) -> None:
    """Save the lock document atomically.

    Raises:
        LockReadWriteFailure: If the document cannot be written
    """
    lock_path = lock_path_for(root)
    data = {
        content_type.value: [entry.model_dump(mode="json", by_alias=True) for entry in entries]
        for content_type, entries in document.root.items()
    }
    temp_path = lock_path.with_suffix(".json.tmp")
    try:
        lock_path.parent.mkdir(parents=True, exist_ok=True)
        with temp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        temp_path.replace(lock_path)
    except OSError as e:
        raise LockReadWriteFailure(str(lock_path), str(e)) from e
    logger.debug("Wrote lock file %s", lock_path)


def get_installed_items(root: Path) -> list[LockEntry]:
    """All installed items in a scope root."""
    return load_lock(root).entries()


def get_installed_items_by_type(content_type: ContentType, root: Path) -> list[LockEntry]:
    """Installed items of one content type in a scope root."""
    return load_lock(root).entries_for(content_type)


def record_installed_items(root: Path, entries: list[LockEntry]) -> None:
    """Upsert entries by (type, id) and rewrite the lock document."""
    if not entries:
        return
    document = load_lock(root)
    for entry in entries:
        document = document.upsert(entry)
    save_lock(root, document)


def remove_installed_item(root: Path, content_type: ContentType, item_id: str) -> bool:
    """Delete the (type, id) entry. Returns whether an entry was removed."""
    document = load_lock(root)
    if document.find(content_type, item_id) is None:
        return False
    save_lock(root, document.remove(content_type, item_id))
    return True
