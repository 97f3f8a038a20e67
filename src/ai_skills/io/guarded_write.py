"""Guarded writes: files this tool does not own are never replaced implicitly.

Bridge files and assistant destinations share this primitive. A caller says
which existing paths it owns (for example symlinks it created); anything
else that already exists is foreign and left alone unless overwrite is set.
"""

import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Literal

PathState = Literal["absent", "owned", "foreign"]


def never_owned(path: Path) -> bool:
    return False


def is_symlink(path: Path) -> bool:
    return path.is_symlink()


def classify_path(path: Path, is_owned: Callable[[Path], bool]) -> PathState:
    """Classify an existing path as absent, owned by this tool, or foreign."""
    if not path.is_symlink() and not path.exists():
        return "absent"
    if is_owned(path):
        return "owned"
    return "foreign"


def remove_path(path: Path) -> bool:
    """Remove a symlink, file or directory tree. Returns whether anything was removed."""
    if path.is_symlink() or path.is_file():
        path.unlink()
        return True
    if path.is_dir():
        shutil.rmtree(path)
        return True
    return False


def guarded_write(
    path: Path,
    write: Callable[[Path], None],
    *,
    is_owned: Callable[[Path], bool],
    overwrite: bool = False,
) -> bool:
    """Write to path unless it holds foreign content.

    Owned content is replaced. Foreign content is replaced only when
    overwrite is True.

    Args:
        path: Destination to write
        write: Callback that creates the destination (file, directory or link)
        is_owned: Predicate telling whether existing content belongs to this tool
        overwrite: Replace foreign content as well

    Returns:
        True if the destination was written, False if it was left untouched
    """
    state = classify_path(path, is_owned)
    if state == "foreign" and not overwrite:
        return False
    if state != "absent":
        remove_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    write(path)
    return True


def guarded_write_text(path: Path, content: str, *, overwrite: bool = False) -> bool:
    """Write a text file, never replacing an existing one unless overwrite is set."""
    return guarded_write(
        path,
        lambda p: p.write_text(content, encoding="utf-8"),
        is_owned=never_owned,
        overwrite=overwrite,
    )
