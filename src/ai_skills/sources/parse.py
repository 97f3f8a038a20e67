"""Source string parsing.

Resolution is prefix based and first match wins:

    /abs, ./rel, ../rel        local path
    ...github.com/...          GitHub URL (tree/blob/<branch>/<path> supported)
    owner/repo                 GitHub shorthand
    owner/repo/sub/path        GitHub shorthand with path
    http://..., https://...    generic URL

A local directory literally named `owner/repo` is read as GitHub shorthand
unless written with a `./` or `/` prefix.
"""

import re
from pathlib import Path
from typing import assert_never
from urllib.parse import urlparse

from ai_skills.errors import UnparseableSource
from ai_skills.models.content import BUILTIN_SOURCE, CONTENT_FILE_NAMES
from ai_skills.models.source import ContentSource, GitHubSource, LocalSource, UrlSource

LOCAL_PREFIXES = ("/", "./", "../")
SHORTHAND_PATTERN = re.compile(r"^[\w-]+/[\w-]+$")
SHORTHAND_WITH_PATH_PATTERN = re.compile(r"^[\w-]+/[\w-]+/")
DEFAULT_ITEM_ID = "skill"


def parse_source(source: str) -> ContentSource:
    """Parse a user supplied source string.

    Raises:
        UnparseableSource: If the string matches no known source form
    """
    if source.startswith(LOCAL_PREFIXES):
        return LocalSource(path=source)

    if "github.com" in source:
        return parse_github_url(source)

    if SHORTHAND_PATTERN.match(source):
        owner, repo = source.split("/")
        return GitHubSource(owner=owner, repo=repo)

    if SHORTHAND_WITH_PATH_PATTERN.match(source):
        owner, repo, rest = source.split("/", 2)
        return GitHubSource(owner=owner, repo=repo, path=_strip_item_file(rest) or None)

    if source.startswith(("http://", "https://")):
        return UrlSource(url=source)

    raise UnparseableSource(source)


def parse_github_url(url: str) -> GitHubSource:
    """Parse a github.com URL.

    Supports:
        https://github.com/owner/repo
        https://github.com/owner/repo/tree/branch/path
        https://github.com/owner/repo/blob/branch/path/SKILL.md

    Raises:
        UnparseableSource: If the URL lacks an owner and repository
    """
    target = url if "://" in url else f"https://{url}"
    parts = [p for p in urlparse(target).path.split("/") if p]
    if len(parts) < 2:
        raise UnparseableSource(url, "GitHub URL needs an owner and repository")

    owner = parts[0]
    repo = parts[1].removesuffix(".git")
    branch: str | None = None
    path: str | None = None

    if len(parts) > 3 and parts[2] in ("tree", "blob"):
        branch = parts[3]
        if len(parts) > 4:
            path = _strip_item_file("/".join(parts[4:])) or None

    return GitHubSource(owner=owner, repo=repo, branch=branch, path=path)


def _strip_item_file(path: str) -> str:
    """Drop a trailing canonical file name (SKILL.md, AGENT.md, ...) from a path."""
    for file_name in CONTENT_FILE_NAMES.values():
        if path == file_name:
            return ""
        if path.endswith(f"/{file_name}"):
            return path.removesuffix(f"/{file_name}")
    return path


def derive_item_id(source: ContentSource) -> str:
    """Derive the install identifier for fetched content."""
    match source:
        case GitHubSource(repo=repo, path=path):
            if path:
                return path.rstrip("/").split("/")[-1]
            return repo
        case LocalSource(path=path):
            # Resolved so that "../" and "." name the directory they point at
            return Path(path).expanduser().resolve().name or DEFAULT_ITEM_ID
        case UrlSource(url=url):
            segments = [s for s in urlparse(url).path.split("/") if s]
            return segments[-1] if segments else DEFAULT_ITEM_ID
        case _:
            assert_never(source)


def get_source_display_string(source: ContentSource) -> str:
    """Render a source for the lock file and user output."""
    match source:
        case GitHubSource(owner=owner, repo=repo, branch=branch, path=path):
            suffix = f"/{path}" if path else ""
            ref = f"@{branch}" if branch else ""
            return f"github:{owner}/{repo}{suffix}{ref}"
        case UrlSource(url=url):
            return url
        case LocalSource(path=path):
            return f"local:{path}"
        case _:
            assert_never(source)


def parse_display_string(display: str) -> ContentSource | None:
    """Inverse of get_source_display_string, used when updating from the lock file.

    Returns None for builtin items, which are re-read from the catalog.

    Raises:
        UnparseableSource: If the recorded source cannot be interpreted
    """
    if display == BUILTIN_SOURCE:
        return None
    if display.startswith("local:"):
        return LocalSource(path=display.removeprefix("local:"))
    if display.startswith("github:"):
        location, _, branch = display.removeprefix("github:").partition("@")
        parts = location.split("/", 2)
        if len(parts) < 2:
            raise UnparseableSource(display)
        return GitHubSource(
            owner=parts[0],
            repo=parts[1],
            branch=branch or None,
            path=parts[2] if len(parts) > 2 else None,
        )
    return parse_source(display)
