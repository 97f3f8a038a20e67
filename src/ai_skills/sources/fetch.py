"""Fetching content from GitHub, URLs and local paths."""

import json
import logging
from pathlib import Path
from typing import Any, assert_never

from ai_skills.errors import SourceFetchFailed
from ai_skills.integrations.http import HttpClient
from ai_skills.io.frontmatter import parse_frontmatter
from ai_skills.models.content import CatalogItem, ContentType
from ai_skills.models.source import (
    ContentSource,
    FetchedSkill,
    GitHubSource,
    LocalSource,
    UrlSource,
)
from ai_skills.sources.parse import derive_item_id, get_source_display_string, parse_source

logger = logging.getLogger(__name__)

RAW_GITHUB_BASE = "https://raw.githubusercontent.com"
GITHUB_API_BASE = "https://api.github.com"
DEFAULT_BRANCH = "main"
FALLBACK_BRANCH = "master"
SKILL_FILE_NAME = "SKILL.md"
GITHUB_API_HEADERS = {"Accept": "application/vnd.github.v3+json"}


def build_raw_github_url(source: GitHubSource, branch: str, file_name: str) -> str:
    file_path = f"{source.path.strip('/')}/{file_name}" if source.path else file_name
    return f"{RAW_GITHUB_BASE}/{source.owner}/{source.repo}/{branch}/{file_path}"


def fetch_from_github(source: GitHubSource, http: HttpClient, file_name: str) -> str:
    """Fetch the canonical file from a GitHub repository.

    When no branch was given, `main` is tried first and `master` exactly
    once after a non-OK response.

    Raises:
        SourceFetchFailed: If the file cannot be fetched
    """
    branch = source.branch or DEFAULT_BRANCH
    url = build_raw_github_url(source, branch, file_name)
    response = http.get(url)
    if response.ok:
        return response.text

    if source.branch is None:
        fallback_url = build_raw_github_url(source, FALLBACK_BRANCH, file_name)
        logger.debug("%s returned %s, retrying on %s", url, response.status, FALLBACK_BRANCH)
        fallback = http.get(fallback_url)
        if fallback.ok:
            return fallback.text
        raise SourceFetchFailed(fallback_url, fallback.status)

    raise SourceFetchFailed(url, response.status)


def fetch_from_url(source: UrlSource, http: HttpClient) -> str:
    """Fetch a markdown document from a URL. No fallback.

    Raises:
        SourceFetchFailed: If the response is not OK
    """
    response = http.get(source.url)
    if not response.ok:
        raise SourceFetchFailed(source.url, response.status)
    return response.text


def fetch_from_local(source: LocalSource, file_name: str) -> str:
    """Read `<path>/<file_name>`, then `<path>/SKILL.md`, else `<path>` itself as a file.

    Raises:
        SourceFetchFailed: If none of these locations is a readable file
    """
    resolved = Path(source.path).expanduser().resolve()
    for name in dict.fromkeys((file_name, SKILL_FILE_NAME)):
        candidate = resolved / name
        if candidate.is_file():
            return candidate.read_text(encoding="utf-8")
    if resolved.is_file():
        return resolved.read_text(encoding="utf-8")
    raise SourceFetchFailed(str(resolved), None, f"no {file_name} and not a file")



def fetch_skill(
    source: ContentSource,
    http: HttpClient,
    content_type: ContentType = ContentType.SKILLS,
) -> FetchedSkill:
    """Fetch content from any source and read its frontmatter.

    Raises:
        SourceFetchFailed: If the content cannot be fetched
    """
    file_name = content_type.file_name
    match source:
        case GitHubSource():
            content = fetch_from_github(source, http, file_name)
        case UrlSource():
            content = fetch_from_url(source, http)
        case LocalSource():
            content = fetch_from_local(source, file_name)
        case _:
            assert_never(source)

    item_id = derive_item_id(source)
    parsed = parse_frontmatter(content)
    return FetchedSkill(
        id=item_id,
        name=parsed.get_str("name") or item_id,
        description=parsed.get_str("description") or "",
        content=content,
        source=source,
    )


def fetch_skill_from_source(
    source: str,
    http: HttpClient,
    content_type: ContentType = ContentType.SKILLS,
) -> FetchedSkill:
    """Parse a source string and fetch it.

    Raises:
        UnparseableSource: If the string is not a recognized source
        SourceFetchFailed: If the content cannot be fetched
    """
    return fetch_skill(parse_source(source), http, content_type)


def list_github_skills(
    owner: str,
    repo: str,
    http: HttpClient,
    branch: str = DEFAULT_BRANCH,
) -> list[str]:
    """Discover skill directories in a GitHub repository.

    Tries `skills/` first, then the repository root: a root SKILL.md means
    the repository is a single skill; otherwise each child directory is
    probed for a SKILL.md. Failed probes count as "not a skill".
    """
    listing = _get_contents(http, owner, repo, "skills", branch)
    if listing is not None:
        return [entry["name"] for entry in listing if entry.get("type") == "dir"]
    return _list_github_skills_root(owner, repo, http, branch)


def _list_github_skills_root(owner: str, repo: str, http: HttpClient, branch: str) -> list[str]:
    listing = _get_contents(http, owner, repo, "", branch)
    if listing is None:
        return []

    if any(e.get("name") == "SKILL.md" and e.get("type") == "file" for e in listing):
        return [repo]

    skill_dirs: list[str] = []
    for entry in listing:
        if entry.get("type") != "dir":
            continue
        children = _get_contents(http, owner, repo, entry["name"], branch)
        if children is None:
            continue
        if any(child.get("name") == "SKILL.md" for child in children):
            skill_dirs.append(entry["name"])
    return skill_dirs


def _get_contents(
    http: HttpClient, owner: str, repo: str, path: str, branch: str
) -> list[dict[str, Any]] | None:
    """GitHub contents API listing, or None if the probe failed for any reason."""
    suffix = f"/{path}" if path else ""
    url = f"{GITHUB_API_BASE}/repos/{owner}/{repo}/contents{suffix}?ref={branch}"
    try:
        data = http.get_json(url, headers=GITHUB_API_HEADERS)
    except (SourceFetchFailed, json.JSONDecodeError) as e:
        logger.debug("Listing %s failed: %s", url, e)
        return None
    if not isinstance(data, list):
        return None
    return [entry for entry in data if isinstance(entry, dict)]


def to_catalog_item(fetched: FetchedSkill, content_type: ContentType) -> CatalogItem:
    """Wrap fetched content as an installable item."""
    return CatalogItem(
        id=fetched.id,
        name=fetched.name,
        description=fetched.description,
        type=content_type,
        content=fetched.content,
        source=get_source_display_string(fetched.source),
    )
