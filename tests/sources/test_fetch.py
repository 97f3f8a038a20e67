"""Tests for fetching content from GitHub, URLs and local paths."""

import json
from pathlib import Path

import pytest

from ai_skills.errors import SourceFetchFailed
from ai_skills.models.content import ContentType
from ai_skills.models.source import GitHubSource, LocalSource, UrlSource
from ai_skills.sources.fetch import (
    fetch_skill,
    fetch_skill_from_source,
    list_github_skills,
    to_catalog_item,
)
from tests.fakes.http import FakeHttpClient

RAW = "https://raw.githubusercontent.com"
API = "https://api.github.com"

SKILL_MD = """---
name: React Patterns
description: Hooks and components
---
# React
"""


def test_fetch_github_main_branch() -> None:
    http = FakeHttpClient(responses={f"{RAW}/o/react/main/SKILL.md": (200, SKILL_MD)})

    fetched = fetch_skill(GitHubSource(owner="o", repo="react"), http)

    assert fetched.id == "react"
    assert fetched.name == "React Patterns"
    assert fetched.description == "Hooks and components"
    assert fetched.content == SKILL_MD
    assert http.requested_urls == [f"{RAW}/o/react/main/SKILL.md"]


def test_fetch_github_falls_back_to_master_once() -> None:
    """Test that an implicit branch retries on master after a 404 on main."""
    http = FakeHttpClient(responses={f"{RAW}/o/r/master/skills/x/SKILL.md": (200, SKILL_MD)})

    fetched = fetch_skill(GitHubSource(owner="o", repo="r", path="skills/x"), http)

    assert fetched.id == "x"
    assert http.requested_urls == [
        f"{RAW}/o/r/main/skills/x/SKILL.md",
        f"{RAW}/o/r/master/skills/x/SKILL.md",
    ]


def test_fetch_github_fails_after_both_branches() -> None:
    http = FakeHttpClient()

    with pytest.raises(SourceFetchFailed) as exc_info:
        fetch_skill(GitHubSource(owner="o", repo="r"), http)

    assert exc_info.value.status == 404
    assert len(http.requested_urls) == 2


def test_fetch_github_explicit_branch_has_no_fallback() -> None:
    http = FakeHttpClient()

    with pytest.raises(SourceFetchFailed):
        fetch_skill(GitHubSource(owner="o", repo="r", branch="dev"), http)

    assert http.requested_urls == [f"{RAW}/o/r/dev/SKILL.md"]


def test_fetch_github_uses_content_type_file_name() -> None:
    http = FakeHttpClient(responses={f"{RAW}/o/reviewer/main/AGENT.md": (200, "# Reviewer")})

    fetched = fetch_skill(GitHubSource(owner="o", repo="reviewer"), http, ContentType.AGENTS)

    assert fetched.content == "# Reviewer"
    assert fetched.name == "reviewer"


def test_fetch_url_has_no_fallback() -> None:
    url = "https://example.com/review.md"
    http = FakeHttpClient(responses={url: (500, "boom")})

    with pytest.raises(SourceFetchFailed) as exc_info:
        fetch_skill(UrlSource(url=url), http)

    assert exc_info.value.status == 500
    assert http.requested_urls == [url]


def test_fetch_url_network_error() -> None:
    url = "https://example.com/review.md"
    http = FakeHttpClient(unreachable={url})

    with pytest.raises(SourceFetchFailed):
        fetch_skill(UrlSource(url=url), http)


def test_fetch_local_directory(tmp_path: Path) -> None:
    skill_dir = tmp_path / "helper"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").write_text(SKILL_MD, encoding="utf-8")

    fetched = fetch_skill(LocalSource(path=str(skill_dir)), FakeHttpClient())

    assert fetched.id == "helper"
    assert fetched.name == "React Patterns"


def test_fetch_local_file(tmp_path: Path) -> None:
    skill_file = tmp_path / "notes.md"
    skill_file.write_text("# Notes\n", encoding="utf-8")

    fetched = fetch_skill(LocalSource(path=str(skill_file)), FakeHttpClient())

    assert fetched.content == "# Notes\n"
    assert fetched.name == "notes.md"
    assert fetched.description == ""


def test_fetch_local_falls_back_to_skill_file(tmp_path: Path) -> None:
    agent_dir = tmp_path / "reviewer"
    agent_dir.mkdir()
    (agent_dir / "SKILL.md").write_text(SKILL_MD, encoding="utf-8")

    fetched = fetch_skill(LocalSource(path=str(agent_dir)), FakeHttpClient(), ContentType.AGENTS)

    assert fetched.id == "reviewer"
    assert fetched.content == SKILL_MD


def test_fetch_local_missing(tmp_path: Path) -> None:
    with pytest.raises(SourceFetchFailed):
        fetch_skill(LocalSource(path=str(tmp_path / "nope")), FakeHttpClient())


def test_fetch_skill_from_source_string() -> None:
    http = FakeHttpClient(responses={f"{RAW}/o/r/main/SKILL.md": (200, SKILL_MD)})

    item = to_catalog_item(fetch_skill_from_source("o/r", http), ContentType.SKILLS)

    assert item.id == "r"
    assert item.source == "github:o/r"
    assert item.content == SKILL_MD
    assert item.path is None


def _listing(*entries: tuple[str, str]) -> tuple[int, str]:
    return 200, json.dumps([{"name": name, "type": kind} for name, kind in entries])


def test_list_github_skills_from_skills_dir() -> None:
    http = FakeHttpClient(
        responses={
            f"{API}/repos/o/r/contents/skills?ref=main": _listing(
                ("react", "dir"), ("README.md", "file"), ("vue", "dir")
            )
        }
    )

    assert list_github_skills("o", "r", http) == ["react", "vue"]


def test_list_github_skills_single_skill_repo() -> None:
    http = FakeHttpClient(
        responses={f"{API}/repos/o/r/contents?ref=main": _listing(("SKILL.md", "file"))}
    )

    assert list_github_skills("o", "r", http) == ["r"]


def test_list_github_skills_probes_root_directories() -> None:
    """Test that failed probes count as "not a skill" rather than errors."""
    http = FakeHttpClient(
        responses={
            f"{API}/repos/o/r/contents?ref=main": _listing(
                ("alpha", "dir"), ("beta", "dir"), ("gamma", "dir"), ("setup.py", "file")
            ),
            f"{API}/repos/o/r/contents/alpha?ref=main": _listing(("SKILL.md", "file")),
            f"{API}/repos/o/r/contents/beta?ref=main": _listing(("index.ts", "file")),
        },
        unreachable={f"{API}/repos/o/r/contents/gamma?ref=main"},
    )

    assert list_github_skills("o", "r", http) == ["alpha"]


def test_list_github_skills_nothing_found() -> None:
    assert list_github_skills("o", "r", FakeHttpClient()) == []
