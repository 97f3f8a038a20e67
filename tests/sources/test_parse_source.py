"""Tests for source string parsing."""

from pathlib import Path

import pytest

from ai_skills.errors import UnparseableSource
from ai_skills.models.source import GitHubSource, LocalSource, UrlSource
from ai_skills.sources.parse import (
    derive_item_id,
    get_source_display_string,
    parse_display_string,
    parse_github_url,
    parse_source,
)


@pytest.mark.parametrize("source", ["./my-skill", "../shared/skill", "/abs/path/skill"])
def test_parse_source_local_prefixes(source: str) -> None:
    """Test that path prefixes always mean a local source."""
    assert parse_source(source) == LocalSource(path=source)


def test_parse_source_shorthand() -> None:
    assert parse_source("vercel-labs/agent-skills") == GitHubSource(
        owner="vercel-labs", repo="agent-skills"
    )


def test_parse_source_shorthand_with_path() -> None:
    result = parse_source("owner/repo/skills/react")
    assert result == GitHubSource(owner="owner", repo="repo", path="skills/react")


def test_parse_source_shorthand_with_skill_file_suffix() -> None:
    """Test that a trailing /SKILL.md is dropped from the path."""
    result = parse_source("owner/repo/skills/react/SKILL.md")
    assert result == GitHubSource(owner="owner", repo="repo", path="skills/react")


def test_parse_source_github_tree_url() -> None:
    result = parse_source("https://github.com/owner/repo/tree/main/skills/react")
    assert result == GitHubSource(owner="owner", repo="repo", branch="main", path="skills/react")


def test_parse_source_github_blob_url_with_skill_file() -> None:
    result = parse_source("https://github.com/owner/repo/blob/dev/react/SKILL.md")
    assert result == GitHubSource(owner="owner", repo="repo", branch="dev", path="react")


def test_parse_source_github_repo_url_strips_git_suffix() -> None:
    assert parse_source("https://github.com/owner/repo.git") == GitHubSource(
        owner="owner", repo="repo"
    )


def test_parse_source_github_url_without_scheme() -> None:
    assert parse_source("github.com/owner/repo") == GitHubSource(owner="owner", repo="repo")


def test_parse_source_generic_url() -> None:
    url = "https://example.com/skills/review.md"
    assert parse_source(url) == UrlSource(url=url)


def test_parse_source_github_url_wins_over_generic_url() -> None:
    assert isinstance(parse_source("https://github.com/owner/repo"), GitHubSource)


@pytest.mark.parametrize("source", ["just-a-name", "", "ftp://example.com/x", "a b/c"])
def test_parse_source_unparseable(source: str) -> None:
    with pytest.raises(UnparseableSource):
        parse_source(source)


def test_parse_github_url_requires_owner_and_repo() -> None:
    with pytest.raises(UnparseableSource, match="owner and repository"):
        parse_github_url("https://github.com/owner")


def test_derive_item_id_from_github_path() -> None:
    source = GitHubSource(owner="o", repo="repo", path="skills/react/")
    assert derive_item_id(source) == "react"


def test_derive_item_id_from_github_repo() -> None:
    assert derive_item_id(GitHubSource(owner="o", repo="my-skill")) == "my-skill"


def test_derive_item_id_from_local_path() -> None:
    assert derive_item_id(LocalSource(path="./skills/helper/")) == "helper"


def test_derive_item_id_from_url() -> None:
    assert derive_item_id(UrlSource(url="https://example.com/a/review.md")) == "review.md"
    assert derive_item_id(UrlSource(url="https://example.com")) == "skill"


def test_display_string_forms() -> None:
    assert get_source_display_string(GitHubSource(owner="o", repo="r")) == "github:o/r"
    assert (
        get_source_display_string(GitHubSource(owner="o", repo="r", branch="dev", path="a/b"))
        == "github:o/r/a/b@dev"
    )
    assert get_source_display_string(UrlSource(url="https://x.dev/s.md")) == "https://x.dev/s.md"
    assert get_source_display_string(LocalSource(path="./s")) == "local:./s"


@pytest.mark.parametrize(
    "source",
    [
        GitHubSource(owner="o", repo="r"),
        GitHubSource(owner="o", repo="r", branch="dev", path="skills/x"),
        UrlSource(url="https://example.com/x.md"),
        LocalSource(path="/tmp/skill"),
    ],
)
def test_parse_display_string_inverts_display(
    source: GitHubSource | UrlSource | LocalSource,
) -> None:
    """Test that update can recover the source recorded in the lock file."""
    assert parse_display_string(get_source_display_string(source)) == source


def test_parse_display_string_builtin() -> None:
    assert parse_display_string("builtin") is None


def test_derive_item_id_from_parent_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "helper" / "sub").mkdir(parents=True)
    monkeypatch.chdir(tmp_path / "helper" / "sub")

    assert derive_item_id(LocalSource(path="../")) == "helper"
    assert derive_item_id(LocalSource(path=".")) == "sub"


def test_parse_source_shorthand_with_agent_file_suffix() -> None:
    result = parse_source("owner/repo/agents/reviewer/AGENT.md")
    assert result == GitHubSource(owner="owner", repo="repo", path="agents/reviewer")
