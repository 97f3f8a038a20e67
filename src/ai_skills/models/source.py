"""Content source models.

ContentSource is a closed union. Consumers match on it and end with
`assert_never` so a new variant is reported by the type checker.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GitHubSource:
    """A file or directory inside a GitHub repository."""

    owner: str
    repo: str
    branch: str | None = None
    path: str | None = None


@dataclass(frozen=True)
class UrlSource:
    """A raw markdown document at an arbitrary URL."""

    url: str


@dataclass(frozen=True)
class LocalSource:
    """A skill directory or markdown file on the local filesystem."""

    path: str


ContentSource = GitHubSource | UrlSource | LocalSource


@dataclass(frozen=True)
class FetchedSkill:
    """Content fetched from a non-builtin source."""

    id: str
    name: str
    description: str
    content: str
    source: ContentSource
