"""Exception taxonomy for ai-skills.

Errors scoped to a single (item, assistant) pair are collected into an
InstallSummary by the installer. Errors without per-item granularity
(source parsing, lock document I/O) propagate and fail the whole command.
"""


class AiSkillsError(Exception):
    """Base class for all well-known ai-skills errors."""


class UnparseableSource(AiSkillsError):
    """Raised when a source string matches none of the known source forms."""

    def __init__(self, source: str, reason: str | None = None) -> None:
        self.source = source
        self.reason = reason
        message = f"Unable to parse source: {source}"
        if reason is not None:
            message += f" ({reason})"
        super().__init__(message)


class SourceFetchFailed(AiSkillsError):
    """Raised when content cannot be fetched after any documented fallback."""

    def __init__(self, url: str, status: int | None, detail: str | None = None) -> None:
        self.url = url
        self.status = status
        self.detail = detail
        if status is not None:
            message = f"Failed to fetch {url}: HTTP {status}"
        else:
            message = f"Failed to fetch {url}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class DestinationConflict(AiSkillsError):
    """Raised when a write would replace content this tool does not own."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class LockReadWriteFailure(AiSkillsError):
    """Raised when the lock document is malformed or cannot be written."""

    def __init__(self, lock_path: str, detail: str) -> None:
        self.lock_path = lock_path
        self.detail = detail
        super().__init__(f"Lock file {lock_path} is unusable: {detail}")


class UnknownContentType(AiSkillsError):
    """Raised when a content type name is not one of the fixed types."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Unknown content type: {value} "
            "(expected one of skills, agents, commands, rules, prompts)"
        )


class UnknownAssistant(AiSkillsError):
    """Raised when an assistant id is not in the registry."""

    def __init__(self, assistant_ids: list[str]) -> None:
        self.assistant_ids = assistant_ids
        super().__init__(f"Unknown assistant(s): {', '.join(assistant_ids)}")
