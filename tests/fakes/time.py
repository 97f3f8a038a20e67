"""Fake Time implementation for testing."""

from datetime import UTC, datetime

from ai_skills.integrations.time import Time

DEFAULT_NOW = datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)


class FakeTime(Time):
    """Clock frozen at a constructor-provided instant."""

    def __init__(self, now: datetime = DEFAULT_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now
