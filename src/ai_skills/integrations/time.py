"""Clock abstraction so lock timestamps are deterministic in tests."""

from abc import ABC, abstractmethod
from datetime import UTC, datetime


class Time(ABC):
    """Abstract clock."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as an aware datetime."""
        ...

    def now_iso(self) -> str:
        """Return the current time as an ISO-8601 string."""
        return self.now().isoformat()


class RealTime(Time):
    """Production clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)
