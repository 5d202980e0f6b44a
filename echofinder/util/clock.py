"""Clock abstraction so time-dependent rules can be tested deterministically."""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class Clock:
    """System clock."""

    def now(self) -> datetime:
        return utc_now()


class FixedClock(Clock):
    """Clock frozen at a given instant. Can be advanced manually."""

    def __init__(self, instant: datetime | None = None) -> None:
        self._instant = instant or utc_now()

    def now(self) -> datetime:
        return self._instant

    def advance(self, delta: timedelta) -> None:
        """Move the clock forward by delta."""
        self._instant = self._instant + delta
