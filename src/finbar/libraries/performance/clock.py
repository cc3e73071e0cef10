"""Clock abstraction for code that depends on "today"."""

from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Source of the current calendar date."""

    def today(self) -> date:
        """Return the current calendar date."""
        ...


class SystemClock:
    """Clock backed by the local wall clock."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock pinned to a single date (tests, reproducible CLI runs)."""

    def __init__(self, fixed: date):
        self._fixed = fixed

    def today(self) -> date:
        return self._fixed

    def __repr__(self) -> str:
        return f"FixedClock({self._fixed.isoformat()})"
