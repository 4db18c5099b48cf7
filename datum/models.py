"""Value objects returned by the date arithmetic helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Final

DAY_MS: Final[int] = 24 * 60 * 60 * 1000


@dataclass(frozen=True, slots=True)
class Duration:
    """Absolute distance between two calendar dates."""

    days: int
    milliseconds: int

    @classmethod
    def from_days(cls, days: int) -> "Duration":
        days = abs(days)
        return cls(days=days, milliseconds=days * DAY_MS)

    def as_timedelta(self) -> timedelta:
        """Return the duration as a :class:`~datetime.timedelta`."""
        return timedelta(milliseconds=self.milliseconds)


__all__ = ["DAY_MS", "Duration"]
