"""A single blood sugar reading."""

from __future__ import annotations

from dataclasses import dataclass

from .date import Date


@dataclass(frozen=True)
class Entry:
    """A blood sugar level taken on a given date."""

    date: Date
    value: int

    @classmethod
    def from_text(cls, date: str, value: int) -> "Entry":
        """Build an entry from a ``month/day/year`` date and a level."""
        return cls(Date.parse(date), value)