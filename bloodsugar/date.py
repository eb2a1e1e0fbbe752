"""Calendar dates as written in the reading files (month/day/year)."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


@dataclass(frozen=True)
class Date:
    """A day identified by month, day and year, exactly as the file gives them."""

    month: int = 1
    day: int = 1
    year: int = 2023

    @classmethod
    def parse(cls, text: str) -> "Date":
        """Build a date from ``month/day/year`` text such as ``5/20/20``."""
        parts = text.split("/")
        if len(parts) < 3:
            raise ValueError(f"date {text!r} is not in month/day/year form")
        month, day, year = (_leading_int(part) for part in parts[:3])
        return cls(month, day, year)

    def __str__(self) -> str:
        return f"{self.month}/{self.day}/{self.year}"