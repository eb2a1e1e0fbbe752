"""Averages of blood sugar levels over a date range or the last few days."""

from __future__ import annotations

from typing import Sequence

from .date import Date
from .entry import Entry
from .validation import Ask, Say, get_valid_date_range, get_valid_int

_START_PROMPT = "Please enter a start date for the range date: "
_END_PROMPT = "Please enter a end date for the range date: "
_DAYS_PROMPT = "Please enter the number of days to calculate the average for: "


def _truncating_div(total: int, count: int) -> int:
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


def get_index_for_date(entries: Sequence[Entry], date: str) -> int:
    """Position of the first entry taken on ``date``."""
    wanted = Date.parse(date)
    for index, entry in enumerate(entries):
        if entry.date == wanted:
            return index
    raise ValueError(f"no entry on {date}")


def range_average(entries: Sequence[Entry], start: str, end: str) -> tuple[int, int]:
    """Whole-number average of the entries from ``start`` to ``end``, and their count."""
    first = get_index_for_date(entries, start)
    last = get_index_for_date(entries, end)
    selected = entries[first : last + 1]
    if not selected:
        raise ValueError(f"{end} comes before {start}")
    total = sum(entry.value for entry in selected)
    return _truncating_div(total, len(selected)), len(selected)


def last_days_average(entries: Sequence[Entry], days: int) -> int:
    """Whole-number average of the last ``days`` entries."""
    if not 1 <= days <= len(entries):
        raise ValueError(f"days must be between 1 and {len(entries)}, got {days}")
    total = sum(entry.value for entry in entries[-days:])
    return _truncating_div(total, days)


def calculate_range_ave(entries: Sequence[Entry], ask: Ask = input, say: Say = print) -> None:
    """Ask for a date range and report the average over it."""
    start = get_valid_date_range(_START_PROMPT, entries, ask, say)
    end = get_valid_date_range(_END_PROMPT, entries, ask, say)
    average, days = range_average(entries, start, end)
    say(f"The average from {start} to {end} ({days} days) is {average}.")


def calculate_number_ave(entries: Sequence[Entry], ask: Ask = input, say: Say = print) -> None:
    """Ask for a number of days and report the average over the last ones."""
    size = len(entries)
    days = get_valid_int(_DAYS_PROMPT, ask)
    while days < 1 or days > size:
        # A negative count is reported as too big, like any count above the size.
        if days > size or days < 0:
            say(
                "The number of days you entered was too big. "
                f"Please enter a number less than {size}."
            )
        else:
            say(
                "The number of days you entered was too small (less than 1). "
                f"Please enter a number greater than 0 and less than {size}."
            )
        days = get_valid_int(_DAYS_PROMPT, ask)
    average = last_days_average(entries, days)
    say(f"The average for the last {days} days is {average}.")