"""Prompting until the user gives acceptable input."""

from __future__ import annotations

import re
from typing import Callable, Sequence

from .date import Date
from .entry import Entry

Ask = Callable[[str], str]
Say = Callable[[str], None]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_COMMANDS = ("r", "n", "y")


def _single_token(line: str) -> str | None:
    tokens = line.split()
    return tokens[0] if len(tokens) == 1 else None


def valid_file_format(filename: str) -> bool:
    """Whether ``filename`` names a CSV file."""
    return filename.endswith(".csv")


def valid_format(date: str, say: Say = print) -> bool:
    """Whether ``date`` has the two slashes of month/day/year form."""
    if date.count("/") == 2:
        return True
    say("The date was not in the correct format. Please enter in dd/mm/yy format.")
    return False


def date_in_range(date: str, entries: Sequence[Entry], say: Say = print) -> bool:
    """Whether some entry was taken on ``date``."""
    wanted = Date.parse(date)
    if any(entry.date == wanted for entry in entries):
        return True
    say(
        "This date is not in the range. Please enter in dd/mm/yy format and a date "
        f"in the range of {entries[0].date} and {entries[-1].date}."
    )
    return False


def get_valid_string(prompt: str, ask: Ask = input) -> str:
    """Ask until the answer is a single CSV file name."""
    while True:
        word = _single_token(ask(prompt))
        if word is not None and valid_file_format(word):
            return word


def get_valid_char(prompt: str, ask: Ask = input) -> str:
    """Ask until the answer is one of ``r``, ``n`` or ``y``."""
    while True:
        token = _single_token(ask(prompt))
        if token in _COMMANDS:
            return token


def get_valid_int(prompt: str, ask: Ask = input) -> int:
    """Ask until the answer is a single integer."""
    while True:
        token = _single_token(ask(prompt))
        if token is not None and _INTEGER.fullmatch(token):
            number = int(token)
            if _INT_MIN <= number <= _INT_MAX:
                return number


def get_valid_date_range(
    prompt: str, entries: Sequence[Entry], ask: Ask = input, say: Say = print
) -> str:
    """Ask until the answer is a date on which an entry was taken."""
    while True:
        date = _single_token(ask(prompt))
        if date is not None and valid_format(date, say) and date_in_range(date, entries, say):
            return date