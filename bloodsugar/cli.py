"""Interactive command for averaging blood sugar readings."""

from __future__ import annotations

import sys
from typing import Sequence

from .averages import calculate_number_ave, calculate_range_ave
from .reader import read_file
from .validation import Ask, Say, get_valid_char, get_valid_string

_FILE_PROMPT = "Enter the file name for the data: "
_COMMAND_PROMPT = (
    "Do you want an average for a range of dates (r) "
    "or an average for the last number of days (n): "
)
_REDO_PROMPT = "Do you want to calculate another average? Type 'y' for yes or 'n' for no: "


def run(ask: Ask = input, say: Say = print) -> int:
    """Run the interactive session and return the exit status."""
    filename = get_valid_string(_FILE_PROMPT, ask)
    try:
        entries = read_file(filename)
    except OSError:
        get_valid_string(_FILE_PROMPT, ask)
        return 0

    redo = "y"
    while redo == "y":
        command = get_valid_char(_COMMAND_PROMPT, ask)
        while command == "y":
            command = get_valid_char(_COMMAND_PROMPT, ask)
        if command == "r":
            calculate_range_ave(entries, ask, say)
        elif command == "n":
            calculate_number_ave(entries, ask, say)
        redo = get_valid_char(_REDO_PROMPT, ask)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start the session on standard input and output."""
    try:
        return run(ask=input, say=print)
    except (EOFError, KeyboardInterrupt):
        return 1
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())