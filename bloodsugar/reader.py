"""Reading blood sugar entries from carriage-return separated CSV data."""

from __future__ import annotations

import os
import re
from typing import TextIO

from .entry import Entry

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def _parse_record(record: str) -> Entry:
    fields = record.split(",")
    if len(fields) < 2:
        raise ValueError(f"record {record!r} has no reading")
    return Entry.from_text(fields[0], _parse_int(fields[1]))


def read_entries(stream: TextIO) -> list[Entry]:
    """Read entries from ``stream``; records end in ``\\r`` and the first is a header."""
    records = stream.read().split("\r")[1:]
    return [_parse_record(record) for record in records if record.strip()]


def read_file(path: str | os.PathLike[str]) -> list[Entry]:
    """Read the entries stored in the file at ``path``."""
    with open(path, newline="") as stream:
        return read_entries(stream)