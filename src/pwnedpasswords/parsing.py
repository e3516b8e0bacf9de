"""
Parsing of range API response bodies.

The body is one "SUFFIX:COUNT" entry per line. Padded responses mix decoy
entries (count 0) in with real ones, so a line that does not parse is
reported as a MalformedLine and skipped rather than raised.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from pwnedpasswords.hashing import SUFFIX_LENGTH, is_hex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RangeEntry:
    """A well-formed candidate line."""

    suffix: str
    count: int


@dataclass(frozen=True)
class MalformedLine:
    """A line that is not SUFFIX:COUNT."""

    line_number: int
    raw: str


def parse_range_line(line: str, line_number: int = 0) -> RangeEntry | MalformedLine:
    """Parse a single response line.

    Args:
        line: Raw line, trailing CR/LF allowed
        line_number: Position in the body, for diagnostics

    Returns:
        RangeEntry with an uppercase suffix, or MalformedLine
    """
    text = line.strip()
    hash_suffix, sep, count = text.partition(":")

    if not sep or not is_hex(hash_suffix, SUFFIX_LENGTH):
        return MalformedLine(line_number, line)
    # str.isdigit() alone accepts non-ASCII digits
    if not count or not count.isascii() or not count.isdigit():
        return MalformedLine(line_number, line)

    return RangeEntry(suffix=hash_suffix.upper(), count=int(count))


def iter_range_entries(lines: Iterable[str] | str) -> Iterator[RangeEntry | MalformedLine]:
    """Parse every non-blank line of a response body.

    Args:
        lines: Iterable of lines, or the whole body as a string

    Yields:
        RangeEntry or MalformedLine per non-blank line
    """
    if isinstance(lines, str):
        lines = lines.splitlines()

    for line_number, line in enumerate(lines, start=1):
        if not line or line.isspace():
            continue
        yield parse_range_line(line, line_number)


def find_occurrences(suffix: str, lines: Iterable[str] | str) -> int:
    """Find how often a digest suffix appears in a response body.

    Comparison is case-insensitive. The first matching entry wins; later
    duplicates are ignored.

    Returns:
        Count of the first matching entry, or 0 if none matches
    """
    wanted = suffix.upper()
    malformed = 0

    for entry in iter_range_entries(lines):
        if isinstance(entry, MalformedLine):
            malformed += 1
            continue
        if entry.suffix == wanted:
            if malformed:
                logger.debug(f"Skipped {malformed} malformed range line(s)")
            return entry.count

    if malformed:
        logger.debug(f"Skipped {malformed} malformed range line(s)")
    return 0
