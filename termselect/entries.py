"""Entry parsing and display-string formatting.

Turns raw input lines into the display strings shown by the selector and
maps selected indices back to the text printed on stdout.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import BinaryIO, TextIO

logger = logging.getLogger(__name__)

IDENTIFIER_SEPARATOR = "::"


@dataclass(frozen=True)
class Entry:
    identifier: str
    text: str
    raw: str


def read_entries(stream: BinaryIO | TextIO) -> list[str]:
    """Read one entry per line with surrounding whitespace trimmed.

    Byte streams are decoded line by line; a line that is not valid UTF-8 is
    skipped so one bad line never aborts the read.
    """
    entries: list[str] = []
    for raw_line in stream.read().splitlines():
        if isinstance(raw_line, bytes):
            try:
                raw_line = raw_line.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("skipping undecodable input line: %r", raw_line)
                continue
        entries.append(raw_line.strip())
    return entries


def parse_entry(line: str, with_identifier: bool = False) -> Entry:
    """Split ``identifier::text`` when requested.

    A line without the separator keeps its whole content as text and gets an
    empty identifier.
    """
    if not with_identifier:
        return Entry(identifier="", text=line, raw=line)
    identifier, sep, text = line.partition(IDENTIFIER_SEPARATOR)
    if not sep:
        logger.debug("entry without identifier separator: %r", line)
        return Entry(identifier="", text=line, raw=line)
    return Entry(identifier=identifier.strip(), text=text.strip(), raw=line)


def parse_entries(lines: Iterable[str], with_identifier: bool = False) -> list[Entry]:
    return [parse_entry(line, with_identifier) for line in lines]


def padded_number(n: int, max_n: int) -> str:
    """Zero-pad ``n`` to the digit count of ``max_n``."""
    return str(n).zfill(len(str(max_n)))


def build_display_lines(entries: Sequence[Entry], numbered: bool = False) -> list[str]:
    """Return selector display strings, index-aligned with ``entries``."""
    if not numbered:
        return [entry.text for entry in entries]
    total = len(entries)
    return [f" {padded_number(idx, total)} {entry.text}" for idx, entry in enumerate(entries, start=1)]


def format_output(entry: Entry, print_identifier: bool = False) -> str:
    """Text written to stdout for one selected entry."""
    if print_identifier:
        return entry.identifier
    return entry.raw
