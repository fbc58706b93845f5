"""Escape sequences and ANSI-aware line clipping.

The selector draws with absolute cursor positioning, so every control
sequence the screen writer emits lives here.
Clipping keeps styled rows from wrapping onto the next screen row.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8

CLEAR_SCREEN = "\x1b[2J"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
FG_RESET = "\x1b[39m"
BG_RESET = "\x1b[49m"
FG_BLACK = "\x1b[30m"
BG_WHITE = "\x1b[47m"
REVERSE = "\x1b[7m"
RESET = "\x1b[0m"


def goto(row: int, col: int = 1) -> str:
    """Return a cursor-position sequence for 1-based ``row``/``col``."""
    return f"\x1b[{max(1, row)};{max(1, col)}H"


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width,
    so a trailing reset survives clipping. Tabs become spaces.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    full = False
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if full or col + w > max_cols:
            # Drop the remaining visible text but keep styling sequences.
            full = True
            i += 1
            continue
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1

    return "".join(out)
