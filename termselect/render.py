"""Content assembly, scroll-window math, and frame drawing.

Rendering is a projection of ``SelectorState`` onto screen rows: it reads the
cursor and selection, and only ever updates ``scroll_top``.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .ansi import CLEAR_SCREEN, HIDE_CURSOR, clip_ansi_line, goto
from .state import SelectorState
from .ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)

DEFAULT_CURSOR_MARKER = ">"
KEY_LEGEND = "[l/right:select  enter:run selection  q/h/left:quit  a:select all  n:deselect all]"


class ScreenWriter(Protocol):
    def dimensions(self) -> tuple[int, int]: ...

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...


def make_header_line(state: SelectorState, theme: UITheme = DEFAULT_THEME) -> str:
    """Header row: selection count, total count, and the key legend."""
    return (
        f"{theme.header} ({state.selected_count} selected / {state.entry_count} total)  "
        f"{KEY_LEGEND} {theme.reset}"
    )


def make_entry_lines(
    state: SelectorState,
    theme: UITheme = DEFAULT_THEME,
    marker: str = DEFAULT_CURSOR_MARKER,
) -> list[str]:
    lines: list[str] = []
    for idx, entry in enumerate(state.entries):
        prefix = marker if idx == state.cursor_index else " "
        if state.is_selected(idx):
            lines.append(f"{theme.selected}{prefix} {entry}{theme.reset}")
        else:
            lines.append(f"{prefix} {entry}")
    return lines


def make_content(
    state: SelectorState,
    theme: UITheme = DEFAULT_THEME,
    marker: str = DEFAULT_CURSOR_MARKER,
) -> list[str]:
    return [make_header_line(state, theme), *make_entry_lines(state, theme, marker)]


def usable_rows(terminal_rows: int) -> int:
    """Rows available for content; the last row is left for the shell prompt."""
    return max(1, terminal_rows - 1)


def compute_scroll_top(cursor: int, scroll_top: int, max_rows: int) -> int:
    """Return the next scroll offset for a cursor at entry ``cursor``.

    A cursor at or above the window snaps the view back to the top instead of
    scrolling minimally; a cursor below the window scrolls just far enough to
    put it on the bottom row. The second rule also runs after a snap, so the
    cursor row is on screen even when the top of the list is not near it; this
    only differs from a strict either-or rule in cases where that rule would
    leave the cursor off screen.
    """
    cur_line = cursor + 1
    if cur_line <= scroll_top:
        scroll_top = 0
    if cur_line - scroll_top > max_rows:
        scroll_top = cur_line - max_rows
    return scroll_top


def clamp_scroll_top(scroll_top: int, total_lines: int, max_rows: int) -> int:
    """Pull the window start back so a grown viewport stays full."""
    return max(0, min(scroll_top, total_lines - max_rows))


def visible_lines(content: list[str], scroll_top: int, max_rows: int) -> list[str]:
    count = min(max_rows, len(content))
    return content[scroll_top : scroll_top + count]


def lines_to_draw(state: SelectorState, content: list[str], max_rows: int) -> list[str]:
    """Advance ``state.scroll_top`` for the current viewport and slice ``content``."""
    scroll_top = compute_scroll_top(state.cursor, state.scroll_top, max_rows)
    clamped = clamp_scroll_top(scroll_top, len(content), max_rows)
    if clamped != scroll_top:
        logger.debug("scroll offset clamped from %d to %d after resize", scroll_top, clamped)
    state.scroll_top = clamped
    return visible_lines(content, clamped, max_rows)


def render_frame(
    state: SelectorState,
    screen: ScreenWriter,
    theme: UITheme = DEFAULT_THEME,
    marker: str = DEFAULT_CURSOR_MARKER,
) -> None:
    """Clear the screen and draw the visible window, flushing once at the end."""
    rows, cols = screen.dimensions()
    content = make_content(state, theme, marker)
    lines = lines_to_draw(state, content, usable_rows(rows))

    screen.write(CLEAR_SCREEN + goto(1, 1) + HIDE_CURSOR)
    for row, line in enumerate(lines, start=1):
        screen.write(goto(row, 1) + clip_ansi_line(line, cols))
    screen.flush()
