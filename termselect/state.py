"""Selector state: cursor position, selection set, and scroll offset.

All mutations here are pure state transitions with no terminal I/O.
Content line 0 is the header, so the cursor lives in ``[1, entry_count]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SelectorState:
    entries: tuple[str, ...]
    cursor: int = 1
    selected: set[int] = field(default_factory=set)
    scroll_top: int = 0

    def __post_init__(self) -> None:
        self.entries = tuple(self.entries)
        if not self.entries:
            raise ValueError("selector needs at least one entry")
        if not 1 <= self.cursor <= len(self.entries):
            self.cursor = 1

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    @property
    def selected_count(self) -> int:
        return len(self.selected)

    @property
    def cursor_index(self) -> int:
        """0-based entry index under the cursor."""
        return self.cursor - 1

    def is_selected(self, index: int) -> bool:
        return index in self.selected

    def go_top(self) -> None:
        self.cursor = 1

    def go_bottom(self) -> None:
        self.cursor = self.entry_count

    def move_down(self) -> None:
        """Move one entry down, wrapping from the last entry to the first."""
        self.cursor += 1
        if self.cursor > self.entry_count:
            self.go_top()

    def move_up(self) -> None:
        """Move one entry up, wrapping from the first entry to the last."""
        self.cursor -= 1
        if self.cursor < 1:
            self.go_bottom()

    def toggle_selection(self) -> None:
        """Flip the entry under the cursor, then advance.

        Advancing lets a held select key sweep through consecutive entries.
        """
        index = self.cursor_index
        if index in self.selected:
            self.selected.remove(index)
        else:
            self.selected.add(index)
        self.move_down()

    def select_all(self) -> None:
        self.selected = set(range(self.entry_count))

    def select_none(self) -> None:
        self.selected.clear()

    def retrieve_selection(self) -> tuple[int, ...] | None:
        """Return selected entry indices in ascending order, or ``None`` if empty."""
        if not self.selected:
            return None
        return tuple(sorted(self.selected))
