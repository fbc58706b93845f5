"""Interactive selector session: the read-evaluate-render loop.

``run_selector`` takes exclusive control of the terminal, blocks on key
events, re-renders after every key that keeps the session running, and
returns a ``SelectionResult`` once the user confirms or quits. The terminal
is restored exactly once on every exit path, including I/O errors.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .keys import Outcome, build_selector_keymap
from .render import DEFAULT_CURSOR_MARKER, render_frame
from .state import SelectorState
from .terminal import TerminalController
from .ui_theme import UITheme, resolve_theme

logger = logging.getLogger(__name__)


class SelectorTerminal(Protocol):
    def raw_mode(self): ...

    def read_key(self) -> str: ...

    def dimensions(self) -> tuple[int, int]: ...

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...


@dataclass(frozen=True)
class SelectionResult:
    """Final result of one session.

    ``indices`` holds 0-based positions into the caller's entry list, or
    ``None`` when nothing was selected. A quit and a confirmed empty selection
    both carry ``None`` and are told apart by ``outcome``.
    """

    outcome: Outcome
    indices: tuple[int, ...] | None = None

    @property
    def cancelled(self) -> bool:
        return self.outcome is Outcome.CANCELLED

    @property
    def confirmed(self) -> bool:
        return self.outcome is Outcome.CONFIRMED


def run_session(
    state: SelectorState,
    terminal: SelectorTerminal,
    *,
    theme: UITheme,
    marker: str = DEFAULT_CURSOR_MARKER,
) -> SelectionResult:
    """Drive ``state`` from key events on an already-acquired ``terminal``."""
    keymap = build_selector_keymap(state)
    with terminal.raw_mode():
        render_frame(state, terminal, theme, marker)
        while True:
            key = terminal.read_key()
            outcome = keymap.dispatch(key)
            if outcome is Outcome.CANCELLED:
                result = SelectionResult(Outcome.CANCELLED)
                break
            if outcome is Outcome.CONFIRMED:
                result = SelectionResult(Outcome.CONFIRMED, state.retrieve_selection())
                break
            render_frame(state, terminal, theme, marker)
    logger.debug(
        "session ended: %s with %d selected",
        result.outcome.value,
        len(result.indices or ()),
    )
    return result


def run_selector(
    display_lines: Sequence[str],
    *,
    terminal: SelectorTerminal | None = None,
    theme: UITheme | None = None,
    marker: str = DEFAULT_CURSOR_MARKER,
) -> SelectionResult:
    """Show ``display_lines`` in the interactive picker and return the result.

    Without an explicit ``terminal`` the controlling tty is opened, which
    raises ``TerminalUnavailableError`` when there is none. Read and write
    failures during the session propagate after the terminal is restored.
    """
    state = SelectorState(tuple(display_lines))
    if theme is None:
        theme = resolve_theme(None)
    logger.debug("starting selector session with %d entries", state.entry_count)
    if terminal is not None:
        return run_session(state, terminal, theme=theme, marker=marker)

    controller = TerminalController.open()
    try:
        return run_session(state, controller, theme=theme, marker=marker)
    finally:
        controller.close()
