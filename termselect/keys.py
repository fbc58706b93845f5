"""Key-combo registry and the selector key map."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .state import SelectorState


class Outcome(Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


KeyHandler = Callable[[], "Outcome | None"]


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: KeyHandler


class KeyComboRegistry:
    """Small key-dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, KeyHandler] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> Outcome | None:
        """Invoke the handler bound to ``key``; unbound keys are ignored."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


def _cancel() -> Outcome:
    return Outcome.CANCELLED


def _confirm() -> Outcome:
    return Outcome.CONFIRMED


def build_selector_keymap(state: SelectorState) -> KeyComboRegistry:
    """Bind navigation and selection keys to mutations of ``state``."""

    def run(action: Callable[[], None]) -> KeyHandler:
        def handler() -> None:
            action()
            return None

        return handler

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("LEFT", "q", "h"), _cancel),
        KeyComboBinding(("UP", "k"), run(state.move_up)),
        KeyComboBinding(("DOWN", "j"), run(state.move_down)),
        KeyComboBinding(("RIGHT", "l"), run(state.toggle_selection)),
        KeyComboBinding(("a",), run(state.select_all)),
        KeyComboBinding(("n",), run(state.select_none)),
        KeyComboBinding(("ENTER",), _confirm),
    )
