"""Terminal control for one selector session.

Owns the controlling-terminal file descriptor, the raw-mode lifecycle, and
buffered screen output. Reading keys from the tty rather than stdin lets the
entry list arrive on a pipe while the user still drives the picker.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

from .ansi import BG_RESET, CLEAR_SCREEN, FG_RESET, HIDE_CURSOR, SHOW_CURSOR, goto
from .input import read_key

logger = logging.getLogger(__name__)

DEFAULT_TTY_PATH = "/dev/tty"
# (rows, columns) used when the size query fails or reports an empty window.
DEFAULT_SIZE = (40, 120)


class TerminalUnavailableError(OSError):
    """Raised when no interactive terminal can be acquired for the session."""


class TerminalController:
    def __init__(self, fd: int, *, owns_fd: bool = False) -> None:
        """Capture tty state for ``fd``; fails if ``fd`` is not a terminal."""
        self.fd = fd
        self._owns_fd = owns_fd
        try:
            self._saved_tty_state = termios.tcgetattr(fd)
        except termios.error as exc:
            raise TerminalUnavailableError(f"not an interactive terminal: {exc}") from exc
        self._buffer: list[str] = []
        self._raw_active = False

    @classmethod
    def open(cls, path: str = DEFAULT_TTY_PATH) -> TerminalController:
        """Open the controlling terminal device for reading keys and drawing."""
        try:
            fd = os.open(path, os.O_RDWR | os.O_NOCTTY)
        except OSError as exc:
            raise TerminalUnavailableError(f"cannot open {path}: {exc.strerror or exc}") from exc
        try:
            if not os.isatty(fd):
                raise TerminalUnavailableError(f"{path} is not a terminal")
            return cls(fd, owns_fd=True)
        except BaseException:
            os.close(fd)
            raise

    @property
    def raw_active(self) -> bool:
        return self._raw_active

    def enable_tui_mode(self) -> None:
        """Switch the tty to raw input and hide the cursor."""
        try:
            tty.setraw(self.fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise OSError(*exc.args) from exc
        self._raw_active = True
        logger.debug("raw mode enabled on fd %d", self.fd)
        os.write(self.fd, HIDE_CURSOR.encode("ascii"))

    def disable_tui_mode(self, prompt_row: int = 1) -> None:
        """Clear decorations, show the cursor, and restore cooked mode.

        Cooked mode is restored even if the final screen write fails.
        Calling this when raw mode is not active does nothing.
        """
        if not self._raw_active:
            return
        self._raw_active = False
        self._buffer.clear()
        try:
            sequence = CLEAR_SCREEN + FG_RESET + BG_RESET + goto(prompt_row, 1) + SHOW_CURSOR
            os.write(self.fd, sequence.encode("ascii"))
        finally:
            self._restore_tty_state()

    def _restore_tty_state(self) -> None:
        try:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved_tty_state)
        except termios.error as exc:
            raise OSError(*exc.args) from exc
        logger.debug("terminal state restored on fd %d", self.fd)

    @contextlib.contextmanager
    def raw_mode(self):
        """Bracket a session with raw-mode enter and exactly one restore.

        On an error exit the restore is best-effort so the original exception
        is the one that propagates.
        """
        try:
            self.enable_tui_mode()
            yield self
        except BaseException:
            try:
                self.disable_tui_mode()
            except (OSError, termios.error):
                logger.debug("terminal restore failed during error exit", exc_info=True)
            raise
        else:
            self.disable_tui_mode()

    def read_key(self) -> str:
        return read_key(self.fd)

    def dimensions(self) -> tuple[int, int]:
        """Return current ``(rows, columns)`` of the terminal."""
        try:
            size = os.get_terminal_size(self.fd)
        except OSError:
            return DEFAULT_SIZE
        if size.lines <= 0 or size.columns <= 0:
            return DEFAULT_SIZE
        return size.lines, size.columns

    def write(self, text: str) -> None:
        self._buffer.append(text)

    def flush(self) -> None:
        """Write all buffered output to the terminal."""
        payload = "".join(self._buffer).encode("utf-8")
        self._buffer.clear()
        view = memoryview(payload)
        while view:
            written = os.write(self.fd, view)
            view = view[written:]

    def close(self) -> None:
        if self._owns_fd:
            self._owns_fd = False
            os.close(self.fd)
