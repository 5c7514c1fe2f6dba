"""Raw-mode terminal session and frame output."""

from __future__ import annotations

import contextlib
import os
import termios
import tty
from collections.abc import Iterator

# Alternate screen on, cursor hidden; and the reverse.
ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"


class TerminalController:
    """Raw-mode alternate-screen session on a pair of tty descriptors.

    The tty attributes are captured at construction so ``restore`` puts the
    terminal back exactly as it was found.
    """

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_attributes = termios.tcgetattr(stdin_fd)

    def enter(self) -> None:
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        self._write_bytes(ENTER_TUI_SEQUENCE)

    def restore(self) -> None:
        self._write_bytes(LEAVE_TUI_SEQUENCE)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_attributes)

    def _write_bytes(self, data: bytes) -> None:
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    def write(self, frame: str) -> None:
        """Write one composed frame, retrying short writes."""
        self._write_bytes(frame.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Hold the terminal in TUI mode for the body; restore on any exit."""
        try:
            self.enter()
            yield
        finally:
            self.restore()
