"""Terminal control for a picker session.

Owns the raw-mode lifecycle and cursor visibility, and reads input one
character at a time so the key reader can assemble escape sequences.
"""

from __future__ import annotations

import codecs
import contextlib
import logging
import os
import select
import shutil
import sys
import termios
import tty
from collections.abc import Iterator

logger = logging.getLogger("termpick.terminal")

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
TTY_PATH = "/dev/tty"


class TerminalModeError(RuntimeError):
    """Raw mode could not be entered or restored."""


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state: list | None = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._owned_fd: int | None = None

    @classmethod
    def open(cls) -> TerminalController:
        """Use stdin and stdout when both are ttys, else the controlling terminal.

        The fallback lets items be piped in and chosen values be piped out
        while keys and frames still go through the keyboard and screen.
        Without a controlling terminal, a tty stdin draws on stderr.
        """
        stdin_tty = sys.stdin.isatty()
        if stdin_tty and sys.stdout.isatty():
            return cls(sys.stdin.fileno(), sys.stdout.fileno())
        try:
            fd = os.open(TTY_PATH, os.O_RDWR | os.O_NOCTTY)
        except OSError as exc:
            if stdin_tty and sys.stderr.isatty():
                logger.debug("no %s, drawing on stderr: %s", TTY_PATH, exc)
                return cls(sys.stdin.fileno(), sys.stderr.fileno())
            raise TerminalModeError(f"No terminal available: {exc}") from exc
        controller = cls(fd, fd)
        controller._owned_fd = fd
        return controller

    def close(self) -> None:
        if self._owned_fd is not None:
            os.close(self._owned_fd)
            self._owned_fd = None

    def enter_raw_mode(self) -> None:
        try:
            self._saved_tty_state = termios.tcgetattr(self.stdin_fd)
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except (termios.error, OSError) as exc:
            raise TerminalModeError(f"Could not enter raw mode: {exc}") from exc
        logger.debug("raw mode on (fd=%d)", self.stdin_fd)

    def restore_mode(self) -> None:
        if self._saved_tty_state is None:
            return
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except (termios.error, OSError) as exc:
            raise TerminalModeError(f"Could not restore terminal mode: {exc}") from exc
        finally:
            self._saved_tty_state = None
        logger.debug("raw mode off (fd=%d)", self.stdin_fd)

    @contextlib.contextmanager
    def raw_mode(self) -> Iterator[None]:
        self.enter_raw_mode()
        try:
            self.hide_cursor()
            yield
        finally:
            try:
                self.show_cursor()
            finally:
                self.restore_mode()

    def read_one_unit(self) -> str | None:
        """Read one character, decoding multi-byte UTF-8 as it arrives."""
        while True:
            data = os.read(self.stdin_fd, 1)
            if not data:
                return None
            char = self._decoder.decode(data)
            if char:
                return char

    def has_pending_input(self) -> bool:
        ready, _, _ = select.select([self.stdin_fd], [], [], 0)
        return bool(ready)

    def write(self, text: str) -> None:
        data = text.encode("utf-8")
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def clear_lines(self, count: int) -> None:
        if count > 1:
            # Cursor sits on the last line: go to column 0, up, clear to end
            self.write(f"\r\x1b[{count - 1}A\x1b[J")
        else:
            self.write("\r\x1b[J")

    def width(self) -> int:
        try:
            return os.get_terminal_size(self.stdout_fd).columns
        except OSError:
            return shutil.get_terminal_size().columns
