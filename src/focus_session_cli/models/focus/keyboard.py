"""Non-blocking single-key input for the live session controls."""

from __future__ import annotations

import select
import sys


class KeyboardHandler:
    """Reads single key presses from a POSIX terminal without blocking."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.old_settings = None
        self._setup()

    def _setup(self) -> None:
        """Put the terminal in cbreak mode when stdin is a tty."""
        if not self.stream.isatty():
            return
        import termios
        import tty

        fd = self.stream.fileno()
        self.old_settings = termios.tcgetattr(fd)
        tty.setcbreak(fd)

    def get_key(self) -> str | None:
        """Return the pressed key (lowercased) or None if nothing is waiting."""
        if not self.stream.isatty():
            return None
        if select.select([self.stream], [], [], 0)[0]:
            return self.stream.read(1).lower()
        return None

    def stop(self) -> None:
        """Restore terminal settings."""
        if self.old_settings is not None:
            import termios

            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self.old_settings)
            self.old_settings = None


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    def __init__(self):
        import msvcrt

        self.msvcrt = msvcrt

    def get_key(self) -> str | None:
        if self.msvcrt.kbhit():
            key = self.msvcrt.getch()
            if isinstance(key, bytes):
                key = key.decode("utf-8", errors="ignore")
            return key.lower()
        return None

    def stop(self) -> None:
        """No cleanup needed on Windows."""


def create_keyboard_handler():
    """Keyboard handler for the current platform."""
    if sys.platform == "win32":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
