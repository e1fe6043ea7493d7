"""Non-blocking single-key input."""

import logging
import os
import select
import sys
from typing import TextIO

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"q", "Q", "\x03"})


def is_quit_key(key: str | None) -> bool:
    """True for ``q``, ``Q`` and Ctrl+C."""
    return key in QUIT_KEYS


class KeyReader:
    """Reads single key presses from a terminal without waiting for Enter.

    Use as a context manager: on entry stdin is switched to cbreak mode (if
    it is a TTY on a POSIX system), on exit the previous mode is restored.
    When stdin is not a terminal :meth:`read_key` always returns ``None``
    and Ctrl+C remains the way out.
    """

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdin
        self._saved_attrs: list | None = None
        self._enabled = False

    def __enter__(self) -> "KeyReader":
        try:
            import termios
            import tty
        except ImportError:
            logger.debug("termios unavailable, key input disabled")
            return self

        if not self.stream.isatty():
            return self

        fd = self.stream.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        self._enabled = True
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._saved_attrs is not None:
            import termios

            termios.tcsetattr(
                self.stream.fileno(), termios.TCSADRAIN, self._saved_attrs
            )
            self._saved_attrs = None
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def read_key(self) -> str | None:
        """Return a pending key press, or ``None`` if there is none."""
        if not self._enabled:
            return None
        fd = self.stream.fileno()
        ready, _, _ = select.select([fd], [], [], 0)
        if not ready:
            return None
        # Straight from the fd so a burst like "aq" yields both keys
        data = os.read(fd, 1)
        return data.decode(errors="replace") or None
