"""
Raw terminal input (POSIX).

RawTerminal puts stdin into cbreak mode for the lifetime of the dashboard so
key presses arrive unbuffered, and restores the saved mode on exit.
TerminalKeyReader waits on stdin with select(), reads whatever bytes are
ready and splits them into key presses, matching escape sequences against
the readchar.key table.
"""

from __future__ import annotations

import codecs
import os
import select
import sys
import termios
import tty
from typing import IO, Any

import readchar

from petcli.core.exceptions import TerminalError

_READ_SIZE = 32

# Longest first, so "\x1b[1;2A" wins over a shorter prefix.
_ESCAPE_SEQUENCES = sorted(
    {
        value
        for name, value in vars(readchar.key).items()
        if name.isupper()
        and isinstance(value, str)
        and len(value) > 1
        and value.startswith(readchar.key.ESC)
    },
    key=len,
    reverse=True,
)


class RawTerminal:
    """Context manager: cbreak mode on enter, saved mode restored on exit."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream or sys.stdin
        self._fd: int | None = None
        self._saved: list[Any] | None = None

    def __enter__(self) -> RawTerminal:
        if not self._stream.isatty():
            raise TerminalError("stdin is not a terminal; the dashboard needs an interactive TTY")
        try:
            self._fd = self._stream.fileno()
            self._saved = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        except (OSError, termios.error) as exc:
            raise TerminalError(f"cannot enter raw input mode: {exc}") from exc
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._fd is not None and self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        self._fd = None
        self._saved = None


class TerminalKeyReader:
    """
    KeyReader backed by the process's stdin.

    Bytes are taken straight from the file descriptor once select() reports
    them, so nothing is flushed between the poll and the read. One read may
    carry several keys (fast typing, pastes); the rest wait in a buffer.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream or sys.stdin
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""

    def poll(self, timeout: float) -> bool:
        if self._pending:
            return True
        ready, _, _ = select.select([self._stream], [], [], timeout)
        return bool(ready)

    def read_key(self) -> str:
        while not self._pending:
            data = os.read(self._stream.fileno(), _READ_SIZE)
            if not data:
                raise EOFError("stdin closed")
            self._pending += self._decoder.decode(data)
        key, self._pending = split_key(self._pending)
        return key


def split_key(buffer: str) -> tuple[str, str]:
    """Split the first key press off *buffer*. Returns ``(key, rest)``."""
    if buffer.startswith(readchar.key.ESC):
        for sequence in _ESCAPE_SEQUENCES:
            if buffer.startswith(sequence):
                return sequence, buffer[len(sequence):]
    return buffer[0], buffer[1:]
