"""
Unit tests for petcli.tui.terminal against a real pseudo-terminal.

Covers:
  - Every key written to the terminal is read back, in order
  - Escape sequences decoded to the readchar.key constants
  - Several keys arriving in one read are split, not dropped
  - RawTerminal restores the saved terminal mode
"""

from __future__ import annotations

import os
import termios
from collections.abc import Iterator
from typing import IO

import pytest

from petcli.tui.events import KEY_DOWN, KEY_UP, EventMultiplexer, InputEvent
from petcli.tui.terminal import RawTerminal, TerminalKeyReader, split_key


@pytest.fixture
def pty_pair() -> Iterator[tuple[int, IO[str]]]:
    """(master fd, slave stream) with the slave in cbreak mode."""
    master, slave = os.openpty()
    stream = open(slave, closefd=True)
    try:
        with RawTerminal(stream):
            yield master, stream
    finally:
        stream.close()
        os.close(master)


def _read_all(reader: TerminalKeyReader, count: int) -> list[str]:
    keys = []
    for _ in range(count):
        assert reader.poll(1.0)
        keys.append(reader.read_key())
    return keys


# ---------------------------------------------------------------------------
# TerminalKeyReader
# ---------------------------------------------------------------------------


class TestTerminalKeyReader:
    def test_single_key(self, pty_pair) -> None:
        master, stream = pty_pair
        reader = TerminalKeyReader(stream)
        os.write(master, b"q")
        assert reader.poll(1.0) is True
        assert reader.read_key() == "q"

    def test_consecutive_keys_not_lost(self, pty_pair) -> None:
        master, stream = pty_pair
        reader = TerminalKeyReader(stream)
        os.write(master, b"q")
        assert _read_all(reader, 1) == ["q"]
        os.write(master, b"h")
        assert _read_all(reader, 1) == ["h"]

    def test_arrow_keys(self, pty_pair) -> None:
        master, stream = pty_pair
        reader = TerminalKeyReader(stream)
        os.write(master, KEY_UP.encode())
        os.write(master, KEY_DOWN.encode())
        assert _read_all(reader, 2) == [KEY_UP, KEY_DOWN]

    def test_burst_is_split(self, pty_pair) -> None:
        master, stream = pty_pair
        reader = TerminalKeyReader(stream)
        os.write(master, b"a" + KEY_DOWN.encode() + b"dq")
        assert _read_all(reader, 4) == ["a", KEY_DOWN, "d", "q"]
        assert reader.poll(0.05) is False

    def test_utf8_key(self, pty_pair) -> None:
        master, stream = pty_pair
        reader = TerminalKeyReader(stream)
        os.write(master, "é".encode())
        assert _read_all(reader, 1) == ["é"]

    def test_poll_times_out_when_idle(self, pty_pair) -> None:
        _, stream = pty_pair
        assert TerminalKeyReader(stream).poll(0.05) is False

    def test_feeds_the_multiplexer(self, pty_pair) -> None:
        master, stream = pty_pair
        mux = EventMultiplexer(TerminalKeyReader(stream), tick_interval=30.0)
        mux.start()
        try:
            os.write(master, b"qh")
            events = [mux.get(timeout=5.0), mux.get(timeout=5.0)]
        finally:
            mux.stop()
        assert events == [InputEvent("q"), InputEvent("h")]


class TestSplitKey:
    def test_plain(self) -> None:
        assert split_key("ab") == ("a", "b")

    def test_escape_sequence(self) -> None:
        assert split_key(KEY_UP + "x") == (KEY_UP, "x")

    def test_lone_escape(self) -> None:
        assert split_key("\x1b") == ("\x1b", "")


# ---------------------------------------------------------------------------
# RawTerminal
# ---------------------------------------------------------------------------


class TestRawTerminalMode:
    def test_restores_saved_mode(self) -> None:
        master, slave = os.openpty()
        try:
            with open(slave, closefd=True) as stream:
                before = termios.tcgetattr(slave)
                with RawTerminal(stream):
                    during = termios.tcgetattr(slave)
                    assert not during[3] & termios.ICANON
                    assert not during[3] & termios.ECHO
                assert termios.tcgetattr(slave) == before
        finally:
            os.close(master)
