"""
Event multiplexer: one ordered stream of ticks and key presses.

Two daemon threads feed one queue:

  ticker  — sleeps until the next scheduled deadline, then pushes TickEvent
  input   — polls the key reader for at most the time left until that same
            deadline, and pushes InputEvent as soon as a key arrives

The main loop calls ``get()`` and receives exactly one event per call, in
the order the events became ready. Deadlines sit on a fixed grid
(``start + k * interval``) so time spent waiting on input never pushes the
tick schedule later.

If the input thread fails it logs the error, pushes an ErrorEvent and exits;
the consumer decides how to shut down.
"""

from __future__ import annotations

import logging
import math
import queue
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, Union

import readchar

from petcli.core.constants import MIN_INPUT_POLL_SECONDS

logger = logging.getLogger(__name__)

KEY_UP = readchar.key.UP
KEY_DOWN = readchar.key.DOWN


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InputEvent:
    key: str


@dataclass(frozen=True)
class TickEvent:
    pass


@dataclass(frozen=True)
class ErrorEvent:
    error: BaseException


Event = Union[InputEvent, TickEvent, ErrorEvent]


# ---------------------------------------------------------------------------
# Key source
# ---------------------------------------------------------------------------


class KeyReader(Protocol):
    def poll(self, timeout: float) -> bool:
        """Wait up to *timeout* seconds; return True if a key can be read."""
        ...

    def read_key(self) -> str:
        """Read one key press. Only called after poll() returned True."""
        ...


# ---------------------------------------------------------------------------
# Schedule
# ---------------------------------------------------------------------------


class TickSchedule:
    """Fixed-grid tick deadlines shared by the ticker and the input poller."""

    def __init__(self, interval: float, clock: Callable[[], float] = time.monotonic) -> None:
        if interval <= 0:
            raise ValueError("tick interval must be positive")
        self._interval = interval
        self._clock = clock
        self._lock = threading.Lock()
        self._deadline = clock() + interval

    @property
    def deadline(self) -> float:
        with self._lock:
            return self._deadline

    def remaining(self) -> float:
        """Seconds until the next deadline, never negative."""
        with self._lock:
            return max(0.0, self._deadline - self._clock())

    def advance(self) -> int:
        """
        Move the deadline to the next grid slot after now.

        Returns the number of slots skipped. Slots the ticker slept through
        are dropped rather than fired in a burst.
        """
        with self._lock:
            now = self._clock()
            self._deadline += self._interval
            skipped = 0
            if self._deadline <= now:
                skipped = math.floor((now - self._deadline) / self._interval) + 1
                self._deadline += skipped * self._interval
            return skipped


# ---------------------------------------------------------------------------
# Multiplexer
# ---------------------------------------------------------------------------


class EventMultiplexer:
    """
    Merge periodic ticks and key presses into one blocking queue.

    Lifecycle::

        mux = EventMultiplexer(reader, tick_interval=0.2)
        mux.start()
        event = mux.get()       # blocks for exactly one event
        mux.stop()              # producers are signalled, not joined
    """

    def __init__(
        self,
        reader: KeyReader,
        tick_interval: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._reader = reader
        self._tick_interval = tick_interval
        self._clock = clock
        self._queue: queue.Queue[Event] = queue.Queue()
        self._stop = threading.Event()
        self._threads: list[threading.Thread] = []

    def start(self) -> None:
        if self._threads:
            raise RuntimeError("EventMultiplexer already started")
        schedule = TickSchedule(self._tick_interval, self._clock)
        self._threads = [
            threading.Thread(
                target=self._tick_loop, args=(schedule,), name="petcli-ticker", daemon=True
            ),
            threading.Thread(
                target=self._input_loop, args=(schedule,), name="petcli-input", daemon=True
            ),
        ]
        for thread in self._threads:
            thread.start()
        logger.debug("Event multiplexer started (tick=%.3fs)", self._tick_interval)

    def stop(self) -> None:
        self._stop.set()

    def get(self, timeout: float | None = None) -> Event:
        """Block until the next event. Raises queue.Empty if *timeout* elapses."""
        return self._queue.get(timeout=timeout)

    # ------------------------------------------------------------------
    # Producers
    # ------------------------------------------------------------------

    def _tick_loop(self, schedule: TickSchedule) -> None:
        while not self._stop.is_set():
            wait = schedule.remaining()
            if wait > 0:
                if self._stop.wait(wait):
                    break
                continue
            self._queue.put(TickEvent())
            skipped = schedule.advance()
            if skipped:
                logger.debug("Ticker fell behind, skipped %d slot(s)", skipped)

    def _input_loop(self, schedule: TickSchedule) -> None:
        try:
            while not self._stop.is_set():
                timeout = max(schedule.remaining(), MIN_INPUT_POLL_SECONDS)
                if self._reader.poll(timeout):
                    key = self._reader.read_key()
                    self._queue.put(InputEvent(key))
        except Exception as exc:
            logger.exception("Input producer failed")
            self._queue.put(ErrorEvent(exc))
