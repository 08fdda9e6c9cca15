"""
Dashboard state and its transition function.

AppState is immutable; ``apply(state, event, store)`` returns the next
state. The store is the only side effect: ``a`` and ``d`` rewrite it, and
Up/Down re-read it on every key press so the wrap bound always reflects
what is on disk.

Cursor rules:
  - Down wraps from the last pet to the first, Up from the first to the last.
  - Delete removes the pet under the cursor, then moves the cursor up one,
    stopping at 0.
  - With no pets, navigation and delete leave the cursor at 0.

Store failures never escape ``apply``: screen and cursor stay as they were
and the error becomes the one-line status shown in the footer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum

from petcli.core.exceptions import StoreError
from petcli.core.store import PetStore
from petcli.tui.events import KEY_DOWN, KEY_UP, Event, InputEvent, TickEvent

logger = logging.getLogger(__name__)


class Screen(IntEnum):
    """Top-level view. The value is the position of its tab in the menu."""

    HOME = 0
    PETS = 1


@dataclass(frozen=True)
class AppState:
    screen: Screen = Screen.HOME
    cursor: int | None = 0
    status: str = ""
    running: bool = True


def apply(state: AppState, event: Event, store: PetStore) -> AppState:
    """Return the state that follows *event*."""
    if isinstance(event, TickEvent):
        return state
    if not isinstance(event, InputEvent):
        raise TypeError(f"apply() cannot handle {event!r}")

    key = event.key
    logger.debug("Key %r on %s (cursor=%s)", key, state.screen.name, state.cursor)
    cleared = replace(state, status="")

    try:
        if key == "q":
            return replace(cleared, running=False)
        if key == "h":
            return replace(cleared, screen=Screen.HOME)
        if key == "p":
            return replace(cleared, screen=Screen.PETS, cursor=_clamp(state.cursor, _count(store)))
        if key == "a":
            pet = store.append_generated()[-1]
            return replace(cleared, status=f"Added {pet.name}")
        if key == "d":
            return _delete_selected(cleared, store)
        if key == KEY_DOWN and state.screen is Screen.PETS:
            return replace(cleared, cursor=_next(state.cursor, _count(store)))
        if key == KEY_UP and state.screen is Screen.PETS:
            return replace(cleared, cursor=_previous(state.cursor, _count(store)))
    except StoreError as exc:
        logger.warning("Store error on key %r: %s", key, exc)
        return replace(state, status=f"Error: {exc}")

    return cleared


def reconcile(state: AppState, n: int) -> AppState:
    """Pull the cursor back into ``[0, n)`` after the store changed under it."""
    cursor = _clamp(state.cursor, n)
    if cursor == state.cursor:
        return state
    logger.debug("Cursor %s out of range for %d pet(s), now %d", state.cursor, n, cursor)
    return replace(state, cursor=cursor)


# ---------------------------------------------------------------------------
# Cursor arithmetic
# ---------------------------------------------------------------------------


def _count(store: PetStore) -> int:
    return len(store.load_all())


def _clamp(cursor: int | None, n: int) -> int:
    if n == 0 or cursor is None or cursor < 0:
        return 0
    return min(cursor, n - 1)


def _next(cursor: int | None, n: int) -> int:
    if n == 0 or cursor is None:
        return 0
    if cursor < 0 or cursor >= n - 1:
        return 0
    return cursor + 1


def _previous(cursor: int | None, n: int) -> int:
    if n == 0 or cursor is None:
        return 0
    if cursor <= 0:
        return n - 1
    return min(cursor - 1, n - 1)


def _delete_selected(state: AppState, store: PetStore) -> AppState:
    if state.cursor is None:
        return state
    n = _count(store)
    if n == 0:
        return replace(state, cursor=0, status="Nothing to delete")
    removed = store.delete_at(state.cursor)
    return replace(state, cursor=max(state.cursor - 1, 0), status=f"Deleted {removed.name}")
