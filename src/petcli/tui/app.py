"""
Dashboard runner.

Wires the pieces together for one dashboard session::

    multiplexer ──event──▶ apply(state) ──state──▶ render(state, pets) ──▶ Live

The main loop is the only thread that touches state, the store, or the
screen. It handles one event to completion before asking for the next.
Leaving the Live alternate screen clears the dashboard and shows the cursor
again; leaving RawTerminal restores the saved terminal mode.
"""

from __future__ import annotations

import contextlib
import logging
from dataclasses import replace

from rich.console import Console
from rich.live import Live

from petcli.core.constants import ExitCode
from petcli.core.exceptions import StoreError, TerminalError
from petcli.core.models import Pet
from petcli.core.store import PetStore
from petcli.tui.events import ErrorEvent, EventMultiplexer, KeyReader
from petcli.tui.render import render
from petcli.tui.state import AppState, apply, reconcile
from petcli.tui.terminal import RawTerminal, TerminalKeyReader

logger = logging.getLogger(__name__)


def run_dashboard(
    store: PetStore,
    console: Console,
    tick_interval: float,
    reader: KeyReader | None = None,
    raw_mode: contextlib.AbstractContextManager | None = None,
) -> ExitCode:
    """
    Run the dashboard until the user presses ``q``.

    Raises TerminalError if the terminal cannot be set up or the input
    thread fails; the terminal is restored first in both cases.
    """
    store.initialise()
    state, pets = _refresh(AppState(), store, [])

    with raw_mode if raw_mode is not None else RawTerminal():
        multiplexer = EventMultiplexer(reader or TerminalKeyReader(), tick_interval)
        with Live(
            render(state, pets),
            console=console,
            screen=True,
            auto_refresh=False,
            transient=True,
        ) as live:
            multiplexer.start()
            logger.info("Dashboard started on %s", store.path)
            try:
                while True:
                    event = multiplexer.get()
                    if isinstance(event, ErrorEvent):
                        raise TerminalError(
                            f"cannot read the terminal: {event.error}"
                        ) from event.error

                    state = apply(state, event, store)
                    if not state.running:
                        break

                    state, pets = _refresh(state, store, pets)
                    live.update(render(state, pets), refresh=True)
            finally:
                multiplexer.stop()

    logger.info("Dashboard stopped")
    return ExitCode.SUCCESS


def _refresh(state: AppState, store: PetStore, previous: list[Pet]) -> tuple[AppState, list[Pet]]:
    """Reload the pets for the next frame; on a store error keep *previous*."""
    try:
        pets = store.load_all()
    except StoreError as exc:
        logger.warning("Cannot refresh pets: %s", exc)
        return reconcile(replace(state, status=f"Error: {exc}"), len(previous)), previous
    return reconcile(state, len(pets)), pets
