"""Shared setup for petcli commands: config, logging, and the store."""

from __future__ import annotations

import sys

from rich.console import Console

from petcli.core.config import PetCLIConfig, load_config
from petcli.core.constants import ExitCode
from petcli.core.exceptions import ConfigError
from petcli.core.logging_setup import configure_logging
from petcli.core.store import PetStore


def load_settings(err_console: Console, db: str = "", tick_ms: int | None = None) -> PetCLIConfig:
    """Load config, apply command-line overrides, and start file logging."""
    try:
        config = load_config()
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(ExitCode.CONFIG_ERROR)

    # Command-line options beat env vars and the config file
    if db:
        config.store.path = db
    if tick_ms is not None:
        config.ui.tick_rate_ms = tick_ms

    configure_logging(config.logging, config.log_path)
    return config


def open_store(err_console: Console, db: str = "") -> PetStore:
    return PetStore(load_settings(err_console, db=db).db_path)
