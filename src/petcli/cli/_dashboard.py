"""petcli dashboard — run the interactive pet dashboard."""

from __future__ import annotations

import sys

from rich.console import Console

from petcli.cli._common import load_settings
from petcli.core.constants import ExitCode
from petcli.core.exceptions import RenderError, StoreError, TerminalError
from petcli.core.store import PetStore


def cmd_dashboard(db: str, tick_ms: int | None, console: Console, err_console: Console) -> None:
    from petcli.tui.app import run_dashboard

    config = load_settings(err_console, db=db, tick_ms=tick_ms)
    store = PetStore(config.db_path)

    try:
        code = run_dashboard(store, console, tick_interval=config.tick_interval)
    except TerminalError as exc:
        err_console.print(f"[red]Terminal error:[/red] {exc}")
        sys.exit(ExitCode.TERMINAL_ERROR)
    except StoreError as exc:
        err_console.print(f"[red]Store error:[/red] {exc}")
        sys.exit(ExitCode.STORE_ERROR)
    except RenderError as exc:
        err_console.print(f"[red]Render error:[/red] {exc}")
        sys.exit(ExitCode.ERROR)
    except KeyboardInterrupt:
        err_console.print("[yellow]Interrupted.[/yellow]")
        sys.exit(ExitCode.SUCCESS)
    sys.exit(code)
