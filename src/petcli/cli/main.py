"""
petcli CLI entry point.

Commands:
  petcli dashboard          — run the interactive pet dashboard
  petcli list [--json]      — print the stored pets
  petcli add [--count N]    — append randomly generated pets
  petcli delete INDEX       — delete the pet at INDEX
  petcli init               — create an empty pet store
  petcli config show        — show the effective configuration
  petcli config init        — write a default config file
  petcli version            — show version information
"""

from __future__ import annotations

import click
from rich.console import Console

from petcli import __version__
from petcli.cli._config_cmd import config_group
from petcli.core.constants import MAX_TICK_RATE_MS, MIN_TICK_RATE_MS

console = Console()
err_console = Console(stderr=True)

_db_option = click.option(
    "--db", default="", help="Path to the pet store JSON file (overrides config)"
)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "--version", "-V", message="petcli %(version)s")
def cli() -> None:
    """petcli — browse, add and delete pets from the terminal."""


cli.add_command(config_group)


# ---------------------------------------------------------------------------
# dashboard
# ---------------------------------------------------------------------------


@cli.command()
@_db_option
@click.option(
    "--tick-ms",
    type=click.IntRange(MIN_TICK_RATE_MS, MAX_TICK_RATE_MS),
    default=None,
    help="Redraw interval in milliseconds (overrides config)",
)
def dashboard(db: str, tick_ms: int | None) -> None:
    """Run the interactive pet dashboard."""
    from petcli.cli._dashboard import cmd_dashboard

    cmd_dashboard(db=db, tick_ms=tick_ms, console=console, err_console=err_console)


# ---------------------------------------------------------------------------
# store commands
# ---------------------------------------------------------------------------


@cli.command("list")
@_db_option
@click.option("--json", "as_json", is_flag=True, default=False)
def list_pets(db: str, as_json: bool) -> None:
    """Print the stored pets in file order."""
    from petcli.cli._store_cmd import cmd_list

    cmd_list(db=db, as_json=as_json, console=console, err_console=err_console)


@cli.command()
@_db_option
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, show_default=True)
def add(db: str, count: int) -> None:
    """Append randomly generated pets."""
    from petcli.cli._store_cmd import cmd_add

    cmd_add(db=db, count=count, console=console, err_console=err_console)


@cli.command()
@_db_option
@click.argument("index", type=int)
def delete(db: str, index: int) -> None:
    """Delete the pet at INDEX (0-based, as shown by `petcli list`)."""
    from petcli.cli._store_cmd import cmd_delete

    cmd_delete(db=db, index=index, console=console, err_console=err_console)


@cli.command()
@_db_option
def init(db: str) -> None:
    """Create an empty pet store if none exists."""
    from petcli.cli._store_cmd import cmd_init

    cmd_init(db=db, console=console, err_console=err_console)


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--json", "as_json", is_flag=True, default=False)
def version(as_json: bool) -> None:
    """Show version information."""
    import platform
    import sys as _sys

    if as_json:
        import json

        click.echo(
            json.dumps(
                {
                    "petcli": __version__,
                    "python": _sys.version.split()[0],
                    "platform": _sys.platform,
                    "arch": platform.machine(),
                },
                indent=2,
            )
        )
    else:
        console.print(f"petcli {__version__}")
        console.print(f"Python {_sys.version.split()[0]}")
        console.print(f"Platform: {_sys.platform} {platform.machine()}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
