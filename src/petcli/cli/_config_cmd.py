"""CLI commands: petcli config show | init."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape

from petcli.core.constants import ExitCode

console = Console()
err_console = Console(stderr=True)


@click.group("config")
def config_group() -> None:
    """View and initialise petcli configuration."""


@config_group.command("show")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON")
def config_show(as_json: bool) -> None:
    """Display the effective configuration (file, env vars, defaults)."""
    from petcli.core.config import _config_file_path, load_config
    from petcli.core.exceptions import ConfigError

    cfg_path = _config_file_path()
    try:
        cfg = load_config()
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(ExitCode.CONFIG_ERROR)

    data = cfg.model_dump()
    data["_config_path"] = str(cfg_path)
    data["_config_exists"] = cfg_path.exists()
    data["_db_path"] = str(cfg.db_path)

    if as_json:
        click.echo(json.dumps(data, indent=2))
    else:
        _print_config_rich(data, console)


@config_group.command("init")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file")
def config_init(force: bool) -> None:
    """Write a config file holding the default settings."""
    from petcli.core.config import _config_file_path, default_config_data, save_config
    from petcli.core.exceptions import ConfigError

    cfg_path = _config_file_path()
    if cfg_path.exists() and not force:
        err_console.print(f"Config already exists: {cfg_path}")
        err_console.print("Use [cyan]--force[/cyan] to overwrite it.")
        sys.exit(ExitCode.CONFIG_ERROR)

    try:
        save_config(default_config_data(), cfg_path)
    except ConfigError as exc:
        err_console.print(f"[red]Config error:[/red] {exc}")
        sys.exit(ExitCode.CONFIG_ERROR)
    console.print(f"[green]Config written:[/green] {cfg_path}")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _print_config_rich(data: dict, console: Console) -> None:
    """Print config dict in a human-friendly format."""
    path = data.pop("_config_path", "unknown")
    exists = data.pop("_config_exists", False)
    db_path = data.pop("_db_path", "")
    suffix = "" if exists else ", not written yet"
    console.print(f"[bold]petcli Configuration[/bold]  ({path}{suffix})\n")

    for section, values in data.items():
        if isinstance(values, dict):
            console.print(f"  [cyan]{escape(f'[{section}]')}[/cyan]")
            for k, v in values.items():
                console.print(f"    {k} = {v!r}")
        else:
            console.print(f"  {section} = {values!r}")
    console.print(f"\n  pet store: {db_path}\n")
