"""petcli list | add | delete | init — non-interactive store commands."""

from __future__ import annotations

import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.table import Table

from petcli.cli._common import open_store
from petcli.core.constants import ExitCode
from petcli.core.exceptions import StoreError
from petcli.core.models import PET_LIST


def cmd_list(db: str, as_json: bool, console: Console, err_console: Console) -> None:
    store = open_store(err_console, db)
    try:
        pets = store.load_all()
    except StoreError as exc:
        _fail(err_console, exc)

    if as_json:
        click.echo(PET_LIST.dump_json(pets, indent=2).decode())
        return

    if not pets:
        console.print(f"No pets stored yet in {store.path}")
        console.print("Run [cyan]petcli add[/cyan] to create some.")
        return

    table = Table(title=f"Pets ({store.path})", header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Category")
    table.add_column("Age", justify="right")
    table.add_column("Created At")
    for index, pet in enumerate(pets):
        table.add_row(
            str(index), str(pet.id), pet.name, pet.category, str(pet.age), pet.created_label()
        )
    console.print(table)


def cmd_add(db: str, count: int, console: Console, err_console: Console) -> None:
    store = open_store(err_console, db)
    try:
        store.initialise()
        for _ in range(count):
            pet = store.append_generated()[-1]
            console.print(f"Added [cyan]{pet.name}[/cyan] ({pet.category}, age {pet.age})")
    except StoreError as exc:
        _fail(err_console, exc)


def cmd_delete(db: str, index: int, console: Console, err_console: Console) -> None:
    store = open_store(err_console, db)
    try:
        pet = store.delete_at(index)
    except StoreError as exc:
        _fail(err_console, exc)
    console.print(f"Deleted [cyan]{pet.name}[/cyan] (id {pet.id})")


def cmd_init(db: str, console: Console, err_console: Console) -> None:
    store = open_store(err_console, db)
    try:
        created = store.initialise()
    except StoreError as exc:
        _fail(err_console, exc)
    if created:
        console.print(f"[green]Created empty pet store:[/green] {store.path}")
    else:
        console.print(f"Pet store already exists: {store.path}")


def _fail(console: Console, exc: StoreError) -> NoReturn:
    console.print(f"[red]Store error:[/red] {exc}")
    sys.exit(ExitCode.STORE_ERROR)
