"""
Dashboard rendering.

``render(state, pets)`` is a pure function: it builds a fresh Rich layout
from the state and a snapshot of the store on every frame and never touches
either. Layout::

    ┌ Menu ──────────────────────────────────┐
    │ Home | Pets | Add | Delete | Quit      │
    └────────────────────────────────────────┘
    ┌ Home ─ or ─ Pets ┐┌ Detail ────────────┐
    │                  ││                    │
    └──────────────────┘└────────────────────┘
    ┌ Copyright ─────────────────────────────┐
    └────────────────────────────────────────┘
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.align import Align
from rich.layout import Layout
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from petcli.core.exceptions import RenderError
from petcli.core.models import Pet
from petcli.tui.state import AppState, Screen

MENU_TITLES = ("Home", "Pets", "Add", "Delete", "Quit")
COPYRIGHT = "pet-CLI 2020 - all rights reserved"

_HOTKEY = Style(color="yellow", underline=True)
_SELECTED = Style(color="black", bgcolor="yellow", bold=True)
_HEADER = Style(bold=True)


def render(state: AppState, pets: Sequence[Pet]) -> Layout:
    """Build the full dashboard for *state* over the *pets* snapshot."""
    layout = Layout(name="root")
    layout.split_column(
        Layout(render_menu(state.screen), name="menu", size=3),
        Layout(name="body", ratio=1),
        Layout(render_footer(state.status), name="footer", size=3),
    )

    body = layout["body"]
    if state.screen is Screen.HOME:
        body.update(render_home())
    else:
        selected = _selected_pet(state.cursor, pets)
        body.split_row(
            Layout(render_pet_list(pets, state.cursor), name="list", ratio=1),
            Layout(render_pet_detail(selected), name="detail", ratio=4),
        )
    return layout


def _selected_pet(cursor: int | None, pets: Sequence[Pet]) -> Pet | None:
    if not pets:
        return None
    if cursor is None or not 0 <= cursor < len(pets):
        raise RenderError(f"cursor {cursor!r} does not select one of {len(pets)} pet(s)")
    return pets[cursor]


# ---------------------------------------------------------------------------
# Panels
# ---------------------------------------------------------------------------


def render_menu(active: Screen) -> Panel:
    tabs = Text(style="white")
    for index, title in enumerate(MENU_TITLES):
        if index:
            tabs.append(" | ")
        tabs.append(title[0], style=_HOTKEY)
        tabs.append(title[1:], style="yellow" if index == active else "white")
    return Panel(tabs, title="Menu", border_style="white")


def render_home() -> Panel:
    welcome = Text(justify="center")
    welcome.append("\nWelcome\n\nto\n\n")
    welcome.append("pet-CLI", style="bright_blue")
    welcome.append(
        "\n\nPress 'p' to access pets, 'a' to add random new pets"
        "\nand 'd' to delete the currently selected pet."
    )
    return Panel(welcome, title="Home", border_style="white")


def render_pet_list(pets: Sequence[Pet], cursor: int | None) -> Panel:
    lines = Text(no_wrap=True, overflow="ellipsis")
    for index, pet in enumerate(pets):
        if index:
            lines.append("\n")
        lines.append(pet.name, style=_SELECTED if index == cursor else "")
    return Panel(lines, title="Pets", border_style="white")


def render_pet_detail(pet: Pet | None) -> Panel:
    if pet is None:
        hint = Align.center(Text("No pets yet. Press 'a' to add one.", style="dim"))
        return Panel(hint, title="Detail", border_style="white")

    table = Table(expand=True, box=None, header_style=_HEADER, show_edge=False)
    table.add_column("ID", ratio=1)
    table.add_column("Name", ratio=4)
    table.add_column("Category", ratio=4)
    table.add_column("Age", ratio=1)
    table.add_column("Created At", ratio=4)
    table.add_row(str(pet.id), pet.name, pet.category, str(pet.age), pet.created_label())
    return Panel(table, title="Detail", border_style="white")


def render_footer(status: str) -> Panel:
    # The footer has room for one line: a status message replaces the copyright.
    if status:
        style = "red" if status.startswith("Error") else "green"
        line = Text(status, style=style, justify="center", no_wrap=True, overflow="ellipsis")
    else:
        line = Text(COPYRIGHT, style="bright_cyan", justify="center")
    return Panel(line, title="Copyright", border_style="white")
