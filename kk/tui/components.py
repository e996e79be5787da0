"""Rich renderables for each mode of the board UI."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.align import Align
from rich.console import Group, RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .keymap import HINTS
from .state import Confirmation, Mode

if TYPE_CHECKING:
    from ..models import Board, Card
    from .state import UIState


SEPARATOR = " │ "


# ═══════════════════════════════════════════════════════════════════════════════
# BOARD LIST
# ═══════════════════════════════════════════════════════════════════════════════

def render_boards(state: UIState, highlight: str) -> RenderableType:
    """Board picker: one row per board, most recently viewed first."""
    if not state.board_metas:
        return Align.center(
            Text("No boards yet. Press n to create one.", style="dim"),
            vertical="middle",
        )

    t = Table(title="[bold]Boards[/bold]", expand=True, show_edge=False)
    t.add_column("Name", style="bold")
    t.add_column("Columns", style="dim")
    t.add_column("Last updated")
    t.add_column("Last viewed")
    t.add_column("Created")
    for i, meta in enumerate(state.board_metas):
        style = f"bold {highlight}" if i == state.selection.board_index else None
        t.add_row(
            Text(meta.name),
            Text(", ".join(meta.columns)),
            meta.updated_at,
            meta.viewed_at,
            meta.inserted_at,
            style=style,
        )
    return t


# ═══════════════════════════════════════════════════════════════════════════════
# BOARD
# ═══════════════════════════════════════════════════════════════════════════════

def _card_line(card: Card) -> Text:
    return Text(f"{card.external_id:>3} {card.title}", no_wrap=True, overflow="ellipsis")


def render_board(state: UIState, highlight: str) -> RenderableType:
    """Columns side by side; the selected card is highlighted.

    While a card is being moved its whole row is drawn reversed so it is
    obvious which card follows the cursor.
    """
    board: Board | None = state.board
    if board is None:
        return Text("")

    grid = Table.grid(expand=True, padding=(0, 1))
    for _ in board.columns:
        grid.add_column(ratio=1)

    sel = state.selection
    panels = []
    for ci, column in enumerate(board.columns):
        lines = []
        for ri, card in enumerate(column.cards):
            line = _card_line(card)
            if ci == sel.column_index and ri == sel.card_index:
                style = f"reverse bold {highlight}" if state.mode is Mode.MOVING_CARD else f"bold {highlight}"
                line.stylize(style)
            lines.append(line)
        border = highlight if ci == sel.column_index else "dim"
        panels.append(
            Panel(
                Group(*lines) if lines else Text("(empty)", style="dim"),
                title=Text(f"{column.name} ({len(column.cards)})"),
                border_style=border,
            )
        )
    grid.add_row(*panels)
    return grid


def render_card_detail(card: Card | None, highlight: str) -> RenderableType:
    if card is None:
        return Text("")
    meta = Text.assemble(
        (f"#{card.external_id}", f"bold {highlight}"),
        ("  created ", "dim"),
        card.inserted_at,
        ("  updated ", "dim"),
        card.updated_at,
    )
    body = Text(card.body or "")
    return Align.center(
        Panel(
            Group(meta, Text(""), body),
            title=Text(card.title, style="bold"),
            border_style=highlight,
            width=80,
        ),
        vertical="middle",
    )


def render_confirm_deletion(card: Card | None, choice: Confirmation, highlight: str) -> RenderableType:
    title = card.title if card is not None else ""
    delete_style = f"reverse bold {highlight}" if choice is Confirmation.YES else "dim"
    cancel_style = f"reverse bold {highlight}" if choice is Confirmation.NO else "dim"
    buttons = Text.assemble(("[ Delete ]", delete_style), "   ", ("[ Cancel ]", cancel_style))
    return Align.center(
        Panel(
            Group(Text(f"Delete \"{title}\"?"), Text(""), Align.center(buttons)),
            title="[bold]Delete card[/bold]",
            border_style="red",
            width=60,
        ),
        vertical="middle",
    )


# ═══════════════════════════════════════════════════════════════════════════════
# MODELINE
# ═══════════════════════════════════════════════════════════════════════════════

def render_modeline(state: UIState, highlight: str) -> Text:
    """Mode name, board name, then either the current error or key hints."""
    line = Text()
    line.append(f" {state.mode.title} ", style=f"reverse bold {highlight}")
    if state.board is not None and state.mode is not Mode.VIEWING_BOARDS:
        line.append(f" {state.board.name}", style="bold")
    if state.error:
        line.append(f" - Error: {state.error}", style="bold red")
        return line
    hints = SEPARATOR.join(f"{key} {label}" for key, label in HINTS.get(state.mode, []))
    if hints:
        line.append(SEPARATOR + hints, style="dim")
    return line


# ═══════════════════════════════════════════════════════════════════════════════
# SCREEN
# ═══════════════════════════════════════════════════════════════════════════════

def render_body(state: UIState, highlight: str) -> RenderableType:
    if state.mode is Mode.VIEWING_BOARDS:
        return render_boards(state, highlight)
    if state.mode is Mode.VIEWING_CARD_DETAIL:
        return render_card_detail(state.selected_card(), highlight)
    if state.mode is Mode.CONFIRM_CARD_DELETION:
        layout = Layout()
        layout.split_column(
            Layout(render_board(state, highlight), name="board"),
            Layout(render_confirm_deletion(state.selected_card(), state.confirmation, highlight), name="popup", size=7),
        )
        return layout
    return render_board(state, highlight)


def render_screen(state: UIState, highlight: str) -> Layout:
    """Whole screen: body on top, a one-line modeline pinned to the bottom."""
    layout = Layout()
    layout.split_column(
        Layout(render_body(state, highlight), name="body"),
        Layout(render_modeline(state, highlight), name="modeline", size=1),
    )
    return layout
