from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .errors import KanbanError
from .logging import setup_logging
from .settings import Settings, load_settings
from .store import Store

app = typer.Typer(
    add_completion=False,
    help="kk: a personal kanban board for the terminal",
    rich_markup_mode="rich",
)
console = Console()


# ═══════════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def _open_store(settings: Settings) -> Store:
    try:
        return Store.from_settings(settings)
    except sqlite3.Error as e:
        console.print(f"[red]✗ Could not open {escape(str(settings.KK_DB_PATH))}:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


def _interactive_board(settings: Settings) -> None:
    """Run the full-screen board until the user quits."""
    from .tui import Navigator, Router, UIState

    setup_logging(settings)
    store = _open_store(settings)
    try:
        state = UIState()
        router = Router(console, settings, state, Navigator(state), store)
        router.start()
        router.run()
    except KanbanError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    finally:
        store.close()


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    db_path: Optional[Path] = typer.Option(
        None,
        "--db-path",
        "--database-path",
        "-d",
        help="SQLite file holding the boards (default: ~/.local/share/kk/kk.db)",
    ),
    highlight_color: Optional[str] = typer.Option(
        None,
        "--highlight-color",
        "-c",
        help="Colour of the selection, e.g. '#FF96A7' or 'magenta'",
    ),
):
    """
    [bold]kk[/bold]: a personal kanban board.

    [dim]Run without arguments to open the board.[/dim]

    [bold]Quick Commands:[/bold]
      kk boards      List boards
      kk status      Show configuration
    """
    try:
        settings = load_settings(KK_DB_PATH=db_path, KK_HIGHLIGHT_COLOR=highlight_color)
    except ValidationError as e:
        console.print(f"[red]✗ Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        _interactive_board(settings)
        raise typer.Exit(code=0)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("boards", help="[bold cyan]L[/bold cyan]ist boards, most recently viewed first")
@app.command("ls", hidden=True)  # Alias
def boards(ctx: typer.Context):
    settings: Settings = ctx.obj
    store = _open_store(settings)
    try:
        metas = store.get_board_metas()
    finally:
        store.close()

    if not metas:
        console.print("[dim]No boards yet. Run[/dim] [cyan]kk[/cyan] [dim]and press[/dim] n.")
        return

    t = Table(title="[bold]Boards[/bold]")
    t.add_column("Name", style="bold")
    t.add_column("Columns")
    t.add_column("Last updated", style="dim")
    t.add_column("Last viewed", style="dim")
    t.add_column("Created", style="dim")
    for m in metas:
        t.add_row(escape(m.name), escape(", ".join(m.columns)), m.updated_at, m.viewed_at, m.inserted_at)
    console.print(t)


@app.command("status", help="[bold cyan]S[/bold cyan]how the resolved configuration")
def status(ctx: typer.Context):
    s: Settings = ctx.obj
    console.print(Panel.fit(
        "\n".join([
            f"[bold]Database:[/bold]       {s.KK_DB_PATH}",
            f"[bold]Highlight:[/bold]      [{s.KK_HIGHLIGHT_COLOR}]{s.KK_HIGHLIGHT_COLOR}[/]",
            f"[bold]Editor:[/bold]         {s.EDITOR or '[red](not set)[/red]'}",
            f"[bold]Busy timeout:[/bold]   {s.KK_BUSY_TIMEOUT_SEC}s",
            f"[bold]Error display:[/bold]  {s.KK_ERROR_DISPLAY_SEC}s",
            f"[bold]Logs:[/bold]           {s.KK_LOG_DIR} ({s.KK_LOG_LEVEL})",
        ]),
        title="[bold]Configuration[/bold]",
    ))


def main() -> None:
    app()
