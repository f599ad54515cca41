from __future__ import annotations

import asyncio
from typing import Callable, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..board import GameBoard, RevealState
from ..game_loop import GameController, NullListener
from ..models import get_client_for_provider
from ..reveal import RevealStep, display_text
from .common import build_config, configure_logging, console, error_hint, make_rng

app = typer.Typer()

InputFn = Callable[[str], str]

PROMPT = "Pick <column> <row>, r to restart, q to quit: "
QUIT_COMMANDS = {"q", "quit", "exit"}
RESTART_COMMANDS = {"r", "restart"}

STATE_STYLES = {
    RevealState.HIDDEN: "bold blue",
    RevealState.QUESTION: "yellow",
    RevealState.ANSWER: "green",
}


def render_board(board: GameBoard) -> Table:
    """Header row of titles, then one row per clue position."""
    table = Table(show_lines=True, expand=True)
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    for col, title in enumerate(board.titles, start=1):
        table.add_column(f"{col}. {escape(title)}", justify="center", overflow="fold")

    for row, clues in enumerate(board.rows(), start=1):
        cells = [
            f"[{STATE_STYLES[clue.reveal]}]{escape(display_text(clue))}[/]"
            for clue in clues
        ]
        table.add_row(str(row), *cells)
    return table


class TerminalView(NullListener):
    """Rendering sink that draws the board on a rich console."""

    def __init__(self, console: Console, provider: str = "jservice", debug: bool = False):
        self.console = console
        self.provider = provider
        self.debug = debug
        self.board: Optional[GameBoard] = None
        self._status = None

    def loading_begins(self) -> None:
        self.board = None
        self.loading_ends()
        self._status = self.console.status("[cyan]Loading categories…[/]")
        self._status.start()

    def loading_ends(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def board_ready(self, board: GameBoard) -> None:
        self.board = board
        self.console.rule("[bold green]Jeopardy![/]")
        self.console.print(render_board(board))

    def fatal_error(self, message: str) -> None:
        self.console.print(f"[bold red]Oops, something went wrong![/] {escape(message)}")
        hint = error_hint(message, self.provider)
        if self.debug and hint:
            self.console.print(hint)

    def clue_revealed(self, column: int, row: int, step: RevealStep) -> None:
        label = "Question" if step.state is RevealState.QUESTION else "Answer"
        self.console.print(render_board(self.board))
        self.console.print(f"[bold]{label}[/] ({column + 1}, {row + 1}): {escape(step.text)}")


def parse_cell(raw: str, shape: Tuple[int, int]) -> Optional[Tuple[int, int]]:
    """Parse '<column> <row>' (1-based) into 0-based (column, row), or None."""
    parts = raw.replace(",", " ").split()
    if len(parts) != 2 or not all(p.isdecimal() for p in parts):
        return None
    column, row = int(parts[0]) - 1, int(parts[1]) - 1
    columns, rows = shape
    if not (0 <= column < columns and 0 <= row < rows):
        return None
    return column, row


async def run_session(controller: GameController, view: TerminalView, input_fn: InputFn = input) -> int:
    """Start a game, then handle picks until the player quits."""
    await controller.start()
    while True:
        try:
            choice = input_fn(PROMPT).strip().lower()
        except (EOFError, KeyboardInterrupt):
            return 0

        if choice in QUIT_COMMANDS:
            return 0
        if choice in RESTART_COMMANDS:
            await controller.start()
            continue

        board = controller.board
        if board is None:
            view.console.print("No board loaded. Press r to try again.")
            continue

        cell = parse_cell(choice, board.shape)
        if cell is None:
            columns, rows = board.shape
            view.console.print(f"Invalid choice. Columns are 1-{columns}, rows are 1-{rows}.")
            continue

        step = controller.reveal(*cell)
        if step is not None and not step.changed:
            view.console.print("[dim]Already answered.[/]")
        elif board.is_complete():
            view.console.print("[bold magenta]Board cleared![/] Press r for a new game or q to quit.")


@app.command()
def main(
    provider: Optional[str] = typer.Option(None, help="Provider preset or API base URL (default TRIVIA_API_URL or jservice)"),
    categories: Optional[int] = typer.Option(None, help="Categories per board (default 6)"),
    clues: Optional[int] = typer.Option(None, help="Clues per category (default 5)"),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible boards"),
    concurrent: Optional[bool] = typer.Option(None, "--concurrent/--sequential", help="Fetch categories in parallel"),
    debug: bool = False,
):
    """
    Play Jeopardy in the terminal.

    Cells start as '?'. Picking a cell shows its question; picking it again
    shows the answer.
    """
    configure_logging(debug)
    config = build_config(categories, clues, concurrent=concurrent, debug=debug)

    rng = make_rng(seed)

    async def _play() -> int:
        try:
            client = get_client_for_provider(config, provider, rng=rng)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            return 2
        async with client:
            view = TerminalView(console, provider=provider or config.base_url, debug=debug)
            controller = GameController(client, config, view, rng=rng)
            return await run_session(controller, view)

    raise typer.Exit(asyncio.run(_play()))


if __name__ == "__main__":
    app()
