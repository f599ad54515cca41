from __future__ import annotations
import asyncio
import pathlib
from typing import Optional

import orjson
import typer
from rich.console import Console
from rich.markup import escape

from ..board import GameBoard
from ..game_loop import GameController, NullListener
from ..models import get_client_for_provider
from .common import build_config, configure_logging, error_hint, make_rng

app = typer.Typer()
console = Console(stderr=True)


class _CollectErrors(NullListener):
    def __init__(self):
        self.errors = []

    def fatal_error(self, message: str) -> None:
        self.errors.append(message)


def board_to_json(board: GameBoard) -> bytes:
    return orjson.dumps(board.to_dict(), option=orjson.OPT_INDENT_2)


@app.command()
def main(
    out: Optional[str] = typer.Option(None, help="Write JSON here instead of stdout"),
    provider: Optional[str] = typer.Option(None, help="Provider preset or API base URL"),
    categories: Optional[int] = typer.Option(None, help="Categories per board (default 6)"),
    clues: Optional[int] = typer.Option(None, help="Clues per category (default 5)"),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible boards"),
    concurrent: Optional[bool] = typer.Option(None, "--concurrent/--sequential", help="Fetch categories in parallel"),
    debug: bool = False,
):
    """Build one board and print it as JSON (questions and answers included)."""
    configure_logging(debug)
    config = build_config(categories, clues, concurrent=concurrent, debug=debug)
    rng = make_rng(seed)
    listener = _CollectErrors()

    async def _build() -> Optional[GameBoard]:
        async with get_client_for_provider(config, provider, rng=rng) as client:
            return await GameController(client, config, listener, rng=rng).start()

    try:
        board = asyncio.run(_build())
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(2)

    if board is None:
        message = listener.errors[0] if listener.errors else "unknown error"
        console.print(f"[red]Could not build a board:[/] {escape(message)}")
        hint = error_hint(message, provider or config.base_url)
        if debug and hint:
            console.print(hint)
        raise typer.Exit(1)

    data = board_to_json(board)
    if out:
        path = pathlib.Path(out)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data + b"\n")
        console.print(f"[green]Wrote[/] {board.shape[0]}x{board.shape[1]} board to {path}")
    else:
        typer.echo(data.decode())


if __name__ == "__main__":
    app()
