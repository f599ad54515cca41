from __future__ import annotations
import asyncio
from typing import Optional
import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from ..errors import TriviaError
from ..models import get_client_for_provider
from .common import build_config, configure_logging, error_hint

app = typer.Typer()


@app.command()
def main(
    provider: Optional[str] = typer.Option(None, help="Provider preset or API base URL"),
    clues: Optional[int] = typer.Option(None, help="Minimum clues for a category to be eligible"),
    count: Optional[int] = typer.Option(None, help="Categories to request (default 100)"),
    offset: int = 0,
    show_all: bool = typer.Option(False, "--all", help="Include ineligible categories"),
    debug: bool = False,
):
    """List the categories a board could be drawn from."""
    configure_logging(debug)
    config = build_config(clues=clues, listing_count=count, debug=debug)

    async def _list():
        async with get_client_for_provider(config, provider) as client:
            return await client.list_categories(offset=offset)

    try:
        listed = asyncio.run(_list())
    except (TriviaError, ValueError) as e:
        print(f"[red]Could not list categories:[/] {escape(str(e))}")
        hint = error_hint(str(e), provider or config.base_url)
        if debug and hint:
            print(hint)
        raise typer.Exit(1)

    eligible = [c for c in listed if c.clues_count >= config.clues_qty]
    rows = listed if show_all else eligible

    table = Table("id", "title", "clues")
    for c in rows:
        style = None if c.clues_count >= config.clues_qty else "dim"
        table.add_row(str(c.id), escape(c.title), str(c.clues_count), style=style)
    print(table)

    print(f"[bold]Listed[/]: {len(listed)}")
    print(f"[bold]Eligible[/] (>= {config.clues_qty} clues): {len(eligible)}")
    if len(eligible) < config.category_qty:
        print(f"[yellow]Only {len(eligible)} eligible; a board needs {config.category_qty}.[/]")


if __name__ == "__main__":
    app()
