"""
Single `jeopardy` command grouping the play/categories/dump subcommands.
"""

import typer

from . import dump_board, explore_categories, play

app = typer.Typer(help="Terminal Jeopardy over a jService-style trivia API.", no_args_is_help=True)
app.command("play")(play.main)
app.command("categories")(explore_categories.main)
app.command("dump")(dump_board.main)


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
