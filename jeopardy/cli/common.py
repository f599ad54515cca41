"""
Helpers shared by the CLI commands.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..core.config import GameConfig
from ..core.env import load_env

console = Console()
err_console = Console(stderr=True)


def configure_logging(debug: bool = False) -> None:
    """Route package logs through rich; DEBUG with --debug, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=debug, show_path=debug)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)


def build_config(
    categories: Optional[int] = None,
    clues: Optional[int] = None,
    listing_count: Optional[int] = None,
    concurrent: Optional[bool] = None,
    debug: bool = False,
) -> GameConfig:
    """Load .env, read TRIVIA_* settings, then apply CLI overrides."""
    seen = load_env()
    if debug:
        from rich import print as rprint
        rprint({"env_keys_detected": seen})

    try:
        return GameConfig.from_env().with_overrides(
            category_qty=categories,
            clues_qty=clues,
            listing_count=listing_count,
            concurrent=concurrent,
        )
    except ValueError as e:
        err_console.print(f"[red]Invalid configuration:[/] {e}")
        raise typer.Exit(2)


def make_rng(seed: Optional[int]) -> Optional[random.Random]:
    return random.Random(seed) if seed is not None else None


def error_hint(message: str, provider: str) -> str:
    """Suggest a fix for common provider failures."""
    lowered = message.lower()
    if "timed out" in lowered or "timeout" in lowered:
        return "Hint: The trivia API is slow. Raise TRIVIA_TIMEOUT or try again."
    if "connect" in lowered or "name or service" in lowered:
        return f"Hint: Could not reach '{provider}'. Check your network or try --provider local."
    if "404" in lowered or "not found" in lowered:
        return f"Hint: '{provider}' doesn't look like a jService API root (expected /categories and /clues)."
    if "need" in lowered and "pool" in lowered:
        return "Hint: Not enough eligible categories. Raise TRIVIA_LISTING_COUNT or lower --categories/--clues."
    return ""
