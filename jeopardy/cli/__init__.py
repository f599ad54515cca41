"""
CLI commands for terminal Jeopardy.
"""

from .play import main as play_game, run_session, TerminalView
from .explore_categories import main as list_categories
from .dump_board import main as dump, board_to_json

__all__ = [
    "play_game",
    "run_session",
    "TerminalView",
    "list_categories",
    "dump",
    "board_to_json",
]
