"""
Jeopardy board - core modules.
"""

__version__ = "0.1.0"

from .errors import (
    TriviaError,
    ProviderUnavailableError,
    InsufficientPoolError,
    MalformedBoardError,
)
from .utils import sample_unique
from .board import Clue, Category, CategoryInfo, GameBoard, RevealState, assemble_board
from .reveal import RevealStep, advance, display_text
from .game_loop import GameController, GameListener, NullListener

__all__ = [
    "TriviaError",
    "ProviderUnavailableError",
    "InsufficientPoolError",
    "MalformedBoardError",
    "sample_unique",
    "Clue",
    "Category",
    "CategoryInfo",
    "GameBoard",
    "RevealState",
    "assemble_board",
    "RevealStep",
    "advance",
    "display_text",
    "GameController",
    "GameListener",
    "NullListener",
]
