"""
Error kinds raised while building a game board.
"""


class TriviaError(Exception):
    """Base class for everything that aborts a game-start sequence."""


class ProviderUnavailableError(TriviaError):
    """The trivia API failed, timed out, or returned something unusable."""


class InsufficientPoolError(TriviaError, ValueError):
    """Not enough distinct candidates to draw the requested number of items."""


class MalformedBoardError(TriviaError, ValueError):
    """Board shape does not match the configured categories x clues grid."""
