"""
Game lifecycle: fetch categories, build a board, and handle reveals.
"""

from __future__ import annotations
import asyncio
import logging
import random
from typing import List, Optional, Protocol

from .board import Category, GameBoard, assemble_board
from .core.config import GameConfig
from .errors import TriviaError
from .models.base_client import ClueProvider
from .reveal import RevealStep, advance
from .utils import sample_unique

logger = logging.getLogger(__name__)


class GameListener(Protocol):
    """Signals a rendering sink receives from the controller."""

    def loading_begins(self) -> None: ...

    def loading_ends(self) -> None: ...

    def board_ready(self, board: GameBoard) -> None: ...

    def fatal_error(self, message: str) -> None: ...

    def clue_revealed(self, column: int, row: int, step: RevealStep) -> None: ...


class NullListener:
    """Listener that ignores everything. Subclass and override what you need."""

    def loading_begins(self) -> None:
        pass

    def loading_ends(self) -> None:
        pass

    def board_ready(self, board: GameBoard) -> None:
        pass

    def fatal_error(self, message: str) -> None:
        pass

    def clue_revealed(self, column: int, row: int, step: RevealStep) -> None:
        pass


class GameController:
    """
    Owns the current board and runs the start/reset/reveal lifecycle.

    Each start() builds a brand-new GameBoard. A start() that is overtaken by
    a later start() or reset() drops its result without touching state.
    """

    def __init__(
        self,
        provider: ClueProvider,
        config: Optional[GameConfig] = None,
        listener: Optional[GameListener] = None,
        rng: Optional[random.Random] = None,
    ):
        self.provider = provider
        self.config = config or GameConfig()
        self.listener = listener or NullListener()
        self.rng = rng
        self.board: Optional[GameBoard] = None
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def reset(self) -> None:
        """Discard the current board and invalidate any in-flight start()."""
        self._generation += 1
        self.board = None

    async def start(self) -> Optional[GameBoard]:
        """
        Run a full game-start sequence.

        Returns:
            The new board, or None if the sequence failed or went stale
        """
        self.reset()
        generation = self._generation
        self.listener.loading_begins()
        logger.info("Starting game #%d (%dx%d)", generation,
                    self.config.category_qty, self.config.clues_qty)

        try:
            board = await self._build_board()
        except TriviaError as e:
            if generation != self._generation:
                logger.debug("Dropping failure from stale game #%d: %s", generation, e)
                return None
            logger.warning("Game #%d aborted: %s", generation, e)
            self.listener.loading_ends()
            self.listener.fatal_error(str(e))
            return None

        if generation != self._generation:
            logger.debug("Dropping board from stale game #%d", generation)
            return None

        self.board = board
        self.listener.board_ready(board)
        self.listener.loading_ends()
        logger.info("Game #%d ready: %s", generation, ", ".join(board.titles))
        return board

    async def _build_board(self) -> GameBoard:
        ids = await self.provider.list_eligible_category_ids()
        chosen = sample_unique(ids, self.config.category_qty, rng=self.rng)
        logger.debug("Sampled categories %s from %d eligible", chosen, len(ids))

        categories = await self._fetch_all(chosen)
        return assemble_board(categories, self.config.category_qty, self.config.clues_qty)

    async def _fetch_all(self, ids: List[int]) -> List[Category]:
        """Fetch categories in sampled order, one at a time or all at once."""
        if not self.config.concurrent:
            return [await self.provider.fetch_category(cid) for cid in ids]

        results = await asyncio.gather(
            *(self.provider.fetch_category(cid) for cid in ids),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return list(results)

    def reveal(self, column: int, row: int) -> Optional[RevealStep]:
        """
        Advance the clue at 0-based (column, row).

        Returns None when there is no board or the cell is off the grid.
        """
        if self.board is None:
            return None
        try:
            clue = self.board.cell(column, row)
        except IndexError:
            return None

        step = advance(clue)
        if step.changed:
            self.listener.clue_revealed(column, row, step)
        return step
