"""
Game board data model: clues, categories, and the assembled grid.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .errors import MalformedBoardError

CLUES_QTY = 5
CATEGORY_QTY = 6


class RevealState(str, Enum):
    """How much of a clue is showing. Only ever moves forward."""
    HIDDEN = "hidden"
    QUESTION = "question"
    ANSWER = "answer"

    @property
    def is_terminal(self) -> bool:
        return self is RevealState.ANSWER


@dataclass
class Clue:
    """One question/answer pair. `reveal` belongs to the board holding the clue."""
    question: str
    answer: str
    reveal: RevealState = RevealState.HIDDEN
    value: Optional[int] = None
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "question": self.question,
            "answer": self.answer,
            "value": self.value,
            "reveal": self.reveal.value,
        }


@dataclass(frozen=True)
class CategoryInfo:
    """Listing metadata for one category, as returned by the provider."""
    id: int
    title: str
    clues_count: int


@dataclass(frozen=True)
class Category:
    """A titled column of clues."""
    title: str
    clues: Tuple[Clue, ...]
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "clues": [c.to_dict() for c in self.clues],
        }


@dataclass(frozen=True)
class GameBoard:
    """
    A categories x clues grid for a single game.

    Columns are categories in sampled order; rows are clue positions.
    """
    categories: Tuple[Category, ...]
    clues_qty: int = field(default=CLUES_QTY)

    @property
    def shape(self) -> Tuple[int, int]:
        """(columns, rows)"""
        return len(self.categories), self.clues_qty

    @property
    def titles(self) -> List[str]:
        return [c.title for c in self.categories]

    def cell(self, column: int, row: int) -> Clue:
        """Clue at 0-based (column, row). Raises IndexError when off the grid."""
        if not (0 <= column < len(self.categories) and 0 <= row < self.clues_qty):
            raise IndexError(f"No cell at column={column}, row={row}")
        return self.categories[column].clues[row]

    def rows(self) -> Iterator[List[Clue]]:
        """Yield one list of clues per row, left to right."""
        for row in range(self.clues_qty):
            yield [cat.clues[row] for cat in self.categories]

    def is_complete(self) -> bool:
        """True once every clue on the board shows its answer."""
        return all(
            clue.reveal.is_terminal
            for cat in self.categories
            for clue in cat.clues
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shape": list(self.shape),
            "categories": [c.to_dict() for c in self.categories],
        }


def assemble_board(
    categories: Sequence[Category],
    category_qty: int = CATEGORY_QTY,
    clues_qty: int = CLUES_QTY,
) -> GameBoard:
    """
    Validate fetched categories and freeze them into a GameBoard.

    Args:
        categories: Categories in display order
        category_qty: Required number of categories
        clues_qty: Required number of clues per category

    Returns:
        GameBoard of shape (category_qty, clues_qty)

    Raises:
        MalformedBoardError: If the shape is wrong or a category id repeats
    """
    if len(categories) != category_qty:
        raise MalformedBoardError(
            f"Expected {category_qty} categories, got {len(categories)}"
        )

    seen_ids = set()
    for i, cat in enumerate(categories):
        if len(cat.clues) != clues_qty:
            raise MalformedBoardError(
                f"Category {i} ({cat.title!r}) must have exactly {clues_qty} clues, got {len(cat.clues)}"
            )
        if cat.id is not None:
            if cat.id in seen_ids:
                raise MalformedBoardError(f"Duplicate category id: {cat.id}")
            seen_ids.add(cat.id)

    return GameBoard(categories=tuple(categories), clues_qty=clues_qty)
