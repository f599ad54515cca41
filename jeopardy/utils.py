"""
Utility functions for sampling and cleaning provider data.
"""

import html
import random
import re
from typing import List, Optional, Sequence, TypeVar

from .errors import InsufficientPoolError

T = TypeVar("T")

# Upper bound on draws is this many times the pool size
DRAW_FACTOR = 50

_TAG_RE = re.compile(r"</?[A-Za-z][^<>]*>")
_SPACE_RE = re.compile(r"\s+")


def sample_unique(
    pool: Sequence[T],
    count: int,
    rng: Optional[random.Random] = None,
    max_draws: Optional[int] = None,
) -> List[T]:
    """
    Pick `count` distinct items from `pool` without replacement.

    Indices are drawn uniformly from [0, len(pool)); a draw that hits an
    index already taken is repeated. Items come back in the order they were
    drawn.

    Args:
        pool: Candidates, assumed free of duplicates
        count: How many items to pick
        rng: Random source (defaults to the module-level generator)
        max_draws: Give up after this many draws (default DRAW_FACTOR * len(pool))

    Returns:
        List of `count` items from `pool`

    Raises:
        ValueError: If count is negative
        InsufficientPoolError: If the pool is too small or the draw budget runs out
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count > len(pool):
        raise InsufficientPoolError(
            f"Need {count} items but pool only has {len(pool)}"
        )
    if count == 0:
        return []

    randrange = rng.randrange if rng is not None else random.randrange
    budget = max_draws if max_draws is not None else DRAW_FACTOR * len(pool)

    taken = set()
    picked: List[T] = []
    draws = 0
    while len(picked) < count:
        if draws >= budget:
            raise InsufficientPoolError(
                f"Drew {draws} times but only found {len(picked)}/{count} distinct items"
            )
        draws += 1
        idx = randrange(len(pool))
        if idx in taken:
            continue
        taken.add(idx)
        picked.append(pool[idx])

    return picked


def clean_text(text) -> str:
    """Strip HTML tags and entities from provider text and collapse whitespace."""
    if text is None:
        return ""
    text = html.unescape(_TAG_RE.sub("", str(text)))
    return _SPACE_RE.sub(" ", text).strip()
