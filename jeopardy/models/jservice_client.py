from __future__ import annotations
import logging
import random
from typing import Any, Dict, List, Optional

import httpx
import orjson

from ..board import CLUES_QTY, Category, CategoryInfo, Clue
from ..core.config import DEFAULT_BASE_URL, DEFAULT_LISTING_COUNT, DEFAULT_TIMEOUT
from ..errors import ProviderUnavailableError
from ..utils import clean_text, sample_unique
from .base_client import CATEGORIES_PATH, CLUES_PATH, CategoryId

logger = logging.getLogger(__name__)


class JServiceClient:
    """Client for jService-style trivia APIs over async HTTP."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        clues_qty: int = CLUES_QTY,
        listing_count: int = DEFAULT_LISTING_COUNT,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize jService client.

        Args:
            base_url: API root, e.g. "https://jservice.io/api"
            clues_qty: Clues needed per category
            listing_count: Categories requested per listing call
            timeout: HTTP timeout in seconds (ignored when http_client is given)
            http_client: Pre-built client to use instead of creating one
            rng: Random source for clue sampling
        """
        self.base_url = base_url
        self.clues_qty = clues_qty
        self.listing_count = listing_count
        self.rng = rng
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "JServiceClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        """GET a path and decode its JSON body, mapping every failure to ProviderUnavailableError."""
        logger.debug("GET %s%s params=%s", self.base_url, path, params)
        try:
            response = await self.client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise ProviderUnavailableError(f"Trivia API request to {path} failed: {e}") from e

        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            raise ProviderUnavailableError(f"Invalid JSON from {path}: {e}") from e

    async def list_categories(self, offset: int = 0) -> List[CategoryInfo]:
        """
        Fetch one batch of category metadata.

        Args:
            offset: Skip this many categories in the provider's catalogue

        Returns:
            CategoryInfo for each listed category
        """
        params: Dict[str, Any] = {"count": self.listing_count}
        if offset:
            params["offset"] = offset
        data = await self._get_json(CATEGORIES_PATH, params)

        if not isinstance(data, list):
            raise ProviderUnavailableError(f"Expected a list of categories, got {type(data).__name__}")

        categories = []
        for i, raw in enumerate(data):
            try:
                categories.append(CategoryInfo(
                    id=int(raw["id"]),
                    title=clean_text(raw.get("title", "")),
                    clues_count=int(raw.get("clues_count", 0)),
                ))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise ProviderUnavailableError(f"Malformed category at index {i}: {raw!r}") from e
        return categories

    async def list_eligible_category_ids(self) -> List[CategoryId]:
        """Ids of listed categories with at least clues_qty clues, in listing order."""
        categories = await self.list_categories()
        eligible = [c.id for c in categories if c.clues_count >= self.clues_qty]
        logger.info("%d of %d listed categories have >= %d clues",
                    len(eligible), len(categories), self.clues_qty)
        return eligible

    async def fetch_category(self, category_id: CategoryId) -> Category:
        """
        Fetch a category and pick clues_qty of its clues at random.

        Args:
            category_id: Provider category id

        Returns:
            Category titled from the first returned clue, with hidden clues
        """
        data = await self._get_json(CLUES_PATH, {"category": category_id})

        if not isinstance(data, list) or not data:
            raise ProviderUnavailableError(f"No clues returned for category {category_id}")

        try:
            title = clean_text(data[0]["category"]["title"])
        except (KeyError, TypeError, IndexError) as e:
            raise ProviderUnavailableError(f"Missing category title for category {category_id}") from e
        if not title:
            raise ProviderUnavailableError(f"Blank category title for category {category_id}")

        usable = [self._parse_clue(raw) for raw in data]
        usable = [c for c in usable if c is not None]
        if len(usable) < len(data):
            logger.debug("Category %s: dropped %d blank clues", category_id, len(data) - len(usable))

        clues = sample_unique(usable, self.clues_qty, rng=self.rng)
        return Category(title=title, clues=tuple(clues), id=category_id)

    def _parse_clue(self, raw: Any) -> Optional[Clue]:
        """Turn one raw clue into a hidden Clue, or None if it can't be shown."""
        if not isinstance(raw, dict):
            return None
        question = clean_text(raw.get("question"))
        answer = clean_text(raw.get("answer"))
        if not question or not answer:
            return None

        value = raw.get("value")
        clue_id = raw.get("id")
        return Clue(
            question=question,
            answer=answer,
            value=value if isinstance(value, int) else None,
            id=clue_id if isinstance(clue_id, int) else None,
        )
