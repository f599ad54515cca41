from __future__ import annotations
from typing import Protocol, List

from ..board import Category, CategoryInfo

CategoryId = int

# jService-compatible endpoints, relative to the provider base URL
CATEGORIES_PATH = "/categories"
CLUES_PATH = "/clues"


class ClueProvider(Protocol):
    """Protocol defining the interface all trivia providers must implement."""

    async def list_categories(self, offset: int = 0) -> List[CategoryInfo]:
        """
        Fetch one batch of category metadata.

        Args:
            offset: Skip this many categories in the provider's catalogue

        Returns:
            CategoryInfo for each listed category

        Raises:
            ProviderUnavailableError: If the call fails or the payload is malformed
        """
        ...

    async def list_eligible_category_ids(self) -> List[CategoryId]:
        """
        Ids of listed categories that have enough clues to fill a column.

        Raises:
            ProviderUnavailableError: If the call fails or the payload is malformed
        """
        ...

    async def fetch_category(self, category_id: CategoryId) -> Category:
        """
        Fetch a category and pick its clues at random.

        Args:
            category_id: Provider category id

        Returns:
            Category with exactly clues_qty hidden clues

        Raises:
            ProviderUnavailableError: If the call fails or the payload is malformed
            InsufficientPoolError: If the category has too few usable clues
        """
        ...
