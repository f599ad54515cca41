"""
Trivia data providers.

All providers speak the jService API shape:
- GET /categories?count=N  -> [{id, title, clues_count}, ...]
- GET /clues?category=ID   -> [{question, answer, category: {title}}, ...]

Usage:
    from jeopardy.models import get_client_for_provider

    async with get_client_for_provider(config, "jservice") as client:
        ids = await client.list_eligible_category_ids()
        category = await client.fetch_category(ids[0])
"""

from .base_client import ClueProvider, CategoryId
from .jservice_client import JServiceClient
from .client_factory import (
    get_client_for_provider,
    resolve_base_url,
    PROVIDER_PRESETS,
)

__all__ = [
    # Main functions
    "get_client_for_provider",
    "resolve_base_url",

    # Client classes
    "JServiceClient",

    # Base types
    "ClueProvider",
    "CategoryId",

    # Constants
    "PROVIDER_PRESETS",
]
