from __future__ import annotations
import random
from typing import Dict, Optional

import httpx

from ..core.config import GameConfig
from .jservice_client import JServiceClient


# Provider presets for convenience
PROVIDER_PRESETS: Dict[str, str] = {
    "jservice": "https://jservice.io/api",
    # Self-hosted jService (default port of the Rails app)
    "local": "http://localhost:3000/api",
}


def resolve_base_url(provider: str) -> str:
    """
    Resolve a preset name or pass through a full base URL.

    Raises:
        ValueError: If provider is neither a preset nor an http(s) URL
    """
    resolved = PROVIDER_PRESETS.get(provider, provider)
    if not resolved.startswith(("http://", "https://")):
        raise ValueError(
            f"Unknown provider: {provider}\n"
            f"Supported presets: {', '.join(PROVIDER_PRESETS)}, or a full http(s) base URL"
        )
    return resolved.rstrip("/")


def get_client_for_provider(
    config: GameConfig,
    provider: Optional[str] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    rng: Optional[random.Random] = None,
) -> JServiceClient:
    """
    Factory function to build a trivia client from a config.

    Args:
        config: Board dimensions and provider settings
        provider: Preset name or base URL (defaults to config.base_url)
        http_client: Pre-built HTTP client, mostly for tests
        rng: Random source for clue sampling

    Returns:
        JServiceClient ready to use as an async context manager
    """
    base_url = resolve_base_url(provider or config.base_url)
    return JServiceClient(
        base_url=base_url,
        clues_qty=config.clues_qty,
        listing_count=config.listing_count,
        timeout=config.timeout,
        http_client=http_client,
        rng=rng,
    )
