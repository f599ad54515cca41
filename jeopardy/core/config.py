from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Any

from ..board import CATEGORY_QTY, CLUES_QTY

DEFAULT_BASE_URL = "https://jservice.io/api"
DEFAULT_LISTING_COUNT = 100
DEFAULT_TIMEOUT = 10.0

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GameConfig:
    """Board dimensions and provider settings for one session."""
    category_qty: int = CATEGORY_QTY
    clues_qty: int = CLUES_QTY
    listing_count: int = DEFAULT_LISTING_COUNT
    concurrent: bool = False
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Build a config from TRIVIA_* environment variables (see core.env)."""
        def _int(key: str, default: int) -> int:
            raw = os.getenv(key)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{key} must be an integer, got {raw!r}")

        timeout_raw = os.getenv("TRIVIA_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"TRIVIA_TIMEOUT must be a number, got {timeout_raw!r}")

        config = cls(
            category_qty=_int("TRIVIA_CATEGORY_QTY", CATEGORY_QTY),
            clues_qty=_int("TRIVIA_CLUES_QTY", CLUES_QTY),
            listing_count=_int("TRIVIA_LISTING_COUNT", DEFAULT_LISTING_COUNT),
            concurrent=os.getenv("TRIVIA_CONCURRENT", "").strip().lower() in _TRUE,
            base_url=os.getenv("TRIVIA_API_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
        )
        config.validate()
        return config

    def with_overrides(self, **overrides: Any) -> "GameConfig":
        """Copy with non-None overrides applied (CLI options win over env)."""
        config = replace(self, **{k: v for k, v in overrides.items() if v is not None})
        config.validate()
        return config

    def validate(self) -> None:
        for name in ("category_qty", "clues_qty", "listing_count"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.listing_count < self.category_qty:
            raise ValueError(
                f"listing_count ({self.listing_count}) must be at least category_qty ({self.category_qty})"
            )
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
