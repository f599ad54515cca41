# jeopardy/core/env.py
from __future__ import annotations
import os
from dotenv import load_dotenv

KNOWN_KEYS = [
    "TRIVIA_API_URL",         # base URL or preset name (jservice, local)
    "TRIVIA_CATEGORY_QTY",
    "TRIVIA_CLUES_QTY",
    "TRIVIA_LISTING_COUNT",   # categories requested per listing call
    "TRIVIA_CONCURRENT",
    "TRIVIA_TIMEOUT",
]

def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns the known TRIVIA_* keys that are set.
    None of them are secrets, so values come back unmasked.
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    return {k: os.environ[k] for k in KNOWN_KEYS if os.getenv(k)}
