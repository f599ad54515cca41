"""
Tests for GameConfig and .env loading.
"""

import pytest

from jeopardy.core.config import DEFAULT_BASE_URL, GameConfig
from jeopardy.core.env import load_env


def test_defaults(clean_env):
    config = GameConfig.from_env()
    assert config == GameConfig()
    assert (config.category_qty, config.clues_qty, config.listing_count) == (6, 5, 100)
    assert config.concurrent is False
    assert config.base_url == DEFAULT_BASE_URL


def test_from_env_reads_trivia_keys(clean_env, monkeypatch):
    monkeypatch.setenv("TRIVIA_CATEGORY_QTY", "4")
    monkeypatch.setenv("TRIVIA_CLUES_QTY", "3")
    monkeypatch.setenv("TRIVIA_LISTING_COUNT", "50")
    monkeypatch.setenv("TRIVIA_CONCURRENT", "yes")
    monkeypatch.setenv("TRIVIA_API_URL", "local")
    monkeypatch.setenv("TRIVIA_TIMEOUT", "2.5")

    config = GameConfig.from_env()

    assert config == GameConfig(
        category_qty=4, clues_qty=3, listing_count=50,
        concurrent=True, base_url="local", timeout=2.5,
    )


@pytest.mark.parametrize("key,value,match", [
    ("TRIVIA_CLUES_QTY", "five", "TRIVIA_CLUES_QTY must be an integer"),
    ("TRIVIA_TIMEOUT", "soon", "TRIVIA_TIMEOUT must be a number"),
    ("TRIVIA_CATEGORY_QTY", "0", "category_qty must be positive"),
    ("TRIVIA_LISTING_COUNT", "3", "listing_count"),
])
def test_from_env_rejects_bad_values(clean_env, monkeypatch, key, value, match):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValueError, match=match):
        GameConfig.from_env()


def test_with_overrides_ignores_none():
    config = GameConfig(concurrent=True).with_overrides(category_qty=3, clues_qty=None, concurrent=None)
    assert config.category_qty == 3
    assert config.clues_qty == 5
    assert config.concurrent is True


def test_with_overrides_validates():
    with pytest.raises(ValueError, match="listing_count"):
        GameConfig().with_overrides(category_qty=200)


def test_load_env_reads_dotenv_file(clean_env, monkeypatch):
    (clean_env / ".env").write_text("# board settings\nTRIVIA_CLUES_QTY=4\n", encoding="utf-8")

    found = load_env()

    assert found == {"TRIVIA_CLUES_QTY": "4"}
    assert GameConfig.from_env().clues_qty == 4


def test_load_env_does_not_override_existing(clean_env, monkeypatch):
    (clean_env / "custom.env").write_text("TRIVIA_CATEGORY_QTY=2\n", encoding="utf-8")
    monkeypatch.setenv("TRIVIA_CATEGORY_QTY", "3")
    monkeypatch.setenv("DOTENV_PATH", str(clean_env / "custom.env"))

    assert load_env() == {"TRIVIA_CATEGORY_QTY": "3"}
