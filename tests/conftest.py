"""
Pytest configuration for the Jeopardy board.

Tests never touch the network: HTTP goes through httpx.MockTransport backed by
an in-memory jService catalogue, and controller tests use a fake provider.
"""

import asyncio

import httpx
import orjson
import pytest

from jeopardy.board import Category, Clue
from jeopardy.core.env import KNOWN_KEYS
from jeopardy.errors import ProviderUnavailableError
from jeopardy.game_loop import NullListener
from jeopardy.models import JServiceClient

BASE_URL = "https://trivia.test/api"


def make_catalogue(n=100, short_every=5):
    """n categories; every `short_every`-th one has only 3 clues."""
    return [
        {
            "id": i,
            "title": f"category {i}",
            "clues_count": 3 if i % short_every == 0 else 5 + i % 4,
        }
        for i in range(1, n + 1)
    ]


class FakeTriviaApi:
    """Callable handler for httpx.MockTransport speaking the jService shape."""

    def __init__(self, categories=None, fail_on_clue_call=None):
        self.categories = categories if categories is not None else make_catalogue()
        self.fail_on_clue_call = fail_on_clue_call
        self.requests = []
        self.clue_calls = 0

    def clues_for(self, category):
        return [
            {
                "id": category["id"] * 100 + n,
                "question": f"Question {category['id']}.{n}",
                "answer": f"Answer {category['id']}.{n}",
                "value": 200 * (n + 1),
                "category": {"title": category["title"]},
            }
            for n in range(category["clues_count"])
        ]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        params = request.url.params

        if path.endswith("/categories"):
            count = int(params.get("count", 1))
            offset = int(params.get("offset", 0))
            return httpx.Response(200, content=orjson.dumps(self.categories[offset:offset + count]))

        if path.endswith("/clues"):
            self.clue_calls += 1
            if self.clue_calls == self.fail_on_clue_call:
                return httpx.Response(503, text="Service Unavailable")
            cid = int(params["category"])
            category = next((c for c in self.categories if c["id"] == cid), None)
            if category is None:
                return httpx.Response(200, content=b"[]")
            return httpx.Response(200, content=orjson.dumps(self.clues_for(category)))

        return httpx.Response(404)


@pytest.fixture
def api():
    return FakeTriviaApi()


@pytest.fixture
def run_client():
    """Run `fn(client)` against a JServiceClient wired to a fake API."""
    def _run(api, fn, **kwargs):
        async def _go():
            transport = httpx.MockTransport(api)
            async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as http:
                client = JServiceClient(base_url=BASE_URL, http_client=http, **kwargs)
                return await fn(client)
        return asyncio.run(_go())
    return _run


def make_category(cid, clues_qty=5, title=None):
    return Category(
        title=title or f"Cat {cid}",
        clues=tuple(Clue(question=f"Q{cid}-{n}", answer=f"A{cid}-{n}") for n in range(clues_qty)),
        id=cid,
    )


class FakeProvider:
    """In-memory ClueProvider; optionally fails on the Nth fetch_category call."""

    def __init__(self, eligible=None, clues_qty=5, fail_on_fetch=None, delays=None):
        self.eligible = list(eligible) if eligible is not None else list(range(1, 21))
        self.clues_qty = clues_qty
        self.fail_on_fetch = fail_on_fetch
        self.delays = delays or {}
        self.fetched = []

    async def list_categories(self, offset=0):
        return []

    async def list_eligible_category_ids(self):
        return list(self.eligible)

    async def fetch_category(self, category_id):
        self.fetched.append(category_id)
        if len(self.fetched) == self.fail_on_fetch:
            raise ProviderUnavailableError(f"category {category_id} timed out")
        delay = self.delays.get(category_id)
        if delay:
            await asyncio.sleep(delay)
        return make_category(category_id, self.clues_qty)


class RecordingListener(NullListener):
    """Keeps every signal in order so tests can assert on them."""

    def __init__(self):
        self.events = []
        self.boards = []
        self.errors = []
        self.reveals = []

    def loading_begins(self):
        self.events.append("loading_begins")

    def loading_ends(self):
        self.events.append("loading_ends")

    def board_ready(self, board):
        self.events.append("board_ready")
        self.boards.append(board)

    def fatal_error(self, message):
        self.events.append("fatal_error")
        self.errors.append(message)

    def clue_revealed(self, column, row, step):
        self.events.append("clue_revealed")
        self.reveals.append((column, row, step))


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No TRIVIA_* variables and no stray .env from the working directory."""
    # setenv first so monkeypatch also undoes values load_dotenv writes later
    for key in KNOWN_KEYS + ["DOTENV_PATH"]:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path
