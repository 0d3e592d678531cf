"""Pytest fixtures: a fake product store, a controllable clock and a catalog wired to both."""

import asyncio

import httpx
import pytest

from app.clients.http_client import HTTPClient
from app.clients.store_client import StoreClient
from app.schemas.catalog import Product, ProductDisplay
from app.services.catalog_service import CatalogCache

STORE_URL = "https://store.test"


def _row(**overrides):
    row = {
        "id": 1,
        "name": "Milk",
        "brand": "Lala",
        "flavor": None,
        "category": "Lacteos",
        "size": "1 L",
        "price": 30,
        "stock": 10,
        "fragile": False,
        "description": "Whole milk",
        "imageurl": "https://img.test/milk.webp",
        "imagealt": "Milk",
        "active": True,
    }
    row.update(overrides)
    return row


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeStore:
    """Answers store reads through ``httpx.MockTransport`` and records each request."""

    def __init__(self):
        self.rows = []
        self.status_code = 200
        self.error = None
        self.requests = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        # let concurrent callers interleave while the "network" is busy
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        if self.status_code >= 400:
            return httpx.Response(self.status_code, json={"message": "relation does not exist"})
        return httpx.Response(self.status_code, json=self.rows)


@pytest.fixture
def make_row():
    return _row


@pytest.fixture
def make_product():
    """Build a ProductDisplay from row overrides."""

    def factory(**overrides) -> ProductDisplay:
        return ProductDisplay.from_product(Product(**_row(**overrides)))

    return factory


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def http_client(fake_store):
    return HTTPClient(transport=httpx.MockTransport(fake_store.handler))


@pytest.fixture
def store_client(http_client):
    return StoreClient(http_client, STORE_URL, "anon-key")


@pytest.fixture
def catalog(store_client, clock):
    return CatalogCache(store_client, ttl=600, clock=clock)
