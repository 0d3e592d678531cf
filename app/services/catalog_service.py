"""
services/catalog_service.py
---------------------------

Owns the in-memory copy of the active product list. The list is
fetched from the product store on first use, kept for a short
time-to-live (10 minutes by default) and shared by every caller until
it expires or is invalidated.

One ``CatalogCache`` is created per application in the FastAPI
lifespan and handed to the routes through ``app.state``; tests build a
fresh instance each. The cache is meant for a single event loop and
holds no locks. Concurrent callers that miss while a refresh is in
flight await that same refresh instead of starting their own.

The list returned by :meth:`CatalogCache.get_all_products` is shared by
reference. Callers must treat it as read-only.
"""

from __future__ import annotations

import asyncio
import json
import time
from typing import Callable, List, Optional

from pydantic import ValidationError

from app.clients.store_client import StoreClient
from app.core.errors import FetchError, StoreError
from app.logging_config import logger
from app.schemas.catalog import PRODUCT_COLUMNS, Product, ProductDisplay, ProductFilters

DEFAULT_TTL_SECONDS = 10 * 60


def _distinct_sorted(values) -> List[str]:
    return sorted({v.strip() for v in values if v.strip()})


class CatalogCache:
    """Time-bounded cache of the active product list.

    :param store: client used to read the ``products`` table
    :param ttl: seconds a fetched list stays fresh
    :param table: name of the products table
    :param clock: monotonic time source in seconds
    """

    def __init__(
        self,
        store: StoreClient,
        ttl: float = DEFAULT_TTL_SECONDS,
        table: str = "products",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store = store
        self.ttl = ttl
        self.table = table
        self._clock = clock
        self._products: Optional[List[ProductDisplay]] = None
        self._expires_at: float = float("-inf")
        self._inflight: Optional[asyncio.Task] = None
        self._generation = 0

    def is_valid(self) -> bool:
        return self._products is not None and self._clock() < self._expires_at

    async def fetch(self) -> List[ProductDisplay]:
        """Read every active product from the store, ordered by name.

        Does not touch the cache.

        :raises FetchError: if the store fails or returns malformed rows
        """
        logger.info(json.dumps({"event": "catalog_fetch_start", "table": self.table}))
        try:
            rows = await self.store.select(
                self.table,
                PRODUCT_COLUMNS,
                eq={"active": True},
                order="name",
            )
            products = [ProductDisplay.from_product(Product.model_validate(row)) for row in rows]
        except (StoreError, ValidationError) as exc:
            logger.error(json.dumps({
                "event": "catalog_fetch_error",
                "table": self.table,
                "detail": str(exc),
            }), exc_info=True)
            raise FetchError() from exc

        logger.info(json.dumps({
            "event": "catalog_fetch_done",
            "table": self.table,
            "total": len(products),
        }))
        return products

    async def _refresh(self) -> List[ProductDisplay]:
        generation = self._generation
        try:
            products = await self.fetch()
            # an invalidate() during the fetch discards this result
            if generation == self._generation:
                self._products = products
                self._expires_at = self._clock() + self.ttl
            return products
        finally:
            if generation == self._generation:
                self._inflight = None

    async def get_all_products(self) -> List[ProductDisplay]:
        """Return the cached list, refreshing it first when stale.

        A failed refresh leaves the previous (expired) state in place
        and raises :class:`FetchError` to every waiting caller.
        """
        if self.is_valid():
            logger.debug(json.dumps({"event": "catalog_cache_hit", "total": len(self._products)}))
            return self._products

        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._refresh())
        # shield: a cancelled caller must not cancel the fetch others await
        return await asyncio.shield(self._inflight)

    async def get_product_filters(self) -> ProductFilters:
        """Distinct trimmed categories and brands of the current list, sorted."""
        products = await self.get_all_products()
        return ProductFilters(
            categories=_distinct_sorted(p.category for p in products),
            brands=_distinct_sorted(p.brand for p in products),
        )

    def invalidate(self) -> None:
        """Drop the cached list so the next read refetches.

        A fetch already running keeps serving the callers waiting on it,
        but its result is not cached.
        """
        self._products = None
        self._expires_at = float("-inf")
        # the next miss starts its own fetch instead of joining a running one
        self._inflight = None
        self._generation += 1
        logger.info(json.dumps({"event": "catalog_cache_invalidated"}))
