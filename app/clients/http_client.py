"""
clients/http_client.py
----------------------

Async HTTP client wrapper with connection pooling, timeouts and
optional retries for idempotent requests. This client should only be
instantiated once per process and shared across services via the
FastAPI lifespan event. It uses ``httpx.AsyncClient`` under the hood
and honours the global settings defined in :mod:`app.core.config`.

Retries are applied exclusively to GET requests that fail at the
transport level, and only when ``APP_HTTP_MAX_RETRIES`` is above zero.
Non‑GET methods are sent once and any error is propagated immediately.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Optional

import httpx

from app.core.config import get_settings
from app.logging_config import log_http_request


class HTTPClient:
    """Shared async HTTP client.

    Use this class for all outbound HTTP interactions within the
    application. Tests pass an ``httpx.MockTransport`` through
    ``transport`` to avoid touching the network.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        settings = get_settings()
        self.timeout = settings.http_timeout
        # AsyncClient pools connections per host
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=transport)
        self.max_retries = settings.http_max_retries
        self.backoff_factor = settings.http_backoff_factor

    async def close(self) -> None:
        """Close the underlying HTTPX client and release resources."""
        await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Perform a single HTTP request without retries."""
        start_time = time.time()
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError:
            log_http_request(method, url, headers=kwargs.get("headers"), params=kwargs.get("params"),
                             duration_ms=(time.time() - start_time) * 1000)
            raise
        log_http_request(method, url, headers=kwargs.get("headers"), params=kwargs.get("params"),
                         status=response.status_code, duration_ms=(time.time() - start_time) * 1000)
        return response

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Perform a GET request, retrying transport errors with backoff."""
        attempt = 0
        while True:
            try:
                return await self._request("GET", url, **kwargs)
            except httpx.TransportError:
                if attempt >= self.max_retries:
                    raise
                # exponential backoff
                await asyncio.sleep(self.backoff_factor * (2 ** attempt))
                attempt += 1

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Public request method.

        For GET requests this applies retry logic. For other methods
        the request is performed once.
        """
        method_upper = method.upper()
        if method_upper == "GET":
            return await self.get(url, **kwargs)
        return await self._request(method_upper, url, **kwargs)
