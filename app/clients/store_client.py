"""
clients/store_client.py
-----------------------

Read-only client for the remote product store (a PostgREST / Supabase
REST endpoint). This module is the ONLY place that knows how a
projection, an equality filter and an ordering are spelled on the
wire; services describe what they want and get plain rows back.

A query such as::

    await store.select("products", ["id", "name"], eq={"active": True}, order="name")

becomes ``GET /rest/v1/products?select=id,name&active=eq.true&order=name.asc``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from app.clients.http_client import HTTPClient
from app.core.auth import build_store_headers, get_rest_url
from app.core.errors import StoreError


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def build_select_params(
    columns: Sequence[str],
    *,
    eq: Optional[Mapping[str, Any]] = None,
    order: Optional[str] = None,
    ascending: bool = True,
) -> Dict[str, str]:
    """Translate a projection/filter/order request into query parameters."""
    params: Dict[str, str] = {"select": ",".join(columns)}
    for column, value in (eq or {}).items():
        params[column] = f"eq.{_encode_value(value)}"
    if order:
        params["order"] = f"{order}.{'asc' if ascending else 'desc'}"
    return params


class StoreClient:
    """Performs table reads against the product store."""

    def __init__(self, http_client: HTTPClient, store_url: str, api_key: str = "") -> None:
        self.http_client = http_client
        self.store_url = store_url
        self._headers = build_store_headers(api_key)

    async def select(
        self,
        table: str,
        columns: Sequence[str],
        *,
        eq: Optional[Mapping[str, Any]] = None,
        order: Optional[str] = None,
        ascending: bool = True,
    ) -> List[Dict[str, Any]]:
        """Return the rows of ``table`` matching the request, in the requested order.

        :raises StoreError: if the store is unreachable, answers with a
            non-2xx status or with a body that is not a list of rows
        """
        url = get_rest_url(self.store_url, table)
        params = build_select_params(columns, eq=eq, order=order, ascending=ascending)
        try:
            res = await self.http_client.request("GET", url, headers=self._headers, params=params)
        except httpx.HTTPError as exc:
            raise StoreError(f"store unreachable: {exc}") from exc

        if res.status_code < 200 or res.status_code >= 300:
            try:
                detail: Any = res.json()
            except ValueError:
                detail = res.text
            raise StoreError(detail, status_code=res.status_code)

        try:
            data = res.json() if res.content else None
        except ValueError as exc:
            raise StoreError("store returned a non-JSON body", status_code=res.status_code) from exc
        if data is None:
            return []
        if not isinstance(data, list):
            raise StoreError(data, status_code=res.status_code)
        return data
