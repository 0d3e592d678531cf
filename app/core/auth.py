"""
core/auth.py
-------------

Utility functions for building requests to the product store.

These helpers centralise construction of the REST base URL and the
HTTP headers the store expects. They encapsulate knowledge about the
PostgREST path layout and ensure that the API key is not inadvertently
logged elsewhere in the application (see ``log_http_request``).
"""

from __future__ import annotations

from typing import Dict


def get_rest_url(store_url: str, table: str) -> str:
    """Return the REST endpoint for a table.

    The store URL is stripped of surrounding whitespace and trailing
    slashes before the ``/rest/v1/<table>`` path is appended.

    :param store_url: base URL of the store (e.g. ``https://xyz.supabase.co``)
    :param table: table name (e.g. ``products``)
    :return: the absolute table URL
    """
    base = store_url.strip().rstrip("/")
    return f"{base}/rest/v1/{table}"


def build_store_headers(api_key: str) -> Dict[str, str]:
    """Create the headers required for an anonymous store read.

    The key is sent both as ``apikey`` and as a Bearer token, which is
    what the store gateway requires for row-level-security reads.

    :param api_key: the public (anon) key of the store project
    :return: a dictionary of headers suitable for use with httpx
    """
    headers = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if api_key:
        headers["apikey"] = api_key
        headers["Authorization"] = f"Bearer {api_key}"
    return headers
