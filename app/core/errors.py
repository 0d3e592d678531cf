"""
core/errors.py
--------------

Exception taxonomy for the catalog.

``StoreError`` is raised by the store client when the remote product
store answers with an error or cannot be reached. ``FetchError`` is what
the catalog cache surfaces to its callers when a refresh fails. Search,
filter and grouping helpers never raise.
"""

from __future__ import annotations

from typing import Any, Optional


class CatalogError(Exception):
    """Base class for every catalog failure."""


class StoreError(CatalogError):
    """The remote store rejected the query or was unreachable.

    :param detail: human readable description or error payload
    :param status_code: HTTP status returned by the store, ``None`` when
        no response was received
    """

    def __init__(self, detail: Any, status_code: Optional[int] = None) -> None:
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"store error ({status_code}): {detail}")


class FetchError(CatalogError):
    """Fetching the product list failed; the cache was left untouched."""

    def __init__(self, message: str = "Failed to fetch products") -> None:
        super().__init__(message)
