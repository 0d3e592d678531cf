"""
services/catalog_queries.py
---------------------------

Search, filter and grouping helpers over a product list already
obtained from :class:`app.services.catalog_service.CatalogCache`. All
functions here are pure: they never fetch, never mutate their input
and return the input list itself when there is nothing to do.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Dict, List, Optional, Set

from app.schemas.catalog import GroupedProduct, ProductDisplay

# Combining Diacritical Marks block
_DIACRITICS = re.compile("[\u0300-\u036f]")
_WHITESPACE = re.compile(r"\s+")

GROUP_KEY_SEPARATOR = "__"


# =======================
# Helpers
# =======================

def normalize_text(text: str) -> str:
    """Lowercase, decompose (NFD) and drop combining marks.

    ``"Café"`` -> ``"cafe"``. Surrounding whitespace is kept.
    """
    return _DIACRITICS.sub("", unicodedata.normalize("NFD", text.lower()))


def slugify(text: str) -> str:
    return _WHITESPACE.sub("-", text.lower())


def _matches(value: str, selected: Optional[str]) -> bool:
    return not selected or value.strip() == selected.strip()


# =======================
# Search
# =======================

def search_products(products: List[ProductDisplay], query: str) -> List[ProductDisplay]:
    """Keep products whose name, brand or flavor contains ``query``.

    Matching is a case- and accent-insensitive substring test; a blank
    query returns ``products`` unchanged.
    """
    if not query.strip():
        return products

    needle = normalize_text(query)
    return [
        p for p in products
        if needle in normalize_text(f"{p.display_name} {p.brand} {p.flavor or ''}")
    ]


def search_grouped_products(groups: List[GroupedProduct], query: str) -> List[GroupedProduct]:
    """Same as :func:`search_products`, matching the flavors of every member."""
    if not query.strip():
        return groups

    needle = normalize_text(query)
    result: List[GroupedProduct] = []
    for g in groups:
        flavors = " ".join(p.flavor or "" for p in g.products)
        if needle in normalize_text(f"{g.name} {g.brand} {flavors}"):
            result.append(g)
    return result


# =======================
# Category / brand filters
# =======================

def filter_products(
    products: List[ProductDisplay],
    category: Optional[str] = "",
    brand: Optional[str] = "",
) -> List[ProductDisplay]:
    """Exact, case-sensitive match on trimmed category and brand.

    An empty selector matches everything.
    """
    return [p for p in products if _matches(p.category, category) and _matches(p.brand, brand)]


def filter_grouped_products(
    groups: List[GroupedProduct],
    category: Optional[str] = "",
    brand: Optional[str] = "",
) -> List[GroupedProduct]:
    return [g for g in groups if _matches(g.category, category) and _matches(g.brand, brand)]


# =======================
# Grouping
# =======================

def group_products(products: List[ProductDisplay]) -> List[GroupedProduct]:
    """Group variants (flavors, sizes) of the same product and brand.

    Groups are keyed by ``name + "__" + brand`` and keep the order in
    which their keys first appear. When a name is sold by more than one
    brand anywhere in ``products`` the brand is appended to the group
    name so the entries can be told apart.
    """
    partitions: Dict[str, List[ProductDisplay]] = {}
    brands_by_name: Dict[str, Set[str]] = {}
    for p in products:
        partitions.setdefault(f"{p.name}{GROUP_KEY_SEPARATOR}{p.brand}", []).append(p)
        brands_by_name.setdefault(p.name, set()).add(p.brand)

    grouped: List[GroupedProduct] = []
    for members in partitions.values():
        members = sorted(members, key=lambda m: m.price)
        primary = members[0]
        name = primary.name
        if len(brands_by_name[name]) > 1:
            name = f"{primary.name} {primary.brand}"
        grouped.append(GroupedProduct(
            id=f"group-{slugify(primary.name)}-{slugify(primary.brand)}",
            name=name,
            brand=primary.brand,
            category=primary.category,
            imageurl=primary.imageurl,
            imagealt=primary.imagealt,
            base_price=primary.price,
            products=members,
        ))
    return grouped
