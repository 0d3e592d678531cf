"""
schemas/catalog.py
------------------

Models representing the product catalog. ``Product`` mirrors a row of
the remote ``products`` table; ``ProductDisplay`` adds the combined
display name shown by the storefront. ``GroupedProduct`` and
``ProductFilters`` are derived views and never stored.
"""

from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Columns requested from the store, in projection order.
PRODUCT_COLUMNS = (
    "id",
    "name",
    "brand",
    "flavor",
    "category",
    "size",
    "price",
    "stock",
    "fragile",
    "description",
    "imageurl",
    "imagealt",
    "active",
)


def build_display_name(name: str, flavor: Optional[str]) -> str:
    """``"Milk" + "Chocolate"`` -> ``"Milk Chocolate"``; no flavor -> ``"Milk"``."""
    return f"{name} {flavor}" if flavor else name


class Product(BaseModel):
    id: int
    name: str
    brand: str
    flavor: Optional[str] = None
    category: str
    size: str = ""
    price: float
    stock: int = 0
    fragile: bool = False
    description: str = ""
    imageurl: str = ""
    imagealt: str = ""
    active: bool = True

    @field_validator("name", "brand", "category", "size", "description", "imageurl", "imagealt", mode="before")
    @classmethod
    def empty_if_null(cls, v):
        # the store returns NULL for unset text columns
        return "" if v is None else v


class ProductDisplay(Product):
    """Product plus the name shown in listings."""

    model_config = ConfigDict(populate_by_name=True)

    display_name: str = Field(alias="displayName")

    @classmethod
    def from_product(cls, product: Product) -> "ProductDisplay":
        return cls(
            **product.model_dump(),
            display_name=build_display_name(product.name, product.flavor),
        )


class ProductFilters(BaseModel):
    categories: List[str] = Field(default_factory=list)
    brands: List[str] = Field(default_factory=list)


class GroupedProduct(BaseModel):
    """All variants of a product sold by one brand.

    ``products`` is sorted ascending by price; ``category``, ``brand``,
    ``imageurl``, ``imagealt`` and ``base_price`` come from the cheapest
    member.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    brand: str
    category: str
    imageurl: str
    imagealt: str
    base_price: float = Field(alias="basePrice")
    products: List[ProductDisplay]


class SeedProduct(BaseModel):
    """Entry of the static demo dataset (not the live schema)."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    subtitle: str
    price: float
    category: str
    image: str
    image_alt: str = Field(alias="imageAlt")
    brand: str
