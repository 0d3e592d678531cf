"""
routes/catalog.py
-----------------

API routes for the storefront catalog. These handlers stay thin: they
read the shared :class:`CatalogCache` from ``app.state``, apply the
pure filter/search helpers and return the result. Fetch failures are
turned into HTTP 502 by the handler registered in :mod:`app.main`.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Request

# Logger and logging helpers
from app.logging_config import logger, log_call
import json

from app.data.seed_products import get_seed_products
from app.schemas.catalog import GroupedProduct, ProductDisplay, ProductFilters, SeedProduct
from app.services.catalog_queries import (
    filter_grouped_products,
    filter_products,
    group_products,
    search_grouped_products,
    search_products,
)
from app.services.catalog_service import CatalogCache

router = APIRouter(prefix="/products", tags=["catalog"])


def get_catalog(request: Request) -> CatalogCache:
    return request.app.state.catalog


@router.get("", response_model=List[ProductDisplay])
@log_call
async def list_products(
    q: str = Query(""),
    category: str = Query(""),
    brand: str = Query(""),
    catalog: CatalogCache = Depends(get_catalog),
):
    """Active products, optionally narrowed by category, brand and a search text."""
    products = await catalog.get_all_products()
    result = search_products(filter_products(products, category, brand), q)
    logger.info(json.dumps({
        "event": "list_products_response",
        "q": q,
        "category": category,
        "brand": brand,
        "total": len(result),
    }))
    return result


@router.get("/grouped", response_model=List[GroupedProduct])
@log_call
async def list_grouped_products(
    q: str = Query(""),
    category: str = Query(""),
    brand: str = Query(""),
    catalog: CatalogCache = Depends(get_catalog),
):
    """Products grouped by name and brand, cheapest variant first."""
    groups = group_products(await catalog.get_all_products())
    result = search_grouped_products(filter_grouped_products(groups, category, brand), q)
    logger.info(json.dumps({
        "event": "list_grouped_products_response",
        "q": q,
        "category": category,
        "brand": brand,
        "total": len(result),
    }))
    return result


@router.get("/filters", response_model=ProductFilters)
async def get_filters(catalog: CatalogCache = Depends(get_catalog)):
    return await catalog.get_product_filters()


@router.post("/cache/invalidate")
def invalidate_cache(catalog: CatalogCache = Depends(get_catalog)) -> dict:
    """Force the next read to refetch from the store."""
    catalog.invalidate()
    return {"status": "ok"}


@router.get("/demo", response_model=List[SeedProduct])
def list_demo_products():
    return get_seed_products()
