"""
Product routes

Filtering by category, flags and search happens in the entity store; price
range and sort order are applied afterwards for display.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from motoparts.api.deps import get_storage
from motoparts.core.rate_limit import default_limit, limiter
from motoparts.schemas import Product, ProductFilter
from motoparts.services import CatalogService
from motoparts.services.catalog_service import DEFAULT_SORT, SortOption
from motoparts.storage import Storage

router = APIRouter()


@router.get("", response_model=List[Product])
@limiter.limit(default_limit)
async def list_products(
    request: Request,
    category_id: Optional[int] = Query(None, alias="categoryId"),
    featured: Optional[bool] = None,
    in_stock: Optional[bool] = Query(None, alias="inStock"),
    search: Optional[str] = None,
    sort: SortOption = DEFAULT_SORT,
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    storage: Storage = Depends(get_storage),
):
    """List products with optional filters, price range and sort order."""
    filters = ProductFilter(
        category_id=category_id,
        featured=featured,
        in_stock=in_stock,
        search=search or None,
    )
    products = await CatalogService.list_products(storage, filters)
    products = CatalogService.filter_by_price(products, min_price, max_price)
    return CatalogService.sort_products(products, sort)


# Declared before /{slug} so "featured" is not taken for a slug
@router.get("/featured", response_model=List[Product])
@limiter.limit(default_limit)
async def list_featured_products(request: Request, storage: Storage = Depends(get_storage)):
    return await CatalogService.list_featured_products(storage)


@router.get("/{slug}", response_model=Product)
@limiter.limit(default_limit)
async def get_product(request: Request, slug: str, storage: Storage = Depends(get_storage)):
    return await CatalogService.get_product_by_slug(storage, slug)
