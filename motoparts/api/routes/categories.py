"""
Category routes
"""
from typing import List

from fastapi import APIRouter, Depends, Request

from motoparts.api.deps import get_storage
from motoparts.core.rate_limit import default_limit, limiter
from motoparts.schemas import Category
from motoparts.services import CatalogService
from motoparts.storage import Storage

router = APIRouter()


@router.get("", response_model=List[Category])
@limiter.limit(default_limit)
async def list_categories(request: Request, storage: Storage = Depends(get_storage)):
    return await CatalogService.list_categories(storage)


@router.get("/{slug}", response_model=Category)
@limiter.limit(default_limit)
async def get_category(request: Request, slug: str, storage: Storage = Depends(get_storage)):
    return await CatalogService.get_category_by_slug(storage, slug)
