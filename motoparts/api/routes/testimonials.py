"""
Testimonial routes
"""
from typing import List

from fastapi import APIRouter, Depends, Request

from motoparts.api.deps import get_storage
from motoparts.core.rate_limit import default_limit, limiter
from motoparts.schemas import Testimonial
from motoparts.services import CatalogService
from motoparts.storage import Storage

router = APIRouter()


@router.get("", response_model=List[Testimonial])
@limiter.limit(default_limit)
async def list_testimonials(request: Request, storage: Storage = Depends(get_storage)):
    return await CatalogService.list_testimonials(storage)
