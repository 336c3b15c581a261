"""
Category schemas
"""
from typing import Optional

from pydantic import Field

from motoparts.schemas.base import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None


class Category(CategoryCreate):
    id: int
