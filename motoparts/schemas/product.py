"""
Product schemas
"""
from typing import Optional

from pydantic import BaseModel, Field

from motoparts.schemas.base import CamelModel


class ProductBase(CamelModel):
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: float = Field(..., ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    image_url: str
    category_id: int


class ProductCreate(ProductBase):
    in_stock: bool = True
    is_featured: bool = False
    is_new: bool = False
    is_bestseller: bool = False
    rating: float = Field(0, ge=0, le=5)
    review_count: int = Field(0, ge=0)


class Product(ProductCreate):
    id: int


class ProductFilter(BaseModel):
    """
    Catalog query options. Every field is optional and all present fields are
    ANDed; an empty filter matches every product.
    """

    category_id: Optional[int] = Field(None, description="Exact match on the product's category id")
    featured: Optional[bool] = Field(None, description="Exact match on the featured flag")
    in_stock: Optional[bool] = Field(None, description="Exact match on the in-stock flag")
    search: Optional[str] = Field(
        None,
        description="Case-insensitive substring of the product name or description",
    )

    def matches(self, product: Product) -> bool:
        if self.category_id is not None and product.category_id != self.category_id:
            return False
        if self.featured is not None and product.is_featured != self.featured:
            return False
        if self.in_stock is not None and product.in_stock != self.in_stock:
            return False
        if self.search:
            term = self.search.lower()
            if term not in product.name.lower() and term not in (product.description or "").lower():
                return False
        return True
