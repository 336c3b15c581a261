"""
Cart schemas
"""
from typing import List, Optional

from pydantic import Field

from motoparts.schemas.base import CamelModel, StrictCamelModel
from motoparts.schemas.product import Product


class CartItemCreate(StrictCamelModel):
    cart_id: str = Field(..., min_length=1)
    product_id: int
    quantity: int = Field(1, ge=1)


class CartItemUpdate(StrictCamelModel):
    quantity: int = Field(..., ge=1)


class CartItem(CamelModel):
    id: int
    cart_id: str
    product_id: int
    quantity: int


class CartItemWithProduct(CartItem):
    # None when the product was removed after being added
    product: Optional[Product] = None


class CartTotals(CamelModel):
    subtotal: float
    shipping: float
    tax: float
    total: float
    free_shipping_threshold: float
    amount_to_free_shipping: float


class CartSummary(CartTotals):
    cart_id: str
    item_count: int
    items: List[CartItemWithProduct]
