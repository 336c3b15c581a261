"""
Order schemas
"""
from typing import Any, List, Optional

from pydantic import Field

from motoparts.schemas.base import CamelModel, StrictCamelModel

ORDER_STATUS_PENDING = "pending"


class OrderCreate(StrictCamelModel):
    email: str = Field(..., min_length=1)
    total: float = Field(..., ge=0)
    status: str = ORDER_STATUS_PENDING
    shipping_address: str = Field(..., min_length=1)
    billing_address: str = Field(..., min_length=1)


class OrderItemCreate(StrictCamelModel):
    # Assigned by the store when the order is created
    order_id: Optional[int] = None
    product_id: int
    quantity: int = Field(..., ge=1)
    price: float = Field(..., ge=0)


class Order(CamelModel):
    id: int
    email: str
    total: float
    status: str
    shipping_address: str
    billing_address: str


class OrderItem(CamelModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    price: float


class OrderWithItems(Order):
    items: List[OrderItem] = []


class PlaceOrderRequest(CamelModel):
    """
    Checkout payload. order and items are validated by the order service so
    that every offending field is reported together.
    """

    order: Any = None
    items: List[Any] = []
    cart_id: Optional[str] = None
