"""
Order routes

Checkout is rate limited more strictly than the rest of the API.
"""
from fastapi import APIRouter, Depends, Path, Request, status

from motoparts.api.deps import get_storage
from motoparts.core.rate_limit import checkout_limit, default_limit, limiter
from motoparts.schemas import OrderWithItems, PlaceOrderRequest
from motoparts.services import OrderService
from motoparts.storage import Storage

router = APIRouter()


@router.post("", response_model=OrderWithItems, status_code=status.HTTP_201_CREATED)
@limiter.limit(checkout_limit)
async def place_order(
    request: Request,
    payload: PlaceOrderRequest,
    storage: Storage = Depends(get_storage),
):
    """
    Place an order from the client's line items and empty the cart.

    The order and every line item are validated together; a 400 lists each
    offending field (e.g. "order.email", "items.0.quantity").
    """
    order = await OrderService.place_order(storage, payload.order, payload.items, payload.cart_id)
    return await OrderService.get_order_with_items(storage, order.id)


@router.get("/{orderId}", response_model=OrderWithItems)
@limiter.limit(default_limit)
async def get_order(
    request: Request,
    order_id: int = Path(..., alias="orderId"),
    storage: Storage = Depends(get_storage),
):
    return await OrderService.get_order_with_items(storage, order_id)
