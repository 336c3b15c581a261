"""
Cart routes

Guest carts only: the client picks the cart id and sends it with every call.
"""
from typing import List

from fastapi import APIRouter, Depends, Path, Request, Response, status

from motoparts.api.deps import get_storage
from motoparts.core.exceptions import NotFoundError
from motoparts.core.rate_limit import default_limit, limiter
from motoparts.schemas import CartItem, CartItemCreate, CartItemUpdate, CartItemWithProduct, CartSummary
from motoparts.services import CartService
from motoparts.storage import Storage

router = APIRouter()


@router.get("/{cartId}", response_model=List[CartItemWithProduct])
@limiter.limit(default_limit)
async def get_cart(
    request: Request,
    cart_id: str = Path(..., alias="cartId", min_length=1),
    storage: Storage = Depends(get_storage),
):
    """Cart lines with their current product attached"""
    return await CartService.list_cart_with_products(storage, cart_id)


@router.get("/{cartId}/summary", response_model=CartSummary)
@limiter.limit(default_limit)
async def get_cart_summary(
    request: Request,
    cart_id: str = Path(..., alias="cartId", min_length=1),
    storage: Storage = Depends(get_storage),
):
    """Cart lines plus subtotal, shipping, tax and total"""
    return await CartService.summarize_cart(storage, cart_id)


@router.post("", response_model=CartItem, status_code=status.HTTP_201_CREATED)
@limiter.limit(default_limit)
async def add_to_cart(
    request: Request,
    item_data: CartItemCreate,
    response: Response,
    storage: Storage = Depends(get_storage),
):
    """Add a product to a cart, merging with an existing line for the same product"""
    result = await CartService.add_item(
        storage,
        item_data.cart_id,
        item_data.product_id,
        item_data.quantity,
    )
    if not result.created:
        response.status_code = status.HTTP_200_OK
    return result.item


@router.put("/{itemId}", response_model=CartItem)
@limiter.limit(default_limit)
async def update_cart_item(
    request: Request,
    item_data: CartItemUpdate,
    item_id: int = Path(..., alias="itemId"),
    storage: Storage = Depends(get_storage),
):
    return await CartService.update_quantity(storage, item_id, item_data.quantity)


# Declared before DELETE /{itemId} so "clear" is never parsed as an item id
@router.delete("/clear/{cartId}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(default_limit)
async def clear_cart(
    request: Request,
    cart_id: str = Path(..., alias="cartId", min_length=1),
    storage: Storage = Depends(get_storage),
):
    await CartService.clear_cart(storage, cart_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{itemId}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(default_limit)
async def remove_from_cart(
    request: Request,
    item_id: int = Path(..., alias="itemId"),
    storage: Storage = Depends(get_storage),
):
    removed = await CartService.remove_item(storage, item_id)
    if not removed:
        raise NotFoundError("Cart item", item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
