"""
OrderService - checkout

Turns the line items the client submits into a stored order, then empties
the cart they came from. Orders are created in "pending" status and never
change status afterwards.
"""
import logging
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import ValidationError as PydanticValidationError

from motoparts.core.exceptions import NotFoundError, ValidationError, field_paths
from motoparts.schemas import Order, OrderCreate, OrderItemCreate, OrderWithItems
from motoparts.storage import Storage

logger = logging.getLogger(__name__)


def validate_order_payload(
    order_draft: Any,
    line_items: Any,
) -> Tuple[OrderCreate, List[OrderItemCreate]]:
    """
    Validate the order draft and every line item.

    All problems are collected before raising so the client sees every bad
    field at once (e.g. "order.email", "items.1.quantity").
    """
    fields: List[str] = []
    order: Optional[OrderCreate] = None
    items: List[OrderItemCreate] = []

    if isinstance(order_draft, OrderCreate):
        order = order_draft
    else:
        try:
            order = OrderCreate.model_validate(order_draft)
        except PydanticValidationError as exc:
            fields.extend(field_paths(exc.errors(), prefix=("order",)))

    if isinstance(line_items, (list, tuple)):
        for index, raw in enumerate(line_items):
            if isinstance(raw, OrderItemCreate):
                items.append(raw)
                continue
            try:
                items.append(OrderItemCreate.model_validate(raw))
            except PydanticValidationError as exc:
                fields.extend(field_paths(exc.errors(), prefix=("items", index)))
    else:
        fields.append("items")

    if fields:
        raise ValidationError(f"Invalid order: {', '.join(fields)}", fields=fields)

    return order, items


class OrderService:
    """Order placement and lookup over any Storage backend."""

    @staticmethod
    async def place_order(
        storage: Storage,
        order_draft: Any,
        line_items: Sequence[Any],
        cart_id: Optional[str] = None,
    ) -> Order:
        order_data, items = validate_order_payload(order_draft, line_items)

        order = await storage.create_order(order_data, items)
        logger.info(f"Order {order.id} placed for {order.email} ({len(items)} items, total {order.total})")

        if cart_id:
            # The order is already committed; a failed cart clear must not undo it
            try:
                await storage.clear_cart(cart_id)
            except Exception as e:
                logger.warning(f"Order {order.id} placed but clearing cart {cart_id!r} failed: {e}")

        return order

    @staticmethod
    async def get_order(storage: Storage, order_id: int) -> Order:
        order = await storage.get_order(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    @staticmethod
    async def get_order_with_items(storage: Storage, order_id: int) -> OrderWithItems:
        order = await OrderService.get_order(storage, order_id)
        items = await storage.get_order_items(order_id)
        return OrderWithItems(**order.model_dump(), items=items)
