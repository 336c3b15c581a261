"""
CartService - guest cart operations keyed by an opaque cart id

A cart holds at most one line per product: adding a product that is already
in the cart increments that line. Two concurrent adds of the same product to
the same cart may lose one increment; there is no locking.
"""
from dataclasses import dataclass
from typing import List

from motoparts.core.exceptions import NotFoundError, OutOfStockError, ValidationError
from motoparts.schemas import CartItem, CartItemCreate, CartItemWithProduct, CartSummary
from motoparts.services.pricing import calculate_totals, cart_subtotal
from motoparts.storage import Storage


@dataclass
class AddItemResult:
    """Cart line after an add, and whether it was newly created."""
    item: CartItem
    created: bool


def validate_quantity(quantity) -> int:
    """Quantities are positive integers; bools and floats are rejected."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError("Quantity must be a positive integer", fields=["quantity"])
    return quantity


class CartService:
    """Cart mutations and reads over any Storage backend."""

    @staticmethod
    async def add_item(storage: Storage, cart_id: str, product_id: int, quantity: int = 1) -> AddItemResult:
        validate_quantity(quantity)
        if not cart_id:
            raise ValidationError("Cart id is required", fields=["cartId"])

        product = await storage.get_product_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        if not product.in_stock:
            raise OutOfStockError(product_id=product_id)

        existing = await storage.get_cart_item(cart_id, product_id)
        if existing is not None:
            updated = await storage.update_cart_item(existing.id, existing.quantity + quantity)
            if updated is not None:
                return AddItemResult(item=updated, created=False)
            # Line was removed between the lookup and the update, start a new one

        item = await storage.create_cart_item(
            CartItemCreate(cart_id=cart_id, product_id=product_id, quantity=quantity)
        )
        return AddItemResult(item=item, created=True)

    @staticmethod
    async def update_quantity(storage: Storage, item_id: int, quantity: int) -> CartItem:
        # No ceiling against stock: in_stock is a flag, not a count
        validate_quantity(quantity)
        item = await storage.update_cart_item(item_id, quantity)
        if item is None:
            raise NotFoundError("Cart item", item_id)
        return item

    @staticmethod
    async def remove_item(storage: Storage, item_id: int) -> bool:
        return await storage.remove_cart_item(item_id)

    @staticmethod
    async def clear_cart(storage: Storage, cart_id: str) -> None:
        await storage.clear_cart(cart_id)

    @staticmethod
    async def list_cart_items(storage: Storage, cart_id: str) -> List[CartItem]:
        return await storage.get_cart_items(cart_id)

    @staticmethod
    async def list_cart_with_products(storage: Storage, cart_id: str) -> List[CartItemWithProduct]:
        """Cart lines joined with the current product by id (product None if it is gone)."""
        lines = []
        for item in await storage.get_cart_items(cart_id):
            product = await storage.get_product_by_id(item.product_id)
            lines.append(CartItemWithProduct(**item.model_dump(), product=product))
        return lines

    @staticmethod
    async def summarize_cart(storage: Storage, cart_id: str) -> CartSummary:
        lines = await CartService.list_cart_with_products(storage, cart_id)
        totals = calculate_totals(cart_subtotal(lines))
        return CartSummary(
            cart_id=cart_id,
            item_count=sum(line.quantity for line in lines),
            items=lines,
            **totals.model_dump(),
        )
