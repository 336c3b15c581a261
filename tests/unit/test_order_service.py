import logging

import pytest

from motoparts.core.exceptions import NotFoundError, ValidationError
from motoparts.services import CartService, OrderService
from motoparts.services.order_service import validate_order_payload

CART_ID = "guest-1718000000000"


def _items():
    return [
        {"productId": 1, "quantity": 2, "price": 110.0},
        {"productId": 15, "quantity": 1, "price": 980},
    ]


@pytest.mark.anyio
async def test_place_order_records_every_line_item(storage, order_draft):
    order = await OrderService.place_order(storage, order_draft, _items())

    stored = await OrderService.get_order_with_items(storage, order.id)
    assert stored.status == "pending"
    assert stored.email == "rider@example.com"
    assert [(i.product_id, i.quantity, i.price) for i in stored.items] == [
        (1, 2, 110.0),
        (15, 1, 980.0),
    ]
    assert all(i.order_id == order.id for i in stored.items)


@pytest.mark.anyio
async def test_place_order_empties_the_cart(storage, order_draft):
    await CartService.add_item(storage, CART_ID, 1, 2)
    await CartService.add_item(storage, CART_ID, 15, 1)

    await OrderService.place_order(storage, order_draft, _items(), cart_id=CART_ID)

    assert await CartService.list_cart_items(storage, CART_ID) == []


@pytest.mark.anyio
async def test_place_order_with_no_items(storage, order_draft):
    order = await OrderService.place_order(storage, order_draft, [])

    assert (await OrderService.get_order_with_items(storage, order.id)).items == []


@pytest.mark.anyio
async def test_invalid_payload_stores_nothing(storage, order_draft):
    await CartService.add_item(storage, CART_ID, 1, 1)
    items = _items()
    items[1]["quantity"] = "abc"

    with pytest.raises(ValidationError) as exc_info:
        await OrderService.place_order(storage, order_draft, items, cart_id=CART_ID)

    assert exc_info.value.fields == ["items.1.quantity"]
    assert await storage.get_order(1) is None
    assert await storage.get_order_items(1) == []
    # Cart untouched on failure
    assert len(await CartService.list_cart_items(storage, CART_ID)) == 1


@pytest.mark.anyio
async def test_cart_clear_failure_keeps_the_order(storage, order_draft, monkeypatch, caplog):
    async def broken_clear(cart_id):
        raise RuntimeError("cart store offline")

    monkeypatch.setattr(storage, "clear_cart", broken_clear)

    with caplog.at_level(logging.WARNING, logger="motoparts.services.order_service"):
        order = await OrderService.place_order(storage, order_draft, _items(), cart_id=CART_ID)

    assert (await OrderService.get_order(storage, order.id)).id == order.id
    assert "cart store offline" in caplog.text


@pytest.mark.anyio
async def test_get_unknown_order_raises_not_found(storage):
    with pytest.raises(NotFoundError):
        await OrderService.get_order(storage, 404)


def test_validation_collects_every_bad_field(order_draft):
    order_draft["email"] = ""
    del order_draft["billingAddress"]
    items = [
        {"productId": 1, "quantity": 0, "price": 110.0},
        {"productId": "1", "quantity": 1, "price": 110.0},
    ]

    with pytest.raises(ValidationError) as exc_info:
        validate_order_payload(order_draft, items)

    assert exc_info.value.fields == [
        "order.email",
        "order.billingAddress",
        "items.0.quantity",
        "items.1.productId",
    ]


def test_validation_rejects_missing_order_and_non_list_items():
    with pytest.raises(ValidationError) as exc_info:
        validate_order_payload(None, {"productId": 1})

    assert exc_info.value.fields == ["order", "items"]


def test_status_defaults_to_pending(order_draft):
    order, items = validate_order_payload(order_draft, [])

    assert order.status == "pending"
    assert items == []
