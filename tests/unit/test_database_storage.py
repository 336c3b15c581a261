import pytest
from sqlalchemy import Text

from motoparts import models
from motoparts.core.exceptions import InternalError
from motoparts.schemas import (
    CartItemCreate,
    CategoryCreate,
    OrderCreate,
    OrderItemCreate,
    ProductFilter,
)
from motoparts.storage import seed_storage
from motoparts.storage.database import like_pattern


def _order() -> OrderCreate:
    return OrderCreate(
        email="rider@example.com",
        total=1010.0,
        shipping_address="12 Rizal St",
        billing_address="12 Rizal St",
    )


def test_like_pattern_escapes_wildcards():
    assert like_pattern("50%_off") == "%50\\%\\_off%"
    assert like_pattern("plain") == "%plain%"


@pytest.mark.anyio
async def test_seed_populates_empty_database(database_storage):
    assert await database_storage.is_empty()

    stats = await seed_storage(database_storage)

    assert stats == {"categories": 10, "products": 15, "testimonials": 4}
    assert not await database_storage.is_empty()
    # Second run is a no-op
    assert (await seed_storage(database_storage))["products"] == 0
    assert len(await database_storage.get_products()) == 15


@pytest.mark.anyio
async def test_product_queries(database_storage):
    await seed_storage(database_storage)

    product = await database_storage.get_product_by_slug("kawasaki-fury-cdi")
    assert product.category_id == 2
    assert (await database_storage.get_product_by_id(product.id)).slug == product.slug
    assert await database_storage.get_product_by_slug("missing") is None

    not_featured = await database_storage.get_products(ProductFilter(featured=False))
    assert [p.slug for p in not_featured] == ["rusi-cdi-racing-blue-core"]

    cdi = await database_storage.get_products(ProductFilter(search="cdi"))
    assert [p.id for p in cdi] == [11, 12, 13, 14]


@pytest.mark.anyio
async def test_duplicate_slug_raises_internal_error(database_storage):
    await database_storage.create_category(CategoryCreate(name="Brakes", slug="brakes"))

    with pytest.raises(InternalError):
        await database_storage.create_category(CategoryCreate(name="Brakes 2", slug="brakes"))


@pytest.mark.anyio
async def test_cart_lifecycle(database_storage):
    item = await database_storage.create_cart_item(
        CartItemCreate(cart_id="guest-1", product_id=5, quantity=2)
    )

    assert (await database_storage.get_cart_item("guest-1", 5)).id == item.id
    assert await database_storage.get_cart_item("guest-1", 6) is None
    assert (await database_storage.update_cart_item(item.id, 7)).quantity == 7
    assert (await database_storage.get_cart_item_by_id(item.id)).quantity == 7
    assert await database_storage.update_cart_item(999, 1) is None

    assert await database_storage.remove_cart_item(item.id) is True
    assert await database_storage.remove_cart_item(item.id) is False
    assert await database_storage.clear_cart("guest-1") is True


@pytest.mark.anyio
async def test_create_order_persists_items(database_storage):
    order = await database_storage.create_order(
        _order(),
        [
            OrderItemCreate(product_id=1, quantity=2, price=110.0),
            OrderItemCreate(product_id=15, quantity=1, price=980.0),
        ],
    )

    items = await database_storage.get_order_items(order.id)
    assert order.status == "pending"
    assert (await database_storage.get_order(order.id)).email == "rider@example.com"
    assert [(i.order_id, i.product_id, i.quantity) for i in items] == [
        (order.id, 1, 2),
        (order.id, 15, 1),
    ]


@pytest.mark.anyio
async def test_create_order_rolls_back_when_an_item_insert_fails(database_storage):
    bad_item = OrderItemCreate.model_construct(order_id=None, product_id=2, quantity=None, price=5.0)

    with pytest.raises(InternalError):
        await database_storage.create_order(
            _order(),
            [OrderItemCreate(product_id=1, quantity=1, price=110.0), bad_item],
        )

    assert await database_storage.get_order(1) is None
    assert await database_storage.get_order_items(1) == []


@pytest.mark.parametrize(
    "column",
    [
        models.CartItem.__table__.c.cart_id,
        models.Category.__table__.c.slug,
        models.Product.__table__.c.slug,
        models.User.__table__.c.username,
    ],
    ids=lambda column: str(column),
)
def test_client_supplied_keys_have_no_length_limit(column):
    assert isinstance(column.type, Text)
    assert column.type.length is None
