"""
Relational entity store

SQLAlchemy async ORM over the storefront tables. Every call opens its own
session; identifiers come from the database. Order placement runs inside a
single explicit transaction so an order can never be stored without its
items.
"""
import logging
from typing import List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine

from motoparts import models
from motoparts.core.database import create_sessionmaker, get_db_session
from motoparts.core.exceptions import InternalError
from motoparts.schemas import (
    CartItem,
    CartItemCreate,
    Category,
    CategoryCreate,
    Order,
    OrderCreate,
    OrderItem,
    OrderItemCreate,
    Product,
    ProductCreate,
    ProductFilter,
    Testimonial,
    TestimonialCreate,
    User,
    UserCreate,
)
from motoparts.storage.base import Storage

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

LIKE_ESCAPE = "\\"


def like_pattern(term: str) -> str:
    """Substring pattern for ILIKE with wildcard characters escaped."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


class DatabaseStorage(Storage):
    """Storage backed by a SQL database through SQLAlchemy."""

    backend_name = "database"

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.sessionmaker = create_sessionmaker(engine)

    async def close(self) -> None:
        await self.engine.dispose()

    # Generic helpers
    async def _create(self, model, record_cls: Type[RecordT], data: BaseModel) -> RecordT:
        row = model(**data.model_dump())
        try:
            async with get_db_session(self.sessionmaker) as db:
                db.add(row)
                await db.flush()
                record = record_cls.model_validate(row)
        except IntegrityError as exc:
            raise InternalError(
                f"Constraint violation on {model.__tablename__}",
                details={"table": model.__tablename__},
            ) from exc
        return record

    async def _get(self, model, record_cls: Type[RecordT], record_id: int) -> Optional[RecordT]:
        async with get_db_session(self.sessionmaker) as db:
            row = await db.get(model, record_id)
            return record_cls.model_validate(row) if row is not None else None

    async def _first(self, record_cls: Type[RecordT], query) -> Optional[RecordT]:
        async with get_db_session(self.sessionmaker) as db:
            result = await db.execute(query.limit(1))
            row = result.scalars().first()
            return record_cls.model_validate(row) if row is not None else None

    async def _list(self, record_cls: Type[RecordT], query) -> List[RecordT]:
        async with get_db_session(self.sessionmaker) as db:
            result = await db.execute(query)
            return [record_cls.model_validate(row) for row in result.scalars().all()]

    # Users
    async def get_user(self, user_id: int) -> Optional[User]:
        return await self._get(models.User, User, user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self._first(User, select(models.User).where(models.User.username == username))

    async def create_user(self, data: UserCreate) -> User:
        return await self._create(models.User, User, data)

    # Categories
    async def get_categories(self) -> List[Category]:
        return await self._list(Category, select(models.Category).order_by(models.Category.id))

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return await self._first(Category, select(models.Category).where(models.Category.slug == slug))

    async def create_category(self, data: CategoryCreate) -> Category:
        return await self._create(models.Category, Category, data)

    # Products
    async def get_products(self, filters: Optional[ProductFilter] = None) -> List[Product]:
        query = select(models.Product)

        if filters is not None:
            if filters.category_id is not None:
                query = query.where(models.Product.category_id == filters.category_id)
            if filters.featured is not None:
                query = query.where(models.Product.is_featured == filters.featured)
            if filters.in_stock is not None:
                query = query.where(models.Product.in_stock == filters.in_stock)
            if filters.search:
                pattern = like_pattern(filters.search)
                query = query.where(
                    or_(
                        models.Product.name.ilike(pattern, escape=LIKE_ESCAPE),
                        func.coalesce(models.Product.description, "").ilike(pattern, escape=LIKE_ESCAPE),
                    )
                )

        return await self._list(Product, query.order_by(models.Product.id))

    async def get_product_by_slug(self, slug: str) -> Optional[Product]:
        return await self._first(Product, select(models.Product).where(models.Product.slug == slug))

    async def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return await self._get(models.Product, Product, product_id)

    async def create_product(self, data: ProductCreate) -> Product:
        return await self._create(models.Product, Product, data)

    # Cart
    async def get_cart_items(self, cart_id: str) -> List[CartItem]:
        return await self._list(
            CartItem,
            select(models.CartItem)
            .where(models.CartItem.cart_id == cart_id)
            .order_by(models.CartItem.id),
        )

    async def get_cart_item(self, cart_id: str, product_id: int) -> Optional[CartItem]:
        return await self._first(
            CartItem,
            select(models.CartItem)
            .where(
                models.CartItem.cart_id == cart_id,
                models.CartItem.product_id == product_id,
            )
            .order_by(models.CartItem.id),
        )

    async def get_cart_item_by_id(self, item_id: int) -> Optional[CartItem]:
        return await self._get(models.CartItem, CartItem, item_id)

    async def create_cart_item(self, data: CartItemCreate) -> CartItem:
        return await self._create(models.CartItem, CartItem, data)

    async def update_cart_item(self, item_id: int, quantity: int) -> Optional[CartItem]:
        async with get_db_session(self.sessionmaker) as db:
            row = await db.get(models.CartItem, item_id)
            if row is None:
                return None
            row.quantity = quantity
            await db.flush()
            return CartItem.model_validate(row)

    async def remove_cart_item(self, item_id: int) -> bool:
        async with get_db_session(self.sessionmaker) as db:
            result = await db.execute(
                delete(models.CartItem).where(models.CartItem.id == item_id)
            )
            return result.rowcount > 0

    async def clear_cart(self, cart_id: str) -> bool:
        # Bulk delete instead of loading each line
        async with get_db_session(self.sessionmaker) as db:
            result = await db.execute(
                delete(models.CartItem).where(models.CartItem.cart_id == cart_id)
            )
            logger.debug(f"Cleared cart {cart_id!r} ({result.rowcount} lines)")
        return True

    # Orders
    async def create_order(self, order: OrderCreate, items: Sequence[OrderItemCreate]) -> Order:
        async with self.sessionmaker() as db:
            try:
                async with db.begin():
                    order_row = models.Order(**order.model_dump())
                    db.add(order_row)
                    await db.flush()  # Get order ID

                    for item in items:
                        values = item.model_dump()
                        values["order_id"] = order_row.id
                        db.add(models.OrderItem(**values))
                    await db.flush()
            except IntegrityError as exc:
                logger.error(f"Order insert rolled back ({len(items)} items): {exc}")
                raise InternalError(
                    "Order could not be stored",
                    details={"item_count": len(items)},
                ) from exc

            return Order.model_validate(order_row)

    async def get_order(self, order_id: int) -> Optional[Order]:
        return await self._get(models.Order, Order, order_id)

    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        return await self._list(
            OrderItem,
            select(models.OrderItem)
            .where(models.OrderItem.order_id == order_id)
            .order_by(models.OrderItem.id),
        )

    # Testimonials
    async def get_testimonials(self) -> List[Testimonial]:
        return await self._list(Testimonial, select(models.Testimonial).order_by(models.Testimonial.id))

    async def create_testimonial(self, data: TestimonialCreate) -> Testimonial:
        return await self._create(models.Testimonial, Testimonial, data)
