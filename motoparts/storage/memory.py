"""
In-memory entity store

Each entity lives in a Table: a dict from id to record plus a monotonically
increasing id counter. Nothing survives a restart. Methods are async to
satisfy the Storage contract but never await, so each call runs to
completion without yielding to another request.
"""
import logging
from typing import Callable, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

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


class Table(Generic[RecordT]):
    """Id-keyed record map with its own id counter."""

    def __init__(self, name: str, record_cls: Type[RecordT], unique: Tuple[str, ...] = ()):
        self.name = name
        self.record_cls = record_cls
        self.unique = unique
        self._rows: Dict[int, RecordT] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._rows)

    def peek_id(self) -> int:
        return self._next_id

    def build(self, data: BaseModel, record_id: int) -> RecordT:
        """Validate data into a record without storing it."""
        values = data.model_dump()
        for field in self.unique:
            if any(getattr(row, field) == values.get(field) for row in self._rows.values()):
                raise InternalError(
                    f"Duplicate {self.name}.{field}",
                    details={"table": self.name, "field": field, "value": values.get(field)},
                )
        try:
            return self.record_cls(id=record_id, **values)
        except PydanticValidationError as exc:
            raise InternalError(
                f"Invalid {self.name} record",
                details={"table": self.name, "errors": exc.errors(include_url=False)},
            ) from exc

    def insert(self, record: RecordT) -> RecordT:
        self._rows[record.id] = record
        self._next_id = max(self._next_id, record.id + 1)
        return record.model_copy()

    def create(self, data: BaseModel) -> RecordT:
        return self.insert(self.build(data, self._next_id))

    def get(self, record_id: int) -> Optional[RecordT]:
        record = self._rows.get(record_id)
        return record.model_copy() if record is not None else None

    def list(self, predicate: Optional[Callable[[RecordT], bool]] = None) -> List[RecordT]:
        return [
            record.model_copy()
            for record in self._rows.values()
            if predicate is None or predicate(record)
        ]

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        for record in self._rows.values():
            if predicate(record):
                return record.model_copy()
        return None

    def update(self, record_id: int, **changes) -> Optional[RecordT]:
        record = self._rows.get(record_id)
        if record is None:
            return None
        updated = record.model_copy(update=changes)
        self._rows[record_id] = updated
        return updated.model_copy()

    def delete(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None

    def delete_where(self, predicate: Callable[[RecordT], bool]) -> int:
        doomed = [record_id for record_id, record in self._rows.items() if predicate(record)]
        for record_id in doomed:
            del self._rows[record_id]
        return len(doomed)


class MemoryStorage(Storage):
    """Storage backed by process memory."""

    backend_name = "memory"

    def __init__(self):
        self.users: Table[User] = Table("users", User, unique=("username",))
        self.categories: Table[Category] = Table("categories", Category, unique=("slug",))
        self.products: Table[Product] = Table("products", Product, unique=("slug",))
        self.cart_items: Table[CartItem] = Table("cart_items", CartItem)
        self.orders: Table[Order] = Table("orders", Order)
        self.order_items: Table[OrderItem] = Table("order_items", OrderItem)
        self.testimonials: Table[Testimonial] = Table("testimonials", Testimonial)

    # Users
    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return self.users.find(lambda user: user.username == username)

    async def create_user(self, data: UserCreate) -> User:
        return self.users.create(data)

    # Categories
    async def get_categories(self) -> List[Category]:
        return self.categories.list()

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return self.categories.find(lambda category: category.slug == slug)

    async def create_category(self, data: CategoryCreate) -> Category:
        return self.categories.create(data)

    # Products
    async def get_products(self, filters: Optional[ProductFilter] = None) -> List[Product]:
        if filters is None:
            return self.products.list()
        return self.products.list(filters.matches)

    async def get_product_by_slug(self, slug: str) -> Optional[Product]:
        return self.products.find(lambda product: product.slug == slug)

    async def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self.products.get(product_id)

    async def create_product(self, data: ProductCreate) -> Product:
        return self.products.create(data)

    # Cart
    async def get_cart_items(self, cart_id: str) -> List[CartItem]:
        return self.cart_items.list(lambda item: item.cart_id == cart_id)

    async def get_cart_item(self, cart_id: str, product_id: int) -> Optional[CartItem]:
        return self.cart_items.find(
            lambda item: item.cart_id == cart_id and item.product_id == product_id
        )

    async def get_cart_item_by_id(self, item_id: int) -> Optional[CartItem]:
        return self.cart_items.get(item_id)

    async def create_cart_item(self, data: CartItemCreate) -> CartItem:
        return self.cart_items.create(data)

    async def update_cart_item(self, item_id: int, quantity: int) -> Optional[CartItem]:
        return self.cart_items.update(item_id, quantity=quantity)

    async def remove_cart_item(self, item_id: int) -> bool:
        return self.cart_items.delete(item_id)

    async def clear_cart(self, cart_id: str) -> bool:
        removed = self.cart_items.delete_where(lambda item: item.cart_id == cart_id)
        logger.debug(f"Cleared cart {cart_id!r} ({removed} lines)")
        return True

    # Orders
    async def create_order(self, order: OrderCreate, items: Sequence[OrderItemCreate]) -> Order:
        # Build and validate every record first, then publish them together
        order_id = self.orders.peek_id()
        order_record = self.orders.build(order, order_id)

        first_item_id = self.order_items.peek_id()
        item_records = [
            self.order_items.build(item.model_copy(update={"order_id": order_id}), first_item_id + offset)
            for offset, item in enumerate(items)
        ]

        created = self.orders.insert(order_record)
        for record in item_records:
            self.order_items.insert(record)
        return created

    async def get_order(self, order_id: int) -> Optional[Order]:
        return self.orders.get(order_id)

    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        return self.order_items.list(lambda item: item.order_id == order_id)

    # Testimonials
    async def get_testimonials(self) -> List[Testimonial]:
        return self.testimonials.list()

    async def create_testimonial(self, data: TestimonialCreate) -> Testimonial:
        return self.testimonials.create(data)
