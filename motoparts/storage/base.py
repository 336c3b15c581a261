"""
Entity store contract

Callers (services, routes) depend only on Storage. Two backends implement it:
MemoryStorage (process-local, lost on restart) and DatabaseStorage
(SQLAlchemy, survives restart). Both return pydantic record schemas, never
ORM instances, and signal absence with None rather than raising.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

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


class Storage(ABC):
    """Async data-access interface for every storefront entity."""

    #: Short name used in logs and the health endpoint
    backend_name: str = "abstract"

    # User operations
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> User: ...

    # Category operations
    @abstractmethod
    async def get_categories(self) -> List[Category]: ...

    @abstractmethod
    async def get_category_by_slug(self, slug: str) -> Optional[Category]: ...

    @abstractmethod
    async def create_category(self, data: CategoryCreate) -> Category: ...

    # Product operations
    @abstractmethod
    async def get_products(self, filters: Optional[ProductFilter] = None) -> List[Product]: ...

    @abstractmethod
    async def get_product_by_slug(self, slug: str) -> Optional[Product]: ...

    @abstractmethod
    async def get_product_by_id(self, product_id: int) -> Optional[Product]: ...

    @abstractmethod
    async def create_product(self, data: ProductCreate) -> Product: ...

    # Cart operations
    @abstractmethod
    async def get_cart_items(self, cart_id: str) -> List[CartItem]: ...

    @abstractmethod
    async def get_cart_item(self, cart_id: str, product_id: int) -> Optional[CartItem]: ...

    @abstractmethod
    async def get_cart_item_by_id(self, item_id: int) -> Optional[CartItem]: ...

    @abstractmethod
    async def create_cart_item(self, data: CartItemCreate) -> CartItem: ...

    @abstractmethod
    async def update_cart_item(self, item_id: int, quantity: int) -> Optional[CartItem]:
        """Set the quantity of a cart line. None if the line does not exist."""

    @abstractmethod
    async def remove_cart_item(self, item_id: int) -> bool:
        """Delete a cart line. False means it was already absent."""

    @abstractmethod
    async def clear_cart(self, cart_id: str) -> bool:
        """Delete every line of a cart. Always True, even for an empty cart."""

    # Order operations
    @abstractmethod
    async def create_order(self, order: OrderCreate, items: Sequence[OrderItemCreate]) -> Order:
        """
        Create an order and all of its items as one unit.

        Either every item is recorded along with the order or nothing is.
        Each item's order_id is overwritten with the new order's id.
        """

    @abstractmethod
    async def get_order(self, order_id: int) -> Optional[Order]: ...

    @abstractmethod
    async def get_order_items(self, order_id: int) -> List[OrderItem]: ...

    # Testimonial operations
    @abstractmethod
    async def get_testimonials(self) -> List[Testimonial]: ...

    @abstractmethod
    async def create_testimonial(self, data: TestimonialCreate) -> Testimonial: ...

    async def is_empty(self) -> bool:
        """True when no catalog data has been loaded yet."""
        return not await self.get_categories()

    async def close(self) -> None:
        """Release backend resources. Nothing to do by default."""
