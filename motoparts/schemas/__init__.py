from motoparts.schemas.category import Category, CategoryCreate
from motoparts.schemas.product import Product, ProductCreate, ProductFilter
from motoparts.schemas.cart import (
    CartItem,
    CartItemCreate,
    CartItemUpdate,
    CartItemWithProduct,
    CartSummary,
    CartTotals,
)
from motoparts.schemas.order import (
    Order,
    OrderCreate,
    OrderItem,
    OrderItemCreate,
    OrderWithItems,
    PlaceOrderRequest,
)
from motoparts.schemas.testimonial import Testimonial, TestimonialCreate
from motoparts.schemas.user import User, UserCreate

__all__ = [
    "Category",
    "CategoryCreate",
    "Product",
    "ProductCreate",
    "ProductFilter",
    "CartItem",
    "CartItemCreate",
    "CartItemUpdate",
    "CartItemWithProduct",
    "CartSummary",
    "CartTotals",
    "Order",
    "OrderCreate",
    "OrderItem",
    "OrderItemCreate",
    "OrderWithItems",
    "PlaceOrderRequest",
    "Testimonial",
    "TestimonialCreate",
    "User",
    "UserCreate",
]
