from motoparts.models.user import User
from motoparts.models.category import Category
from motoparts.models.product import Product
from motoparts.models.cart import CartItem
from motoparts.models.order import Order, OrderItem
from motoparts.models.testimonial import Testimonial

__all__ = [
    "User",
    "Category",
    "Product",
    "CartItem",
    "Order",
    "OrderItem",
    "Testimonial",
]
