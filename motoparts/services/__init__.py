from motoparts.services.catalog_service import CatalogService
from motoparts.services.cart_service import AddItemResult, CartService
from motoparts.services.order_service import OrderService

__all__ = [
    "AddItemResult",
    "CartService",
    "CatalogService",
    "OrderService",
]
