"""
CatalogService - read-only product, category and testimonial queries
"""
from typing import List, Literal, Optional, get_args

from motoparts.core.exceptions import NotFoundError, ValidationError
from motoparts.schemas import Category, Product, ProductFilter, Testimonial
from motoparts.storage import Storage

SortOption = Literal["featured", "price-low", "price-high", "rating"]
SORT_OPTIONS = get_args(SortOption)
DEFAULT_SORT: SortOption = "featured"


class CatalogService:
    """Catalog queries over any Storage backend."""

    @staticmethod
    async def list_categories(storage: Storage) -> List[Category]:
        return await storage.get_categories()

    @staticmethod
    async def get_category_by_slug(storage: Storage, slug: str) -> Category:
        category = await storage.get_category_by_slug(slug)
        if category is None:
            raise NotFoundError("Category", slug)
        return category

    @staticmethod
    async def list_products(storage: Storage, filters: Optional[ProductFilter] = None) -> List[Product]:
        """Products matching every given filter, in insertion order."""
        return await storage.get_products(filters or ProductFilter())

    @staticmethod
    async def list_featured_products(storage: Storage) -> List[Product]:
        return await storage.get_products(ProductFilter(featured=True))

    @staticmethod
    async def get_product_by_slug(storage: Storage, slug: str) -> Product:
        product = await storage.get_product_by_slug(slug)
        if product is None:
            raise NotFoundError("Product", slug)
        return product

    @staticmethod
    async def list_testimonials(storage: Storage) -> List[Testimonial]:
        return await storage.get_testimonials()

    # Presentation helpers, applied after retrieval

    @staticmethod
    def filter_by_price(
        products: List[Product],
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
    ) -> List[Product]:
        return [
            product
            for product in products
            if (min_price is None or product.price >= min_price)
            and (max_price is None or product.price <= max_price)
        ]

    @staticmethod
    def sort_products(products: List[Product], sort: SortOption = DEFAULT_SORT) -> List[Product]:
        """
        Order a product list for display.

        "featured" keeps insertion order. Sorting is stable, so ties keep
        their insertion order too.
        """
        if sort not in SORT_OPTIONS:
            raise ValidationError(f"Unknown sort order: {sort!r}", fields=["sort"])
        if sort == "price-low":
            return sorted(products, key=lambda p: p.price)
        if sort == "price-high":
            return sorted(products, key=lambda p: p.price, reverse=True)
        if sort == "rating":
            return sorted(products, key=lambda p: p.rating, reverse=True)
        return list(products)
