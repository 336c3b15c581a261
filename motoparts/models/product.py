"""
Product model

category_id is a plain integer: referential integrity against categories is
left to the caller, there is no foreign key.
"""
from sqlalchemy import Boolean, Column, Float, Integer, Text

from motoparts.core.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    slug = Column(Text, unique=True, nullable=False, index=True)
    description = Column(Text)

    # Pricing (double precision, as in the original schema)
    price = Column(Float, nullable=False)
    original_price = Column(Float)

    # Media
    image_url = Column(Text, nullable=False)

    # Categorization
    category_id = Column(Integer, nullable=False, index=True)

    # Merchandising flags
    in_stock = Column(Boolean, default=True)
    is_featured = Column(Boolean, default=False)
    is_new = Column(Boolean, default=False)
    is_bestseller = Column(Boolean, default=False)

    # Reviews
    rating = Column(Float, default=0)
    review_count = Column(Integer, default=0)
