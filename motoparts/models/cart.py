"""
Cart model

Carts are identified by an opaque client-generated string. One row per
(cart_id, product_id) is maintained by merge-on-add in the cart service,
not by a unique constraint.
"""
from sqlalchemy import Column, Index, Integer, Text

from motoparts.core.database import Base


class CartItem(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True)
    cart_id = Column(Text, nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    # Composite index for the merge lookup
    __table_args__ = (
        Index("ix_cart_items_cart_product", "cart_id", "product_id"),
    )
