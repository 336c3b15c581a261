"""
Order models

Orders and their items are written once at checkout, inside one transaction.
OrderItem.price is a snapshot of the product price at order time.
"""
from sqlalchemy import Column, Float, Integer, String, Text

from motoparts.core.database import Base


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(Text, nullable=False)
    total = Column(Float, nullable=False)
    status = Column(String(50), nullable=False, default="pending")
    shipping_address = Column(Text, nullable=False)
    billing_address = Column(Text, nullable=False)


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
