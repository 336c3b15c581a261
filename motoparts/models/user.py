"""
User model

Kept for parity with the storefront schema; no route authenticates users.
"""
from sqlalchemy import Column, Integer, Text

from motoparts.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(Text, unique=True, nullable=False, index=True)
    password = Column(Text, nullable=False)
