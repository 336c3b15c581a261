"""
Category model

slug is the URL key for category landing pages and never changes once seeded.
"""
from sqlalchemy import Column, Integer, Text

from motoparts.core.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    slug = Column(Text, unique=True, nullable=False, index=True)
    description = Column(Text)
    image = Column(Text)
