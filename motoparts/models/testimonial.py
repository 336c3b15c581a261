"""
Testimonial model (read-only seed data)
"""
from sqlalchemy import Column, Integer, Text

from motoparts.core.database import Base


class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    avatar = Column(Text)
    rating = Column(Integer, nullable=False)
    text = Column(Text, nullable=False)
    bike_model = Column(Text)
