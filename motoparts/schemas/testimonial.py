"""
Testimonial schemas
"""
from typing import Optional

from motoparts.schemas.base import CamelModel


class TestimonialCreate(CamelModel):
    name: str
    avatar: Optional[str] = None
    rating: int
    text: str
    bike_model: Optional[str] = None


class Testimonial(TestimonialCreate):
    id: int
