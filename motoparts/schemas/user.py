"""
User schemas
"""
from pydantic import Field

from motoparts.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1)
    password: str


class User(UserCreate):
    id: int
