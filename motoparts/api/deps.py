"""
API dependencies
"""
from fastapi import Request

from motoparts.storage import Storage


def get_storage(request: Request) -> Storage:
    """Entity store created at startup and attached to the application state."""
    return request.app.state.storage
