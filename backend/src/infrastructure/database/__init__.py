"""Database infrastructure module."""

from .session import get_session, init_db, close_db, reset_database
from .models import ProductModel

__all__ = [
    "get_session",
    "init_db",
    "close_db",
    "reset_database",
    "ProductModel",
]
