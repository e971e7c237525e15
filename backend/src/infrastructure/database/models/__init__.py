"""SQLAlchemy ORM models."""

from .product_model import ProductModel

__all__ = ["ProductModel"]
