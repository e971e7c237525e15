"""Repository implementations."""

from .sqlalchemy_product_repository import SQLAlchemyProductRepository

__all__ = ["SQLAlchemyProductRepository"]
