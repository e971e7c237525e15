"""Domain Repository Interfaces - Abstract definitions."""

from .product_repository import IProductRepository

__all__ = ["IProductRepository"]
