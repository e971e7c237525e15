"""Domain Entities - Objects with identity."""

from .product import Product

__all__ = ["Product"]
