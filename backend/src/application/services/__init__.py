"""Application services - Catalog workflows over the repository ports."""

from .product_service import ProductService

__all__ = ["ProductService"]
