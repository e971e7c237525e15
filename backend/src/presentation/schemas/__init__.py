"""Pydantic schemas for request/response validation."""

from .product_schemas import (
    CreateProductRequest,
    UpdateProductRequest,
    ProductListRequest,
    ProductResponse,
    ProductListResponse,
    HealthResponse,
)

__all__ = [
    "CreateProductRequest",
    "UpdateProductRequest",
    "ProductListRequest",
    "ProductResponse",
    "ProductListResponse",
    "HealthResponse",
]
