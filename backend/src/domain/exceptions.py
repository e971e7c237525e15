"""Domain exceptions raised when catalog rules are violated."""


class DomainError(Exception):
    """Base class for errors raised by the domain and application layers."""
    pass


class ProductNotFoundError(DomainError):
    """The requested product does not exist."""

    def __init__(self, product_id: int | None = None, message: str = "product not found"):
        super().__init__(message)
        self.product_id = product_id


__all__ = ["DomainError", "ProductNotFoundError"]
