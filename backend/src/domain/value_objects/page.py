"""Paging value objects for category listings."""

import math
from dataclasses import dataclass, field

from domain.entities import Product


@dataclass(frozen=True)
class PageRequest:
    """
    Immutable value object describing which slice of a listing to read.
    
    Attributes:
        page: Zero-based page index
        size: Maximum number of items per page
    """

    page: int
    size: int

    def __post_init__(self) -> None:
        """Validate paging bounds."""
        if self.page < 0:
            raise ValueError("Page index must not be less than zero")
        if self.size < 1:
            raise ValueError("Page size must not be less than one")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page:
    """
    Immutable slice of an ordered listing plus its pagination metadata.
    
    Attributes:
        items: Products on this page, in listing order
        total_elements: Number of matching products across all pages
        request: The page request that produced this slice
    """

    items: list[Product] = field(default_factory=list)
    total_elements: int = 0
    request: PageRequest = field(default_factory=lambda: PageRequest(page=0, size=20))

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.request.size)

    @property
    def current_page(self) -> int:
        return self.request.page

    def __len__(self) -> int:
        return len(self.items)
