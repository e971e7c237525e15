"""Domain Value Objects - Immutable objects without identity."""

from .page import Page, PageRequest

__all__ = ["Page", "PageRequest"]
