"""Product entity representing a catalog item."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Product:
    """
    Entity representing a single product in the catalog.
    
    The identifier is assigned by the store on insert and never changes
    afterwards. Category and name are only replaced through
    ``update_details``.
    """

    category: Optional[str] = None
    name: Optional[str] = None
    id: Optional[int] = None

    @property
    def is_persisted(self) -> bool:
        """Check if the store has assigned an identifier."""
        return self.id is not None

    def assign_id(self, product_id: int) -> None:
        """Bind the store-generated identifier to this product."""
        if self.id is not None and self.id != product_id:
            raise ValueError("Product id cannot be changed once assigned")
        self.id = product_id

    def update_details(self, category: Optional[str], name: Optional[str]) -> None:
        """
        Replace category and name.
        
        Both fields are overwritten, including with empty or missing
        values: this is a full replacement, not a partial patch.
        """
        self.category = category
        self.name = name

    def __str__(self) -> str:
        return f"Product(id={self.id}, category={self.category}, name={self.name})"
