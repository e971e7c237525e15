"""Product repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Product
from domain.value_objects import Page, PageRequest


class IProductRepository(ABC):
    """
    Abstract repository interface for Product entity.
    
    This interface defines the contract for product persistence.
    Concrete implementations will be in the infrastructure layer.
    """
    
    @abstractmethod
    async def create(self, product: Product) -> Product:
        """
        Insert a new product.
        
        Args:
            product: Product entity without an id
            
        Returns:
            Stored Product with its assigned id
        """
        pass
    
    @abstractmethod
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """
        Retrieve a product by ID.
        
        Args:
            product_id: Product identifier
            
        Returns:
            Product if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def list_by_category(
        self,
        category: Optional[str],
        page_request: PageRequest,
    ) -> Page:
        """
        Retrieve one page of products in a category, ascending by category.
        
        Args:
            category: Category to filter on
            page_request: Page index and size
            
        Returns:
            Page of matching products with pagination metadata
        """
        pass
    
    @abstractmethod
    async def update(self, product: Product) -> Product:
        """
        Persist the current state of an existing product.
        
        Args:
            product: Product entity with updated data
            
        Returns:
            Updated Product
        """
        pass
    
    @abstractmethod
    async def delete(self, product_id: int) -> bool:
        """
        Delete a product.
        
        Args:
            product_id: Product identifier
            
        Returns:
            True if deleted, False if not found
        """
        pass
    
    @abstractmethod
    async def list_distinct_categories(self) -> list[str]:
        """
        Retrieve every category stored at least once, each exactly once.
        
        Returns:
            Distinct category values, order unspecified
        """
        pass
