"""Product catalog service - create, read, update, delete and list products."""

from typing import Optional

from domain.entities import Product
from domain.exceptions import ProductNotFoundError
from domain.repositories import IProductRepository
from domain.value_objects import Page, PageRequest
from infrastructure.config import get_logger


class ProductService:
    """Orchestrates product persistence for the catalog API."""
    
    def __init__(self, product_repository: IProductRepository):
        self.product_repo = product_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def create(self, category: Optional[str], name: Optional[str]) -> Product:
        """Store a new product and return it with its assigned id."""
        product = Product(category=category, name=name)
        created = await self.product_repo.create(product)
        self.logger.info(f"Created product {created.id} in category '{created.category}'")
        return created
    
    async def get_by_id(self, product_id: int) -> Product:
        """
        Look up a product.
        
        Raises:
            ProductNotFoundError: If no product has this id
        """
        product = await self.product_repo.get_by_id(product_id)
        if product is None:
            self.logger.warning(f"Product not found: {product_id}")
            raise ProductNotFoundError(product_id)
        return product
    
    async def update(
        self,
        product_id: int,
        category: Optional[str],
        name: Optional[str],
    ) -> Product:
        """Overwrite category and name of an existing product."""
        product = await self.get_by_id(product_id)
        product.update_details(category=category, name=name)
        updated = await self.product_repo.update(product)
        self.logger.info(f"Updated product {updated.id}")
        return updated
    
    async def delete(self, product_id: int) -> None:
        """Remove an existing product."""
        product = await self.get_by_id(product_id)
        if not await self.product_repo.delete(product.id):
            # Removed by a concurrent request after the lookup
            raise ProductNotFoundError(product_id)
        self.logger.info(f"Deleted product {product_id}")
    
    async def list_by_category(
        self,
        category: Optional[str],
        page: int,
        size: int,
    ) -> Page:
        """Return one page of a category, sorted ascending by category."""
        page_request = PageRequest(page=page, size=size)
        result = await self.product_repo.list_by_category(category, page_request)
        self.logger.debug(
            f"Listed category '{category}' page {page}: "
            f"{len(result)} of {result.total_elements} products"
        )
        return result
    
    async def list_unique_categories(self) -> list[str]:
        """Return every stored category exactly once."""
        return await self.product_repo.list_distinct_categories()
