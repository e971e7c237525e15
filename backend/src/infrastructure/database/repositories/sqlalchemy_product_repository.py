"""SQLAlchemy implementation of product repository."""

from typing import Optional
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities import Product
from domain.exceptions import ProductNotFoundError
from domain.repositories import IProductRepository
from domain.value_objects import Page, PageRequest
from infrastructure.database.models import ProductModel


class SQLAlchemyProductRepository(IProductRepository):
    """Concrete implementation of IProductRepository using SQLAlchemy."""
    
    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session
    
    async def create(self, product: Product) -> Product:
        """Insert a new product and let the database assign its id."""
        model = self._entity_to_model(product)
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        
        product.assign_id(model.id)
        return self._model_to_entity(model)
    
    async def get_by_id(self, product_id: int) -> Optional[Product]:
        """Retrieve a product by ID."""
        model = await self._get_model(product_id)
        
        if model is None:
            return None
        
        return self._model_to_entity(model)
    
    async def list_by_category(
        self,
        category: Optional[str],
        page_request: PageRequest,
    ) -> Page:
        """Retrieve one page of a category, ascending by category then id."""
        count_stmt = (
            select(func.count())
            .select_from(ProductModel)
            .where(ProductModel.category == category)
        )
        total = (await self.session.execute(count_stmt)).scalar_one()
        
        stmt = (
            select(ProductModel)
            .where(ProductModel.category == category)
            .order_by(ProductModel.category.asc(), ProductModel.id.asc())
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        result = await self.session.execute(stmt)
        items = [self._model_to_entity(model) for model in result.scalars().all()]
        
        return Page(items=items, total_elements=total, request=page_request)
    
    async def update(self, product: Product) -> Product:
        """Update an existing product."""
        model = await self._get_model(product.id)
        
        if model is None:
            raise ProductNotFoundError(product.id)
        
        self._update_model_from_entity(model, product)
        await self.session.flush()
        await self.session.refresh(model)
        
        return self._model_to_entity(model)
    
    async def delete(self, product_id: int) -> bool:
        """Delete a product."""
        model = await self._get_model(product_id)
        
        if model is None:
            return False
        
        await self.session.delete(model)
        await self.session.flush()
        return True
    
    async def list_distinct_categories(self) -> list[str]:
        """Retrieve each category once; NULL categories are left out."""
        stmt = (
            select(ProductModel.category)
            .where(ProductModel.category.is_not(None))
            .distinct()
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
    
    async def _get_model(self, product_id: Optional[int]) -> Optional[ProductModel]:
        if product_id is None:
            return None
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    def _entity_to_model(self, entity: Product) -> ProductModel:
        """Convert domain entity to ORM model."""
        return ProductModel(
            id=entity.id,
            category=entity.category,
            name=entity.name,
        )
    
    def _update_model_from_entity(self, model: ProductModel, entity: Product) -> None:
        """Update ORM model from domain entity."""
        model.category = entity.category
        model.name = entity.name
    
    def _model_to_entity(self, model: ProductModel) -> Product:
        """Convert ORM model to domain entity."""
        return Product(
            id=model.id,
            category=model.category,
            name=model.name,
        )
