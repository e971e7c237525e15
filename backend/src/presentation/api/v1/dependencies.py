"""FastAPI dependency injection setup."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database import get_session
from infrastructure.database.repositories import SQLAlchemyProductRepository
from application.services import ProductService
from domain.repositories import IProductRepository


# Database session dependency. Function scope runs the commit before the
# response is sent, so a failed commit still answers 500.
get_db_session = get_session


# Repository dependencies
def get_product_repository(
    session: AsyncSession = Depends(get_db_session, scope="function"),
) -> IProductRepository:
    """Get product repository dependency."""
    return SQLAlchemyProductRepository(session)


# Service dependency
def get_product_service(
    product_repository: IProductRepository = Depends(get_product_repository),
) -> ProductService:
    """Get product service dependency."""
    return ProductService(product_repository)
