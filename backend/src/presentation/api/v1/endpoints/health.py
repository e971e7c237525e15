"""Health check endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from presentation.schemas import HealthResponse
from presentation.api.v1.dependencies import get_db_session
from infrastructure.config import get_settings, get_logger

router = APIRouter(tags=["health"])
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check(
    session: AsyncSession = Depends(get_db_session, scope="function"),
) -> HealthResponse:
    """
    Health check endpoint.
    
    Returns service status, version and whether the database answers.
    """
    settings = get_settings()
    
    try:
        await session.execute(text("SELECT 1"))
        database = "up"
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {str(e)}")
        database = "down"
        await session.rollback()
    
    return HealthResponse(
        status="healthy" if database == "up" else "degraded",
        version=settings.app_version,
        database=database,
    )
