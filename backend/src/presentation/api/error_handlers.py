"""Global exception handlers - failure detail stays in the server log."""

from fastapi import FastAPI, Request, Response, status

from domain.exceptions import ProductNotFoundError
from infrastructure.config import get_settings, get_logger

logger = get_logger(__name__)


async def product_not_found_handler(request: Request, exc: ProductNotFoundError) -> Response:
    """Answer a missing product with an empty body: 500 unless 404 is enabled."""
    if get_settings().expose_not_found_status:
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    
    logger.error(f"status :: {status_code}, errorType :: notFound, errorCause :: {exc}")
    return Response(status_code=status_code)


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Collapse every other failure to an empty 500."""
    logger.error(
        f"status :: {status.HTTP_500_INTERNAL_SERVER_ERROR}, "
        f"errorType :: {type(exc).__name__}, errorCause :: {exc}",
        exc_info=exc,
    )
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the catalog's exception handlers to the application."""
    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
