"""Product catalog endpoints."""

from fastapi import APIRouter, Depends

from application.services import ProductService
from presentation.schemas import (
    CreateProductRequest,
    UpdateProductRequest,
    ProductListRequest,
    ProductResponse,
    ProductListResponse,
)
from presentation.api.v1.dependencies import get_product_service
from infrastructure.config import get_logger

router = APIRouter(tags=["products"])
logger = get_logger(__name__)


@router.get("/get/product/by/{productId}", response_model=ProductResponse)
async def get_product_by_id(
    productId: int,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Get a single product."""
    product = await service.get_by_id(productId)
    return ProductResponse.model_validate(product)


@router.post("/create/product", response_model=ProductResponse)
async def create_product(
    request: CreateProductRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create a product; the id is assigned by the store."""
    product = await service.create(category=request.category, name=request.name)
    return ProductResponse.model_validate(product)


@router.post("/delete/product/{productId}", response_model=bool)
async def delete_product(
    productId: int,
    service: ProductService = Depends(get_product_service),
) -> bool:
    """Delete a product."""
    await service.delete(productId)
    return True


@router.post("/update/product", response_model=ProductResponse)
async def update_product(
    request: UpdateProductRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Overwrite category and name of a product."""
    product = await service.update(
        product_id=request.id,
        category=request.category,
        name=request.name,
    )
    return ProductResponse.model_validate(product)


@router.post("/product/list", response_model=ProductListResponse)
async def list_products_by_category(
    request: ProductListRequest,
    service: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    """List one page of products in a category, ascending by category."""
    page = await service.list_by_category(
        category=request.category,
        page=request.page,
        size=request.size,
    )
    return ProductListResponse(
        items=[ProductResponse.model_validate(product) for product in page.items],
        total_pages=page.total_pages,
        total_elements=page.total_elements,
        current_page=page.current_page,
    )


@router.get("/product/category/list", response_model=list[str])
async def list_categories(
    service: ProductService = Depends(get_product_service),
) -> list[str]:
    """List every stored category once."""
    return await service.list_unique_categories()
