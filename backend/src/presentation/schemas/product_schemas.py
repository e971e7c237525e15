"""Product-related Pydantic schemas."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class CreateProductRequest(BaseModel):
    """Request schema for creating a product."""
    
    category: Optional[str] = Field(None, description="Product category")
    name: Optional[str] = Field(None, description="Product name")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "category": "books",
                    "name": "Dune"
                }
            ]
        }
    }


class UpdateProductRequest(BaseModel):
    """Request schema for updating a product. Both fields are overwritten."""
    
    id: int = Field(..., description="Product identifier")
    category: Optional[str] = Field(None, description="New product category")
    name: Optional[str] = Field(None, description="New product name")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "category": "books",
                    "name": "Dune Messiah"
                }
            ]
        }
    }


class ProductListRequest(BaseModel):
    """Request schema for listing one page of a category."""
    
    category: Optional[str] = Field(None, description="Category to list")
    page: int = Field(0, description="Zero-based page index")
    size: int = Field(20, description="Maximum products per page")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "category": "books",
                    "page": 0,
                    "size": 10
                }
            ]
        }
    }


class ProductResponse(BaseModel):
    """Response schema for a single product."""
    
    id: int = Field(..., description="Product identifier")
    category: Optional[str] = Field(None, description="Product category")
    name: Optional[str] = Field(None, description="Product name")
    
    model_config = ConfigDict(from_attributes=True)


class ProductListResponse(BaseModel):
    """Response schema for a page of products."""
    
    items: list[ProductResponse] = Field(default_factory=list, description="Products on this page")
    total_pages: int = Field(..., alias="totalPages", description="Number of pages")
    total_elements: int = Field(..., alias="totalElements", description="Number of matching products")
    current_page: int = Field(..., alias="currentPage", description="Zero-based page index")
    
    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    """Health check response schema."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    database: str = Field(..., description="Database connectivity: up or down")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "version": "1.0.0",
                    "database": "up"
                }
            ]
        }
    }
