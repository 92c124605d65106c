"""API schemas for the products service.

Pydantic models for request/response validation and serialization.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    status: int = Field(..., description="HTTP status code")
    details: list[dict[str, Any]] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class PageMetadata(BaseModel):
    """Pagination metadata."""

    total: int = Field(..., description="Total number of available products")
    page: int = Field(..., description="Current page number")
    last_page: int = Field(..., description="Last page number")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductCreateRequest(BaseModel):
    """Request to create a product."""

    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    price: float = Field(..., allow_inf_nan=False, description="Unit price")


class ProductUpdateRequest(BaseModel):
    """Request to update a product.

    Only provided fields are applied. ``id`` is accepted and ignored.
    """

    id: int | None = Field(default=None, description="Ignored")
    name: str | None = Field(
        default=None, min_length=1, max_length=255, description="New name"
    )
    price: float | None = Field(
        default=None, allow_inf_nan=False, description="New price"
    )


class ProductResponse(BaseModel):
    """Product representation."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Unit price")
    available: bool = Field(..., description="False once the product is removed")
    created_at: datetime = Field(..., description="When the product was created")
    updated_at: datetime = Field(..., description="When the product was last updated")


class ProductListResponse(BaseModel):
    """Paginated list of products."""

    data: list[ProductResponse] = Field(..., description="Products on this page")
    metadata: PageMetadata = Field(..., description="Pagination metadata")


class ValidateProductsRequest(BaseModel):
    """Request to confirm a set of product ids exist."""

    ids: list[int] = Field(..., description="Product ids; duplicates are ignored")
