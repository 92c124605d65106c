"""Product API endpoints.

Exposes the catalog operations over HTTP. Catalog errors are not caught
here; the application's exception handler maps them to responses.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from products_service.api.schemas import (
    ErrorResponse,
    PageMetadata,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
    ValidateProductsRequest,
)
from products_service.catalog.repository import ProductRepository
from products_service.catalog.service import (
    PaginationParams,
    ProductCatalogService,
    ProductCreate,
    ProductUpdate,
)
from products_service.infrastructure.database import get_session

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ProductCatalogService:
    """Get catalog service bound to the request session."""
    return ProductCatalogService(ProductRepository(session))


ServiceDep = Annotated[ProductCatalogService, Depends(get_service)]


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create product",
)
async def create_product(
    body: ProductCreateRequest,
    service: ServiceDep,
) -> ProductResponse:
    """Create a new available product."""
    product = await service.create(ProductCreate(name=body.name, price=body.price))
    return ProductResponse.model_validate(product)


@router.get(
    "",
    response_model=ProductListResponse,
    responses={404: {"model": ErrorResponse}},
    summary="List products",
    description="Get one page of available products.",
)
async def list_products(
    request: Request,
    service: ServiceDep,
    page: Annotated[int, Query(ge=1, description="Page number (1-based)")] = 1,
    limit: Annotated[int | None, Query(ge=1, description="Items per page")] = None,
) -> ProductListResponse:
    """List available products.

    Args:
        request: Incoming request.
        service: Catalog service.
        page: Page number.
        limit: Page size, defaults to the configured page limit.

    Returns:
        Page of products and pagination metadata.
    """
    settings = request.app.state.settings
    result = await service.find_all(
        PaginationParams(page=page, limit=limit or settings.default_page_limit)
    )

    return ProductListResponse(
        data=[ProductResponse.model_validate(p) for p in result.data],
        metadata=PageMetadata(
            total=result.total,
            page=result.page,
            last_page=result.last_page,
        ),
    )


@router.post(
    "/validate",
    response_model=list[ProductResponse],
    responses={404: {"model": ErrorResponse}},
    summary="Validate products",
    description="Confirm that every given product id exists.",
)
async def validate_products(
    body: ValidateProductsRequest,
    service: ServiceDep,
) -> list[ProductResponse]:
    """Return the products for the given ids, or 404 if any is unknown."""
    products = await service.validate_products(body.ids)
    return [ProductResponse.model_validate(p) for p in products]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
)
async def get_product(product_id: int, service: ServiceDep) -> ProductResponse:
    """Get an available product by ID."""
    product = await service.find_one(product_id)
    return ProductResponse.model_validate(product)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update product",
)
async def update_product(
    product_id: int,
    body: ProductUpdateRequest,
    service: ServiceDep,
) -> ProductResponse:
    """Update name and/or price of an available product."""
    product = await service.update(
        product_id,
        ProductUpdate(name=body.name, price=body.price, id=body.id),
    )
    return ProductResponse.model_validate(product)


@router.delete(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Remove product",
    description="Mark a product unavailable. Products are never deleted.",
)
async def remove_product(product_id: int, service: ServiceDep) -> ProductResponse:
    """Soft-delete a product."""
    product = await service.remove(product_id)
    return ProductResponse.model_validate(product)
