"""Catalog service for product operations.

High-level service that combines repository operations with
the catalog's business rules: availability checks, pagination
bounds and batch existence validation.
"""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

import structlog

from products_service.catalog.models import Product
from products_service.catalog.repository import ProductRepository
from products_service.domain.exceptions import (
    CatalogError,
    no_update_data,
    page_not_found,
    product_not_found,
    products_missing,
)

T = TypeVar("T")

logger = structlog.get_logger()


# ============================================================================
# Data Transfer Objects
# ============================================================================


@dataclass
class ProductCreate:
    """Input for creating a product."""

    name: str
    price: float


@dataclass
class ProductUpdate:
    """Partial input for updating a product.

    ``id`` is accepted for payload compatibility and never applied.
    """

    name: str | None = None
    price: float | None = None
    id: int | None = None

    def values(self) -> dict[str, object]:
        """Fields that were provided."""
        values: dict[str, object] = {}
        if self.name is not None:
            values["name"] = self.name
        if self.price is not None:
            values["price"] = self.price
        return values


@dataclass
class PaginationParams:
    """Pagination parameters.

    Attributes:
        page: Page number (1-indexed).
        limit: Items per page.
    """

    page: int = 1
    limit: int = 10

    def __post_init__(self) -> None:
        if self.page < 1 or self.limit < 1:
            raise CatalogError.bad_request(
                "page and limit must be positive integers",
                page=self.page,
                limit=self.limit,
            )

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.limit

    def last_page(self, total: int) -> int:
        """Number of pages needed for ``total`` items."""
        return math.ceil(total / self.limit)


@dataclass
class PaginatedResult(Generic[T]):
    """Paginated result container.

    Attributes:
        data: Items on the requested page.
        total: Total count of matching items.
        page: Current page.
        last_page: Last page number.
    """

    data: list[T]
    total: int
    page: int
    last_page: int


# ============================================================================
# Service
# ============================================================================


class ProductCatalogService:
    """Service for product lifecycle operations.

    Example usage:
        async with database.session_factory() as session:
            service = ProductCatalogService(ProductRepository(session))
            product = await service.create(ProductCreate(name="Widget", price=9.99))
            await session.commit()
    """

    def __init__(self, repository: ProductRepository) -> None:
        """Initialize service with its product store.

        Args:
            repository: Product repository.
        """
        self.repository = repository

    async def create(self, data: ProductCreate) -> Product:
        """Create a new available product.

        Args:
            data: Product name and price.

        Returns:
            The created product.
        """
        product = await self.repository.save(
            Product(name=data.name, price=data.price, available=True)
        )
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    async def find_all(self, pagination: PaginationParams) -> PaginatedResult[Product]:
        """List available products one page at a time.

        Args:
            pagination: Page number and size.

        Returns:
            The page of products with total and last page.

        Raises:
            CatalogError: NOT_FOUND if the page is beyond the last page.
        """
        total = await self.repository.count_available()
        last_page = pagination.last_page(total)

        if pagination.page > last_page:
            logger.warning(
                "product.page_out_of_range",
                page=pagination.page,
                last_page=last_page,
                total=total,
            )
            raise page_not_found(pagination.page, last_page)

        products = await self.repository.find_available(
            limit=pagination.limit,
            offset=pagination.offset,
        )

        return PaginatedResult(
            data=list(products),
            total=total,
            page=pagination.page,
            last_page=last_page,
        )

    async def find_one(self, product_id: int) -> Product:
        """Get an available product by ID.

        Raises:
            CatalogError: NOT_FOUND if missing or removed.
        """
        product = await self.repository.get_by_id(product_id)

        if product is None:
            logger.warning("product.not_found", product_id=product_id)
            raise product_not_found(product_id)

        return product

    async def update(self, product_id: int, data: ProductUpdate) -> Product:
        """Apply a partial update to an available product.

        Args:
            product_id: Product ID.
            data: Fields to update; ``data.id`` is ignored.

        Returns:
            The updated product.

        Raises:
            CatalogError: BAD_REQUEST if neither name nor price is given,
                NOT_FOUND if the product is missing or removed.
        """
        if not data.name and not data.price:
            logger.warning("product.update_without_data", product_id=product_id)
            raise no_update_data()

        values = data.values()
        product = await self.repository.update_available(product_id, values)

        if product is None:
            logger.warning("product.not_found", product_id=product_id)
            raise product_not_found(product_id)

        logger.info("product.updated", product_id=product_id, fields=sorted(values))
        return product

    async def remove(self, product_id: int) -> Product:
        """Soft-delete an available product.

        Returns:
            The product with ``available = False``.

        Raises:
            CatalogError: NOT_FOUND if missing or already removed.
        """
        product = await self.repository.update_available(product_id, {"available": False})

        if product is None:
            logger.warning("product.not_found", product_id=product_id)
            raise product_not_found(product_id)

        logger.info("product.removed", product_id=product_id)
        return product

    async def validate_products(self, product_ids: list[int]) -> list[Product]:
        """Confirm that every id refers to a stored product.

        Duplicates are ignored and availability is not checked.

        Args:
            product_ids: Product IDs to validate.

        Returns:
            The matching products, ordered by id.

        Raises:
            CatalogError: NOT_FOUND if any id is unknown.
        """
        unique_ids = set(product_ids)
        products = list(await self.repository.find_by_ids(unique_ids))

        if len(products) != len(unique_ids):
            found = {product.id for product in products}
            missing = sorted(unique_ids - found)
            logger.warning("product.batch_missing", missing_ids=missing)
            raise products_missing(missing)

        return products
