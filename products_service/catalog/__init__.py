"""Product Catalog.

Product model, repository and the catalog service implementing the
product lifecycle: create, list, fetch, update, soft-delete and batch
validation.
"""

from products_service.catalog.models import Product
from products_service.catalog.repository import ProductRepository
from products_service.catalog.service import (
    PaginatedResult,
    PaginationParams,
    ProductCatalogService,
    ProductCreate,
    ProductUpdate,
)

__all__ = [
    # Models
    "Product",
    # Repository
    "ProductRepository",
    # Service
    "PaginatedResult",
    "PaginationParams",
    "ProductCatalogService",
    "ProductCreate",
    "ProductUpdate",
]
