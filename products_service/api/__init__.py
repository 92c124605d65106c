"""API layer module.

Contains FastAPI routers, middleware and request/response schemas.
"""

from products_service.api.health import router as health_router
from products_service.api.products import router as products_router

__all__ = [
    "health_router",
    "products_router",
]
