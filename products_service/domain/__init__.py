"""Domain layer module.

Contains the error taxonomy shared by the catalog and the API layer.
"""

from products_service.domain.exceptions import CatalogError, DomainError, ErrorKind

__all__ = [
    "CatalogError",
    "DomainError",
    "ErrorKind",
]
