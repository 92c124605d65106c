"""Domain exceptions.

All domain-level errors that represent business rule violations.
Each error carries a kind that the API layer maps to an HTTP status,
so the catalog logic never depends on the transport.
"""

from enum import Enum
from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ErrorKind(str, Enum):
    """Failure categories with their HTTP-equivalent status codes."""

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"

    @property
    def status(self) -> int:
        """HTTP status code for this kind."""
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Tagged failure raised by catalog operations.

    Attributes:
        kind: Failure category.
        message: Human-readable error message.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.kind = kind

    @property
    def status(self) -> int:
        """HTTP status code equivalent."""
        return self.kind.status

    def to_dict(self) -> dict[str, Any]:
        """Convert to the ``{message, status}`` error payload."""
        return {"message": self.message, "status": self.status}

    @classmethod
    def bad_request(cls, message: str, **details: Any) -> "CatalogError":
        """Create a BAD_REQUEST error."""
        return cls(ErrorKind.BAD_REQUEST, message, details=details)

    @classmethod
    def not_found(cls, message: str, **details: Any) -> "CatalogError":
        """Create a NOT_FOUND error."""
        return cls(ErrorKind.NOT_FOUND, message, details=details)


def product_not_found(product_id: int) -> CatalogError:
    """Error for a missing or unavailable product."""
    return CatalogError.not_found(
        f"Product with the id {product_id} does not exist",
        product_id=product_id,
    )


def page_not_found(page: int, last_page: int) -> CatalogError:
    """Error for a page number beyond the last page."""
    return CatalogError.not_found(
        f"Page number {page} does not exist.",
        page=page,
        last_page=last_page,
    )


def no_update_data() -> CatalogError:
    """Error for an update request without name or price."""
    return CatalogError.bad_request("no valid data received")


def products_missing(missing_ids: list[int]) -> CatalogError:
    """Error for a batch validation with unknown ids."""
    return CatalogError.not_found(
        "Some products where not found",
        missing_ids=missing_ids,
    )
