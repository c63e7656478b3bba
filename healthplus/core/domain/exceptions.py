"""
Domain Exceptions

These exceptions represent failed validations at the workflow boundary.
They are raised before any action is dispatched, so the snapshot is left
untouched, and they are translated to HTTP responses in the API layer.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INSUFFICIENT_STOCK")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when workflow validation fails.

    Use for missing selections, empty carts, malformed input, etc.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(ValidationException):
    """
    Raised when a workflow references an entity that is not in the snapshot.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(msg, details={"entity_type": entity_type, "entity_id": str(entity_id)})
        self.code = "ENTITY_NOT_FOUND"


class InsufficientStockException(ValidationException):
    """Raised when there's not enough stock for an operation."""

    def __init__(self, product_id: str, requested: int, available: int):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            "Insufficient stock",
            details={
                "product_id": product_id,
                "requested": requested,
                "available": available,
            },
        )
        self.code = "INSUFFICIENT_STOCK"


class InvalidOperationException(ValidationException):
    """Raised when an operation is not valid in the current state."""

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(msg, details={"operation": operation, "current_state": current_state})
        self.code = "INVALID_OPERATION"
