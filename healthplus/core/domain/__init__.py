"""
Domain Layer - Core building blocks

This module provides the pieces shared by every portal entity:
- Exceptions: Workflow validation errors
- Value Objects: Status enums
- Collections: Lookup and merge-by-id over immutable entity tuples
"""

from healthplus.core.domain.collections import (
    append,
    find_by_id,
    merge_fields,
    prepend,
    update_by_id,
)
from healthplus.core.domain.exceptions import (
    DomainException,
    EntityNotFoundException,
    InsufficientStockException,
    InvalidOperationException,
    ValidationException,
)
from healthplus.core.domain.value_objects import StatusEnum

__all__ = [
    # Collections
    "append",
    "prepend",
    "find_by_id",
    "update_by_id",
    "merge_fields",
    # Value Objects
    "StatusEnum",
    # Exceptions
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "InsufficientStockException",
    "InvalidOperationException",
]
