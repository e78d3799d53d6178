"""Standardized error handling utilities.

Provides the error taxonomy and consistent error handling patterns across the codebase.
"""

from .errors import (
    FDError,
    ShapeViolation,
    DomainRangeViolation,
)
from .handlers import (
    handle_operation_error,
    OperationError,
    ErrorContext,
    log_error_with_context,
    create_error_response,
)

__all__ = [
    "FDError",
    "ShapeViolation",
    "DomainRangeViolation",
    "handle_operation_error",
    "OperationError",
    "ErrorContext",
    "log_error_with_context",
    "create_error_response",
]
