"""Error envelope for the normalization steps.

An ErrorContext names the operation and, where known, the scheme, attributes and FD
literal involved. Failures are logged with that context and either re-raised as
OperationError or turned into a `{"success": False, "error": {...}}` response.
"""

from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field
from datetime import datetime
import logging
import traceback

from FDNORM.utils.logging import get_logger

logger = get_logger(__name__)

_LOG_LEVELS = {
    "critical": logging.CRITICAL,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

# Only the tail of a formatted traceback goes into a response
_TRACEBACK_TAIL = 500


@dataclass
class ErrorContext:
    """Where an FD operation failed."""
    operation: str
    scheme_name: Optional[str] = None
    attributes: List[str] = field(default_factory=list)
    fd: Optional[str] = None
    additional_context: Dict[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        parts = [f"Error in {self.operation}"]
        if self.scheme_name:
            parts.append(f"Scheme: {self.scheme_name}")
        if self.attributes:
            parts.append(f"Attributes: {', '.join(self.attributes)}")
        if self.fd:
            parts.append(f"FD: {self.fd}")
        return " | ".join(parts)

    def located_fields(self) -> Dict[str, Any]:
        """Optional fields that are set, keyed as they appear in an error response."""
        out: Dict[str, Any] = {}
        if self.scheme_name:
            out["scheme_name"] = self.scheme_name
        if self.attributes:
            out["attributes"] = list(self.attributes)
        if self.fd:
            out["fd"] = self.fd
        return out


@dataclass
class OperationError(Exception):
    """An FD operation failed inside a step; wraps the underlying FDError."""
    message: str
    context: ErrorContext
    original_exception: Optional[Exception] = None
    error_type: str = "operation_error"

    def __str__(self) -> str:
        return f"[{self.context.operation}] {self.message}"


def log_error_with_context(
    error: Exception,
    context: ErrorContext,
    level: str = "error"
) -> None:
    """Log `error` at `level` ("error", "warning" or "critical") prefixed by its context."""
    logger.log(_LOG_LEVELS.get(level, logging.ERROR), f"{context.describe()}: {error}", exc_info=True)
    if context.additional_context:
        logger.debug(f"Additional context: {context.additional_context}")


def create_error_response(
    error: Exception,
    context: ErrorContext,
) -> Dict[str, Any]:
    """
    Build the error response dict for a failed operation.

    Returns:
        {"success": False, "error": {type, message, operation, timestamp, ...}}.
        scheme_name/attributes/fd/additional_context appear only when set;
        traceback only when the error was raised.
    """
    payload: Dict[str, Any] = {
        "type": type(error).__name__,
        "message": str(error),
        "operation": context.operation,
        "timestamp": datetime.now().isoformat(),
    }
    payload.update(context.located_fields())

    if error.__traceback__ is not None:
        payload["traceback"] = "".join(traceback.format_tb(error.__traceback__))[-_TRACEBACK_TAIL:]

    if context.additional_context:
        payload["additional_context"] = context.additional_context

    return {"success": False, "error": payload}


def handle_operation_error(
    error: Exception,
    context: ErrorContext,
    log_level: str = "error",
    reraise: bool = False
) -> Dict[str, Any]:
    """
    Log `error` with its context, then either re-raise it or return an error response.

    Raises:
        OperationError: If reraise=True, chained from `error`
    """
    log_error_with_context(error, context, level=log_level)

    if reraise:
        raise OperationError(
            message=str(error),
            context=context,
            original_exception=error,
            error_type=type(error).__name__,
        ) from error

    return create_error_response(error, context)
