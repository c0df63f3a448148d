"""
CategoryTree Exception Hierarchy

All domain errors raised by the category hierarchy manager live here so the
service layer, the routers and the registered exception handlers agree on a
single taxonomy.

Architecture:
- Base exception carrying a message, structured details and an error code
- Not-found and validation families mapped to 404 and 400 respectively
- Helpers for HTTP status mapping and consistent exception logging
"""

import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# Base Exception Classes
# =============================================================================


class CategoryTreeException(Exception):
    """Base exception for all CategoryTree-related errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.error_code = error_code

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {"error_code": self.error_code, "message": self.message, "details": self.details}


class ValidationError(CategoryTreeException):
    """Raised when a request is well-formed but violates a hierarchy rule."""

    def __init__(self, message: str, field_errors: Optional[Dict[str, str]] = None):
        super().__init__(message, error_code="VALIDATION_ERROR")
        self.field_errors = field_errors or {}

        if field_errors:
            self.details.update({"field_errors": field_errors})


class ResourceNotFoundError(CategoryTreeException):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str, resource_type: Optional[str] = None, resource_id: Optional[str] = None):
        super().__init__(message, error_code="RESOURCE_NOT_FOUND")
        self.resource_type = resource_type
        self.resource_id = resource_id

        if resource_type or resource_id:
            self.details.update({"resource_type": resource_type, "resource_id": resource_id})


# =============================================================================
# Category Exceptions
# =============================================================================


class CategoryNotFoundError(ResourceNotFoundError):
    """Raised when a category (or a referenced parent category) is not found."""

    def __init__(self, message: str, category_id: Optional[str] = None):
        super().__init__(message, resource_type="category", resource_id=category_id)


class CircularReferenceError(ValidationError):
    """Raised when a reparent would make a category its own ancestor."""

    def __init__(self, category_id: str, parent_id: str):
        super().__init__(
            "Cannot set a child as the parent (circular reference)",
            field_errors={"parentId": parent_id},
        )
        self.category_id = category_id
        self.parent_id = parent_id
        self.details.update({"category_id": category_id})


class ActiveChildrenError(ValidationError):
    """Raised when deleting a category that still has active children."""

    def __init__(self, category_id: str):
        super().__init__("Cannot delete a category that has active children")
        self.category_id = category_id
        self.details.update({"category_id": category_id})


# =============================================================================
# Exception Logging Helpers
# =============================================================================


def log_exception(exception: Exception, context: str = None, extra_info: Optional[Dict[str, Any]] = None):
    """
    Centralized exception logging with consistent format.

    Args:
        exception: The exception to log
        context: Additional context about where the exception occurred
        extra_info: Additional information to include in the log
    """
    if isinstance(exception, CategoryTreeException):
        log_data = {
            "error_code": exception.error_code,
            "error_message": exception.message,  # LogRecord reserves "message"
            "details": exception.details,
            "context": context,
        }

        if extra_info:
            log_data.update(extra_info)

        logger.warning(f"CategoryTree Error: {exception.message}", extra=log_data)
    else:
        log_data = {
            "exception_type": type(exception).__name__,
            "error_message": str(exception),
            "context": context,
        }

        if extra_info:
            log_data.update(extra_info)

        logger.error(f"Unexpected Error: {str(exception)}", extra=log_data)


def get_http_status_code(exception: Exception) -> int:
    """
    Get appropriate HTTP status code for an exception.

    This function provides a centralized mapping of exceptions to HTTP status codes
    for consistent API responses.
    """
    if isinstance(exception, ValidationError):
        return 400  # Bad Request
    elif isinstance(exception, ResourceNotFoundError):
        return 404  # Not Found
    elif isinstance(exception, CategoryTreeException):
        return 400  # Bad Request (default for application errors)
    else:
        return 500  # Internal Server Error (unexpected errors)
