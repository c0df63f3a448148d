"""
Base router infrastructure for centralized error handling.

Domain exceptions pass through to the handler registered in
handlers/exception_handlers.py; anything else becomes an HTTPException here.
"""

import logging
from typing import Any, Callable
from functools import wraps

from fastapi import HTTPException

from CategoryTree.exceptions import CategoryTreeException

logger = logging.getLogger(__name__)



class BaseRouter:
    """
    Base class for all routers providing centralized error handling.

    This eliminates the need for repetitive try/catch blocks and ensures consistent
    error handling across all API endpoints.
    """

    @staticmethod
    def handle_exception(e: Exception) -> HTTPException:
        """
        Convert exceptions to appropriate HTTP exceptions with consistent error handling.

        Args:
            e: The exception to handle

        Returns:
            HTTPException with appropriate status code and detail
        """
        if isinstance(e, HTTPException):
            return e
        elif isinstance(e, ValueError):
            return HTTPException(status_code=400, detail=str(e))
        else:
            logger.error(f"Unexpected error: {str(e)}", exc_info=True)
            return HTTPException(status_code=500, detail="Internal server error")


def standard_error_handling(func: Callable) -> Callable:
    """
    Decorator that provides standardized error handling for route functions.

    Usage:
        @standard_error_handling
        async def my_route():
            # Your route logic here
            return result
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except CategoryTreeException:
            # Rendered with its details by the registered exception handler
            raise
        except Exception as e:
            raise BaseRouter.handle_exception(e)
    return wrapper


def validate_service_response(service_response) -> Any:
    """
    Validate service response and extract data or raise appropriate exception.

    Args:
        service_response: Service response object with success flag and data/message

    Returns:
        The data from successful service response

    Raises:
        HTTPException: If service response indicates failure
    """
    if not service_response.success:
        if "not found" in service_response.message.lower():
            raise HTTPException(status_code=404, detail=service_response.message)
        raise HTTPException(status_code=400, detail=service_response.message)

    return service_response.data
