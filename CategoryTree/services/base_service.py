"""
Base service abstraction for consistent database session management.

Every service operation runs inside one session: the session commits when the
operation returns and rolls back when any exception escapes, so a multi-row
change such as a reparent cascade is applied completely or not at all.
"""

import logging
from contextlib import contextmanager
from typing import Any, Optional, TypeVar, Generic
from abc import ABC

from sqlmodel import Session
from pydantic import BaseModel

from CategoryTree.models.models import engine
from CategoryTree.exceptions import log_exception

# Configure logging
logger = logging.getLogger(__name__)

T = TypeVar('T')


class ServiceResponse(BaseModel, Generic[T]):
    """Standardized response format for all service operations."""
    success: bool
    message: str
    data: Optional[T] = None

    @classmethod
    def success_response(cls, message: str, data: T = None) -> 'ServiceResponse[T]':
        """Create a success response."""
        return cls(success=True, message=message, data=data)


class BaseService(ABC):
    """
    Base service class providing centralized session management.

    Domain errors are not converted here; they propagate to the HTTP boundary
    after the session has been rolled back.

    Usage:
        class CategoryService(BaseService):
            def create_category(self, category_data):
                with self.get_session() as session:
                    # Your business logic here
                    return self.success_response("Category created", new_category)
    """

    def __init__(self, engine_override=None):
        """
        Initialize base service.

        Args:
            engine_override: Optional engine to use instead of global engine (for testing)
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.engine = engine_override if engine_override is not None else engine

    @contextmanager
    def get_session(self):
        """
        Context manager for synchronous database session management.

        Provides:
        - Automatic session creation and cleanup
        - Commit on success
        - Rollback on exceptions, which are re-raised unchanged

        Usage:
            with self.get_session() as session:
                result = repository.create(session, data)
                return result
        """
        session = Session(self.engine)
        try:
            self.logger.debug("Database session created")
            yield session
            session.commit()
            self.logger.debug("Database session committed successfully")
        except Exception as e:
            session.rollback()
            log_exception(e, context=f"{self.__class__.__name__} session rolled back")
            raise
        finally:
            session.close()
            self.logger.debug("Database session closed")

    def success_response(self, message: str, data: Any = None) -> ServiceResponse:
        """Create a standardized success response."""
        self.logger.info(f"Service operation successful: {message}")
        return ServiceResponse.success_response(message, data)

    def log_operation(self, operation: str, entity_type: str, entity_id: str = None):
        """
        Log service operations for debugging and audit purposes.

        Args:
            operation: The operation being performed (create, update, delete, etc.)
            entity_type: The type of entity being operated on
            entity_id: Optional ID of the entity
        """
        entity_info = f" (ID: {entity_id})" if entity_id else ""
        self.logger.info(f"Starting {operation} operation for {entity_type}{entity_info}")
