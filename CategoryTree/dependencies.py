"""
FastAPI dependency functions for service injection.

This module provides dependency functions that create service instances
at request time, enabling proper dependency injection and testability.
"""

from typing import Generator

from fastapi import Depends
from sqlalchemy import Engine

from CategoryTree.models.models import engine as global_engine
from CategoryTree.services.data.category_service import CategoryService


def get_engine() -> Engine:
    """
    Get the database engine for the current request.

    This can be overridden in tests to provide a test engine.

    Returns:
        Engine: The SQLAlchemy engine instance
    """
    return global_engine


def get_category_service(engine: Engine = Depends(get_engine)) -> Generator[CategoryService, None, None]:
    """
    Get a CategoryService instance for the current request.

    Yields:
        CategoryService: A new CategoryService instance bound to the request's engine
    """
    yield CategoryService(engine_override=engine)
