"""
Main Test Configuration - Isolated Database Setup

Every test gets its own in-memory SQLite database so tests never touch the
application database configured through DATABASE_URL.
"""

import os

# Must be set before CategoryTree.models.models builds the global engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from CategoryTree.dependencies import get_engine
from CategoryTree.main import app
from CategoryTree.schemas.category_schemas import CategoryCreate
from CategoryTree.services.data.category_service import CategoryService


@pytest.fixture(name="test_engine")
def test_engine_fixture():
    """Create an in-memory engine shared by every session in the test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="test_session")
def test_session_fixture(test_engine):
    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="category_service")
def category_service_fixture(test_engine):
    return CategoryService(engine_override=test_engine)


@pytest.fixture(name="make_category")
def make_category_fixture(category_service):
    """Create a category through the service and return its record dict"""
    def _make(name, parent_id=None, **extra):
        payload = {"name": name, "parentId": parent_id, **extra}
        return category_service.create_category(CategoryCreate(**payload)).data
    return _make


@pytest.fixture(name="test_client")
def test_client_fixture(test_engine):
    """Create a test client whose services use the isolated test engine"""
    app.dependency_overrides[get_engine] = lambda: test_engine

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
