"""
Unit tests for category_repositories.py using a real in-memory database.

These tests use an in-memory SQLite database for fast, reliable testing
without complex mocking of SQLAlchemy components.
"""

import re
from datetime import timedelta

import pytest
from sqlalchemy import create_engine
from sqlmodel import SQLModel, Session

from CategoryTree.exceptions import CategoryNotFoundError
from CategoryTree.models.category_models import CategoryModel, utc_now
from CategoryTree.repositories.category_repositories import CategoryRepository


class TestCategoryRepository:
    """Test cases for CategoryRepository using real database."""

    def setup_method(self):
        """Set up test database for each test."""
        self.engine = create_engine("sqlite:///:memory:", echo=False)
        SQLModel.metadata.create_all(self.engine)
        self.session = Session(self.engine)
        self.repo = CategoryRepository()

    def teardown_method(self):
        """Clean up after each test."""
        self.session.close()
        self.engine.dispose()

    def _add(self, name, parent=None, **extra):
        category = CategoryModel(
            name=name,
            parent_id=parent.id if parent else None,
            path=parent.child_path() if parent else [],
            **extra,
        )
        self.session.add(category)
        self.session.commit()
        self.session.refresh(category)
        return category

    def test_create_category_assigns_id_and_timestamps(self):
        """Test that a created category gets an opaque hex id and both timestamps."""
        result = self.repo.create_category(self.session, {"name": "Electronics", "parent_id": None, "path": []})

        assert re.fullmatch(r"[0-9a-f]{32}", result.id)
        assert result.name == "Electronics"
        assert result.parent_id is None
        assert result.path == []
        assert result.is_active is True
        assert result.created_at is not None
        assert result.updated_at is not None

    def test_timestamps_are_stored_as_naive_utc(self):
        """Test that naive UTC timestamps persist and reload without timezone conversion."""
        column_type = CategoryModel.__table__.c.created_at.type
        assert column_type.timezone is False

        created = self.repo.create_category(self.session, {"name": "Stamped", "path": []})
        self.session.commit()
        self.session.expire_all()
        reloaded = self.repo.get_category(self.session, created.id)

        assert reloaded.created_at.tzinfo is None
        assert reloaded.updated_at.tzinfo is None
        assert abs(utc_now() - reloaded.created_at) < timedelta(minutes=1)

    def test_create_category_is_visible_before_commit(self):
        """Test that repository writes are flushed into the current transaction."""
        created = self.repo.create_category(self.session, {"name": "Flushed", "path": []})

        assert self.repo.get_by_id(self.session, created.id) is not None

    def test_get_category_success(self):
        """Test successfully retrieving category by ID."""
        category = self._add("Phones")

        result = self.repo.get_category(self.session, category.id)

        assert result.id == category.id
        assert result.name == "Phones"

    def test_get_category_not_found(self):
        """Test CategoryNotFoundError when category not found by ID."""
        with pytest.raises(CategoryNotFoundError) as exc_info:
            self.repo.get_category(self.session, "nonexistent-id")

        assert "Category with ID nonexistent-id not found" in str(exc_info.value)
        assert exc_info.value.resource_id == "nonexistent-id"

    def test_get_parent_category_not_found_uses_label(self):
        with pytest.raises(CategoryNotFoundError) as exc_info:
            self.repo.get_category(self.session, "missing-parent", label="Parent category")

        assert "Parent category with ID missing-parent not found" in str(exc_info.value)

    def test_get_category_or_none_without_id(self):
        assert self.repo.get_category_or_none(self.session, None) is None
        assert self.repo.get_category_or_none(self.session, "") is None

    def test_path_round_trips_through_json_column(self):
        """Test that the materialized path is stored and reloaded as a list of ids."""
        root = self._add("Root")
        child = self._add("Child", parent=root)
        grandchild = self._add("Grandchild", parent=child)

        self.session.expire_all()
        reloaded = self.repo.get_category(self.session, grandchild.id)

        assert reloaded.path == [root.id, child.id]

    def test_save_category_persists_path_replacement(self):
        root = self._add("Root")
        other = self._add("Other")
        child = self._add("Child", parent=root)

        child.parent_id = other.id
        child.path = other.child_path()
        self.repo.save_category(self.session, child)
        self.session.commit()
        self.session.expire_all()

        assert self.repo.get_category(self.session, child.id).path == [other.id]

    def test_get_active_categories_excludes_inactive(self):
        active = self._add("Active")
        self._add("Inactive", is_active=False)

        result = self.repo.get_active_categories(self.session)

        assert [category.id for category in result] == [active.id]

    def test_get_active_categories_ordered_by_creation(self):
        now = utc_now()
        newer = self._add("Newer", created_at=now)
        older = self._add("Older", created_at=now - timedelta(minutes=5))

        result = self.repo.get_active_categories(self.session)

        assert [category.id for category in result] == [older.id, newer.id]

    def test_get_children_includes_inactive(self):
        """Test that direct children are returned regardless of isActive."""
        parent = self._add("Parent")
        active_child = self._add("Active Child", parent=parent)
        inactive_child = self._add("Inactive Child", parent=parent, is_active=False)
        self._add("Grandchild", parent=active_child)

        result = self.repo.get_children(self.session, parent.id)

        assert {category.id for category in result} == {active_child.id, inactive_child.id}

    def test_has_active_children(self):
        parent = self._add("Parent")
        assert self.repo.has_active_children(self.session, parent.id) is False

        child = self._add("Child", parent=parent, is_active=False)
        assert self.repo.has_active_children(self.session, parent.id) is False

        child.is_active = True
        self.repo.save_category(self.session, child)
        assert self.repo.has_active_children(self.session, parent.id) is True

    def test_delete_category(self):
        """Test that delete reports the number of removed rows."""
        category = self._add("Disposable")

        assert self.repo.delete_category(self.session, category.id) == 1
        assert self.repo.get_by_id(self.session, category.id) is None
        assert self.repo.delete_category(self.session, category.id) == 0

    def test_get_all_includes_inactive(self):
        self._add("One")
        self._add("Two", is_active=False)

        assert len(self.repo.get_all(self.session)) == 2
