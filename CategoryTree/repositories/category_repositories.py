import logging
from typing import Any, Dict, List, Optional

from sqlmodel import Session, select

from CategoryTree.exceptions import CategoryNotFoundError
from CategoryTree.models.category_models import CategoryModel
from CategoryTree.repositories.base_repository import BaseRepository

# Configure logging
logger = logging.getLogger(__name__)


class CategoryRepository(BaseRepository[CategoryModel]):
    """
    Repository for category database operations.

    Only the repository issues SQL against the category table; the service
    owns the session and therefore the transaction boundary.
    """

    def __init__(self):
        super().__init__(CategoryModel)

    def get_category_or_none(self, session: Session, category_id: Optional[str]) -> Optional[CategoryModel]:
        if not category_id:
            return None
        return self.get_by_id(session, category_id)

    def get_category(self, session: Session, category_id: str, label: str = "Category") -> CategoryModel:
        """
        Get a category by ID.

        Args:
            session: The database session
            category_id: ID of the category to retrieve
            label: Name used in the error message ("Category" or "Parent category")

        Returns:
            CategoryModel: The category if found

        Raises:
            CategoryNotFoundError: If no category has this ID
        """
        category = self.get_category_or_none(session, category_id)
        if category is None:
            logger.debug(f"[REPO] {label} lookup failed - not found: {category_id}")
            raise CategoryNotFoundError(f"{label} with ID {category_id} not found", category_id=category_id)
        return category

    def create_category(self, session: Session, new_category: Dict[str, Any]) -> CategoryModel:
        """
        Insert a new category row.

        Args:
            session: The database session
            new_category: Column values; path must already be computed

        Returns:
            CategoryModel: The created category with its generated id and timestamps
        """
        logger.debug(f"[REPO] Creating category in database: {new_category.get('name')}")
        category = self.add(session, CategoryModel(**new_category))
        logger.debug(f"[REPO] Successfully created category in database: {category.name} (ID: {category.id})")
        return category

    @staticmethod
    def get_active_categories(session: Session) -> List[CategoryModel]:
        """All active categories, oldest first so sibling order is stable across backends"""
        statement = (
            select(CategoryModel)
            .where(CategoryModel.is_active == True)  # noqa: E712
            .order_by(CategoryModel.created_at, CategoryModel.id)
        )
        return list(session.exec(statement).all())

    @staticmethod
    def get_children(session: Session, parent_id: str) -> List[CategoryModel]:
        """Direct children of a category, active or not"""
        statement = (
            select(CategoryModel)
            .where(CategoryModel.parent_id == parent_id)
            .order_by(CategoryModel.created_at, CategoryModel.id)
        )
        return list(session.exec(statement).all())

    @staticmethod
    def has_active_children(session: Session, parent_id: str) -> bool:
        statement = (
            select(CategoryModel.id)
            .where(CategoryModel.parent_id == parent_id)
            .where(CategoryModel.is_active == True)  # noqa: E712
            .limit(1)
        )
        return session.exec(statement).first() is not None

    @staticmethod
    def save_category(session: Session, category: CategoryModel) -> CategoryModel:
        session.add(category)
        session.flush()
        session.refresh(category)
        return category

    def delete_category(self, session: Session, category_id: str) -> int:
        """
        Permanently delete a category row.

        Returns:
            int: Number of rows removed (0 when the id does not exist)
        """
        deleted = 1 if self.delete(session, category_id) else 0
        logger.debug(f"[REPO] Deleted {deleted} category row(s) for ID: {category_id}")
        return deleted
