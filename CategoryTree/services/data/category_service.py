import logging
from typing import Any, Dict, List, Optional

from sqlmodel import Session

from CategoryTree.exceptions import (
    ActiveChildrenError,
    CategoryNotFoundError,
    CircularReferenceError,
    ValidationError,
)
from CategoryTree.models.category_models import CategoryModel, utc_now
from CategoryTree.repositories.category_repositories import CategoryRepository
from CategoryTree.schemas.category_schemas import CategoryCreate, CategoryUpdate
from CategoryTree.services.base_service import BaseService, ServiceResponse

logger = logging.getLogger(__name__)


class CategoryService(BaseService):
    """
    Category hierarchy manager.

    Every category stores its materialized ancestor path (root-most first).
    The service is the only writer of that path: it derives it on create,
    rewrites it for a reparented category and all of its descendants, and
    refuses reparents that would introduce a cycle.
    """

    def __init__(self, engine_override=None):
        super().__init__(engine_override)
        self.category_repo = CategoryRepository()
        self.entity_name = "Category"

    def create_category(self, category_data: CategoryCreate) -> ServiceResponse[dict]:
        """
        Create a root category, or a child when parent_id is given.

        Raises:
            CategoryNotFoundError: If the requested parent does not exist
        """
        self.log_operation("create", self.entity_name, category_data.name)

        with self.get_session() as session:
            path: List[str] = []
            if category_data.parent_id:
                parent = self.category_repo.get_category(
                    session, category_data.parent_id, label="Parent category"
                )
                path = parent.child_path()

            values: Dict[str, Any] = {
                "name": category_data.name,
                "parent_id": category_data.parent_id or None,
                "path": path,
            }
            if category_data.is_active is not None:
                values["is_active"] = category_data.is_active

            new_category = self.category_repo.create_category(session, values)

            return self.success_response(
                f"{self.entity_name} '{new_category.name}' created successfully",
                new_category.to_dict(),
            )

    def get_category(self, category_id: str) -> ServiceResponse[dict]:
        self.log_operation("get", self.entity_name, category_id)

        with self.get_session() as session:
            category = self.category_repo.get_category(session, category_id)
            return self.success_response(
                f"{self.entity_name} '{category.name}' retrieved successfully",
                category.to_dict(),
            )

    def get_category_tree(self) -> ServiceResponse[List[dict]]:
        """
        Build the tree of active categories.

        A category whose parent is inactive or missing is returned as a root
        alongside the true roots. Siblings keep creation order.
        """
        self.log_operation("get_tree", self.entity_name)

        with self.get_session() as session:
            categories = self.category_repo.get_active_categories(session)

            nodes: Dict[str, Dict[str, Any]] = {
                category.id: {
                    "id": category.id,
                    "name": category.name,
                    "children": [],
                    "createdAt": category.created_at,
                    "updatedAt": category.updated_at,
                }
                for category in categories
            }

            roots: List[Dict[str, Any]] = []
            for category in categories:
                node = nodes[category.id]
                parent_node = nodes.get(category.parent_id) if category.parent_id else None
                if parent_node is not None:
                    parent_node["children"].append(node)
                else:
                    if category.parent_id:
                        logger.debug(
                            f"Promoting category {category.id} to root: parent {category.parent_id} is not active"
                        )
                    roots.append(node)

            return self.success_response(
                f"Category tree retrieved with {len(roots)} root(s) and {len(categories)} active categories",
                roots,
            )

    def update_category(self, category_id: str, category_update: CategoryUpdate) -> ServiceResponse[dict]:
        """
        Rename and/or reparent a category.

        A reparent happens only when parentId is present in the request and
        differs from the stored parent; an explicit null detaches the category
        to the root. The new path is cascaded to every descendant in the same
        transaction. isActive is accepted but not applied; use the delete
        endpoints to deactivate.

        Raises:
            CategoryNotFoundError: If the category or the new parent does not exist
            CircularReferenceError: If the new parent is the category itself or one of its descendants
        """
        self.log_operation("update", self.entity_name, category_id)
        fields_set = category_update.model_fields_set

        with self.get_session() as session:
            category = self.category_repo.get_category(session, category_id)

            new_parent_id: Optional[str] = category_update.parent_id
            if "parent_id" in fields_set and new_parent_id != category.parent_id:
                self._reparent(session, category, new_parent_id)

            if category_update.name is not None:
                category.name = category_update.name

            if "is_active" in fields_set:
                self.logger.info(
                    f"Ignoring isActive={category_update.is_active} on update of {self.entity_name} {category_id}"
                )

            category.updated_at = utc_now()
            category = self.category_repo.save_category(session, category)

            return self.success_response(
                f"{self.entity_name} '{category.name}' updated successfully",
                category.to_dict(),
            )

    def _reparent(self, session: Session, category: CategoryModel, new_parent_id: Optional[str]) -> None:
        if new_parent_id:
            parent = self.category_repo.get_category(session, new_parent_id, label="Parent category")
            if parent.id == category.id or category.id in (parent.path or []):
                raise CircularReferenceError(category.id, parent.id)
            new_path = parent.child_path()
        else:
            new_path = []

        self.logger.info(
            f"Moving {self.entity_name} {category.id} from parent {category.parent_id} to {new_parent_id}"
        )
        category.parent_id = new_parent_id
        category.path = new_path
        self.category_repo.save_category(session, category)

        updated = self.update_children_paths(session, category.id)
        if updated:
            self.logger.info(f"Rewrote path of {updated} descendant(s) of {self.entity_name} {category.id}")

    def update_children_paths(self, session: Session, parent_id: str) -> int:
        """
        Recompute the path of every descendant of parent_id, depth first.

        Children are matched regardless of isActive. Returns the number of
        descendants rewritten.

        Raises:
            CategoryNotFoundError: If parent_id does not exist
            ValidationError: If the stored hierarchy already contains a cycle
        """
        root = self.category_repo.get_category(session, parent_id)
        visited = {root.id}
        stack = [root]
        updated = 0

        while stack:
            parent = stack.pop()
            for child in self.category_repo.get_children(session, parent.id):
                if child.id in visited:
                    raise ValidationError(
                        f"Category hierarchy contains a cycle at ID {child.id}",
                        field_errors={"parentId": parent.id},
                    )
                visited.add(child.id)

                child.path = parent.child_path()
                self.category_repo.save_category(session, child)
                logger.debug(f"Updated path of category {child.id} to {child.path}")
                updated += 1
                stack.append(child)

        return updated

    def remove_category(self, category_id: str) -> ServiceResponse[dict]:
        """
        Soft delete: mark the category inactive.

        Raises:
            ActiveChildrenError: If any active category has this one as parent
            CategoryNotFoundError: If the category does not exist
        """
        self.log_operation("delete", self.entity_name, category_id)

        with self.get_session() as session:
            if self.category_repo.has_active_children(session, category_id):
                raise ActiveChildrenError(category_id)

            category = self.category_repo.get_category(session, category_id)
            category.is_active = False
            category.updated_at = utc_now()
            category = self.category_repo.save_category(session, category)

            return self.success_response(
                f"{self.entity_name} '{category.name}' deactivated successfully",
                category.to_dict(),
            )

    def permanent_remove_category(self, category_id: str) -> ServiceResponse[dict]:
        """
        Hard delete: remove the category row.

        Inactive children are left in place with a dangling parent_id.

        Raises:
            ActiveChildrenError: If any active category has this one as parent
            CategoryNotFoundError: If the category does not exist
        """
        self.log_operation("permanent_delete", self.entity_name, category_id)

        with self.get_session() as session:
            if self.category_repo.has_active_children(session, category_id):
                raise ActiveChildrenError(category_id)

            deleted_count = self.category_repo.delete_category(session, category_id)
            if deleted_count == 0:
                raise CategoryNotFoundError(
                    f"{self.entity_name} with ID {category_id} not found", category_id=category_id
                )

            message = f"category deleted successfully for ID: {category_id}"
            return self.success_response(
                message,
                {
                    "message": message,
                    "statusCode": 200,
                    "response": {"acknowledged": True, "deletedCount": deleted_count},
                },
            )
