"""
Category Models Module

Contains CategoryModel, the single persisted entity of the catalog hierarchy.
Ancestry is stored twice: ``parent_id`` points at the immediate parent and
``path`` holds the materialized list of ancestor ids, root-most first.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field, Column, JSON


def utc_now() -> datetime:
    """Naive UTC timestamp, matching what SQLite hands back on refresh"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def new_category_id() -> str:
    return uuid.uuid4().hex


class CategoryModel(SQLModel, table=True):
    """
    Model for hierarchical product categories
    (e.g., Electronics > Phones > Smartphones).

    parent_id is a plain id reference rather than a foreign key: a hard-deleted
    parent may leave inactive children behind, and the hierarchy is navigated
    by id lookups only.
    """

    id: str = Field(default_factory=new_category_id, primary_key=True)
    name: str = Field(index=True)
    parent_id: Optional[str] = Field(default=None, index=True)
    path: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    is_active: bool = Field(default=True, index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime, nullable=False))

    def child_path(self) -> List[str]:
        """Path that every direct child of this category must carry"""
        return [*self.path, self.id]

    def to_dict(self) -> Dict[str, Any]:
        """Collaborator-facing record with camelCase keys"""
        return {
            "id": self.id,
            "name": self.name,
            "parentId": self.parent_id,
            "path": list(self.path or []),
            "isActive": self.is_active,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    def __repr__(self):
        return f"<CategoryModel(id={self.id}, name='{self.name}', parent_id={self.parent_id})>"
