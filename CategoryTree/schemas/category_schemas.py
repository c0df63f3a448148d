"""Request and response schemas for the category API.

Field names are snake_case in Python and camelCase on the wire; both spellings
are accepted on input.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    # An empty parentId means "no parent"
    if value is not None and not value.strip():
        return None
    return value


class CategoryCreate(CamelModel):
    name: StrictStr = Field(min_length=1)
    parent_id: Optional[StrictStr] = None
    is_active: Optional[StrictBool] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("parent_id")
    @classmethod
    def normalize_parent(cls, value: Optional[str]) -> Optional[str]:
        return _blank_to_none(value)


class CategoryUpdate(CamelModel):
    """Partial update; use model_fields_set to tell an omitted parentId from an explicit null"""
    name: Optional[StrictStr] = Field(default=None, min_length=1)
    parent_id: Optional[StrictStr] = None
    is_active: Optional[StrictBool] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("parent_id")
    @classmethod
    def normalize_parent(cls, value: Optional[str]) -> Optional[str]:
        return _blank_to_none(value)


class CategoryResponse(CamelModel):
    id: str
    name: str
    parent_id: Optional[str] = None
    path: List[str] = []
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


class CategoryTreeNode(CamelModel):
    id: str
    name: str
    children: List["CategoryTreeNode"] = []
    created_at: datetime
    updated_at: datetime


class DeleteOutcome(CamelModel):
    acknowledged: bool
    deleted_count: int


class CategoryDeleteResponse(CamelModel):
    message: str
    status_code: int
    response: DeleteOutcome


CategoryTreeNode.model_rebuild()
