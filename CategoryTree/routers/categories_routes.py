"""
Category API endpoints.

Mounted under /api/v1/category. Bodies are camelCase; errors are returned in
the ResponseSchema envelope by the registered exception handlers.
"""
from typing import List
import logging

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from CategoryTree.dependencies import get_category_service
from CategoryTree.schemas.category_schemas import (
    CategoryCreate,
    CategoryDeleteResponse,
    CategoryResponse,
    CategoryTreeNode,
    CategoryUpdate,
)
from CategoryTree.services.data.category_service import CategoryService

# BaseRouter infrastructure
from CategoryTree.routers.base import standard_error_handling, validate_service_response

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=CategoryResponse, status_code=201)
@standard_error_handling
async def create_category(
    category_data: CategoryCreate,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """
    Create a category. Without parentId it becomes a root category.

    Returns:
        CategoryResponse: The persisted category with its computed path
    """
    service_response = category_service.create_category(category_data)
    data = validate_service_response(service_response)
    return CategoryResponse.model_validate(data)


@router.get(
    "/tree",
    response_model=None,
    responses={200: {"model": List[CategoryTreeNode], "description": "Active categories as nested root nodes"}},
)
@standard_error_handling
async def get_category_tree(
    category_service: CategoryService = Depends(get_category_service),
) -> JSONResponse:
    """
    Get all active categories as nested root nodes.

    Nodes are serialized as built by the service, without re-validating
    the nested children against CategoryTreeNode.
    """
    service_response = category_service.get_category_tree()
    data = validate_service_response(service_response)
    return JSONResponse(content=jsonable_encoder(data))


@router.get("/{category_id}", response_model=CategoryResponse)
@standard_error_handling
async def get_category(
    category_id: str,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    service_response = category_service.get_category(category_id)
    data = validate_service_response(service_response)
    return CategoryResponse.model_validate(data)


@router.patch("/{category_id}", response_model=CategoryResponse)
@standard_error_handling
async def update_category(
    category_id: str,
    category_data: CategoryUpdate,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """
    Rename and/or reparent a category.

    Send "parentId": null to move the category to the root. Descendant paths
    are rewritten in the same transaction.
    """
    service_response = category_service.update_category(category_id, category_data)
    data = validate_service_response(service_response)
    return CategoryResponse.model_validate(data)


@router.delete("/permanent/{category_id}", response_model=CategoryDeleteResponse)
@standard_error_handling
async def permanent_remove_category(
    category_id: str,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryDeleteResponse:
    """
    Permanently delete a category. Refused while it has active children.
    """
    service_response = category_service.permanent_remove_category(category_id)
    data = validate_service_response(service_response)
    logger.info(f"Category {category_id} permanently deleted")
    return CategoryDeleteResponse.model_validate(data)


@router.delete("/{category_id}", response_model=CategoryResponse)
@standard_error_handling
async def remove_category(
    category_id: str,
    category_service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """
    Soft delete a category by marking it inactive. Refused while it has active children.
    """
    service_response = category_service.remove_category(category_id)
    data = validate_service_response(service_response)
    return CategoryResponse.model_validate(data)
