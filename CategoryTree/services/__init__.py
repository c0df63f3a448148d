# Services package initialization

from .base_service import BaseService, ServiceResponse
from .data.category_service import CategoryService

__all__ = ["BaseService", "ServiceResponse", "CategoryService"]
