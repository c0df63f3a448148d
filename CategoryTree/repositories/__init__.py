from .base_repository import BaseRepository
from .category_repositories import CategoryRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
]
