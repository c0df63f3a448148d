# Router imports
from . import categories_routes

__all__ = ["categories_routes"]
