"""
API Routes.
"""

from .catalog_routes import create_catalog_routes
from .health_routes import create_health_routes
from .todo_routes import create_todo_routes

__all__ = [
    "create_catalog_routes",
    "create_health_routes",
    "create_todo_routes",
]
