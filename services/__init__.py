"""
Service layer implementing the request-level logic.
Follows Service Layer Pattern and Single Responsibility Principle.
"""

from .catalog_service import CatalogService
from .todo_service import TodoService

__all__ = [
    "CatalogService",
    "TodoService",
]
