"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .base_repository import BaseRepository
from .project_repository import ProjectRepository
from .todo_repository import TodoRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
    "TodoRepository",
]
