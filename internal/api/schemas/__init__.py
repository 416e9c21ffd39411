"""
API Schemas (Request/Response Models).
"""

from .catalog_schemas import ProjectCreateRequest, ProjectResponse
from .common_schemas import HealthResponse, MessageResponse
from .todo_schemas import TodoCreateRequest, TodoResponse, TodoToggleResponse

__all__ = [
    # Common schemas
    "HealthResponse",
    "MessageResponse",
    # Todo schemas
    "TodoCreateRequest",
    "TodoResponse",
    "TodoToggleResponse",
    # Catalog schemas
    "ProjectCreateRequest",
    "ProjectResponse",
]
