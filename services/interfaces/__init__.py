"""
Service Interfaces.
"""

from .catalog_service_interface import ICatalogService
from .todo_service_interface import ITodoService

__all__ = [
    "ICatalogService",
    "ITodoService",
]
