"""
Interface for Catalog Service.
Defines the contract that all catalog services must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from repositories.models import ProjectModel


class ICatalogService(ABC):
    """Interface for portfolio catalog operations."""

    @abstractmethod
    async def list_projects(self) -> List[ProjectModel]:
        """
        List every catalog entry.

        Returns:
            List[ProjectModel]: All entries, empty if there are none
        """
        pass

    @abstractmethod
    async def add_project(
        self,
        name: Optional[str],
        github_link: Optional[str],
        owner: Optional[str],
        report_link: Optional[str] = None,
        media_link: Optional[str] = None,
    ) -> ProjectModel:
        """
        Create a catalog entry.

        Returns:
            ProjectModel: Created entry with its generated id

        Raises:
            ValidationError: If name, github_link or owner is missing or empty
        """
        pass

    @abstractmethod
    async def delete_project(self, project_id: str) -> None:
        """
        Delete a catalog entry.

        Raises:
            NotFoundError: If no entry has this id
        """
        pass
