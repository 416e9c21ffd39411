"""
Service for the portfolio catalog.
"""

from typing import List, Optional

from core.exceptions import NotFoundError, ValidationError
from core.logger import logger
from repositories.models import ProjectModel
from repositories.project_repository import ProjectRepository
from .interfaces import ICatalogService


class CatalogService(ICatalogService):
    """Service handling catalog entry operations."""

    def __init__(self, repository: Optional[ProjectRepository] = None):
        self.repository = repository or ProjectRepository()

    async def list_projects(self) -> List[ProjectModel]:
        projects = await self.repository.list_projects()
        logger.debug(f"Listed {len(projects)} projects")
        return projects

    async def add_project(
        self,
        name: Optional[str],
        github_link: Optional[str],
        owner: Optional[str],
        report_link: Optional[str] = None,
        media_link: Optional[str] = None,
    ) -> ProjectModel:
        if not name or not github_link or not owner:
            raise ValidationError("Required fields missing")

        project = ProjectModel(
            name=name,
            github_link=github_link,
            report_link=report_link,
            media_link=media_link,
            owner=owner,
        )
        return await self.repository.create_project(project)

    async def delete_project(self, project_id: str) -> None:
        deleted = await self.repository.delete_project(project_id)
        if not deleted:
            raise NotFoundError("Project not found")
        logger.info(f"Project deleted: id={project_id}")
