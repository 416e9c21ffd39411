"""
Project repository for the portfolio catalog collection.
"""

from typing import List, Optional

from core.database import MongoDB, get_database
from core.logger import logger
from repositories.base_repository import BaseRepository, CollectionProvider
from repositories.models import ProjectModel


def _projects_collection(database: MongoDB) -> CollectionProvider:
    async def provider():
        collections = await database.get_collections()
        return collections.projects

    return provider


class ProjectRepository(BaseRepository):
    """Repository for the projects collection."""

    def __init__(
        self,
        collection_provider: Optional[CollectionProvider] = None,
        database: Optional[MongoDB] = None,
    ):
        """
        Args:
            collection_provider: Coroutine function returning the collection
            database: Connection manager used when no provider is given
                (defaults to the process-wide one)
        """
        if collection_provider is None:
            collection_provider = _projects_collection(database or get_database())
        super().__init__(collection_provider, "projects")

    async def list_projects(self) -> List[ProjectModel]:
        documents = await self.find_all()
        return self.to_models(documents, ProjectModel)

    async def create_project(self, project: ProjectModel) -> ProjectModel:
        """
        Insert a catalog entry. Any id on the input is ignored.

        Returns:
            Copy of the entry carrying the generated id
        """
        inserted_id = await self.create(project.to_dict())
        created = project.model_copy(update={"id": str(inserted_id)})
        logger.info(f"Project created: id={created.id}, name={created.name}")
        return created

    async def delete_project(self, project_id: str) -> bool:
        return await self.delete_by_id(project_id)
