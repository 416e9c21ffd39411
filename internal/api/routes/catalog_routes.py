"""
Portfolio Catalog API Routes.
"""

from typing import List

from fastapi import APIRouter, status

from core.logger import logger
from internal.api.schemas import MessageResponse, ProjectCreateRequest, ProjectResponse
from internal.api.utils import message_response, to_http_exception
from services.interfaces import ICatalogService


def create_catalog_routes(catalog_service: ICatalogService) -> APIRouter:
    """
    Factory function to create catalog routes with dependency injection.

    Args:
        catalog_service: Implementation of ICatalogService

    Returns:
        APIRouter: Configured router with all catalog endpoints
    """
    router = APIRouter(prefix="/catalog", tags=["Catalog"])

    @router.get(
        "/get-projects",
        response_model=List[ProjectResponse],
        response_model_exclude_none=True,
        summary="List Projects",
        responses={500: {"model": MessageResponse, "description": "Server error"}},
    )
    async def get_projects():
        try:
            projects = await catalog_service.list_projects()
            logger.info(f"API: Projects listed: count={len(projects)}")
            return [project.model_dump(by_alias=True) for project in projects]
        except Exception as e:
            raise to_http_exception(e, "fetching projects")

    @router.post(
        "/add-project",
        response_model=ProjectResponse,
        response_model_exclude_none=True,
        status_code=status.HTTP_201_CREATED,
        summary="Add Project",
        description="Create a portfolio catalog entry",
        responses={
            400: {"model": MessageResponse, "description": "Required fields missing"},
            500: {"model": MessageResponse, "description": "Server error"},
        },
    )
    async def add_project(request: ProjectCreateRequest):
        """
        Create a catalog entry.

        **Parameters:**
        - **name**: Project name (required)
        - **githubLink**: Repository URL (required)
        - **owner**: Project owner (required)
        - **reportLink**: Report URL (optional)
        - **mediaLink**: Media URL (optional)

        **Returns:**
        The stored entry with its generated `_id`.
        """
        try:
            logger.info(f"API: Add project request: name={request.name}")
            project = await catalog_service.add_project(
                name=request.name,
                github_link=request.github_link,
                owner=request.owner,
                report_link=request.report_link,
                media_link=request.media_link,
            )
            return project.model_dump(by_alias=True)
        except Exception as e:
            raise to_http_exception(e, "adding project")

    @router.delete(
        "/delete-project/{project_id}",
        response_model=MessageResponse,
        summary="Delete Project",
        responses={
            404: {"model": MessageResponse, "description": "Project not found"},
            500: {"model": MessageResponse, "description": "Server error"},
        },
    )
    async def delete_project(project_id: str):
        try:
            logger.info(f"API: Delete project request: id={project_id}")
            await catalog_service.delete_project(project_id)
            return message_response("Project deleted")
        except Exception as e:
            raise to_http_exception(e, "deleting project")

    return router
