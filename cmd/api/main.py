"""
FastAPI Service - Main entry point for the Todo & Catalog API.
- Routes are separated into modules
- MongoDB for persistence, connected lazily on first request
- Every error is rendered as {"message": ...}
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status as http_status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import get_settings
from core.database import MongoDB, get_database
from core.exceptions import AppError
from core.logger import logger
from internal.api.routes import (
    create_catalog_routes,
    create_health_routes,
    create_todo_routes,
)
from internal.api.utils import SERVER_ERROR_MESSAGE, message_response
from repositories import ProjectRepository, TodoRepository
from services import CatalogService, TodoService
from services.interfaces import ICatalogService, ITodoService


def _build_lifespan(database: MongoDB):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifespan - startup and shutdown.
        MongoDB is not contacted at startup; the first request connects.
        """
        settings = get_settings()
        logger.info(
            f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
        )
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"API: {settings.api_host}:{settings.api_port}")

        yield

        logger.info("========== Shutting down API service ==========")
        try:
            await database.disconnect()
        except Exception as e:
            logger.error(f"Error disconnecting from MongoDB: {e}")
            logger.exception("MongoDB disconnect error details:")
        logger.info("========== API service stopped ==========")

    return lifespan


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        """Malformed or missing JSON bodies are client errors (400)."""
        errors = exc.errors()
        error_msg = "; ".join(f"{e['loc'][-1]}: {e['msg']}" for e in errors)
        logger.warning(f"Validation error on {request.url.path}: {error_msg}")
        return JSONResponse(
            status_code=http_status.HTTP_400_BAD_REQUEST,
            content=message_response(f"Validation error: {error_msg}"),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=message_response(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        message = exc.message if exc.status_code < 500 else SERVER_ERROR_MESSAGE
        logger.error(f"Unhandled application error on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code, content=message_response(message)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}")
        logger.exception("Exception details:")
        return JSONResponse(
            status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=message_response(SERVER_ERROR_MESSAGE),
        )


def create_app(
    database: Optional[MongoDB] = None,
    todo_service: Optional[ITodoService] = None,
    catalog_service: Optional[ICatalogService] = None,
) -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Args:
        database: Connection manager (defaults to the process-wide one)
        todo_service: Todo service (defaults to one backed by `database`)
        catalog_service: Catalog service (defaults to one backed by `database`)

    Returns:
        FastAPI: Configured application instance
    """
    logger.info("Creating FastAPI application...")
    settings = get_settings()
    database = database or get_database()

    tags_metadata = [
        {"name": "Todos", "description": "Create, list, delete and toggle todo items."},
        {"name": "Catalog", "description": "Create, list and delete portfolio projects."},
        {"name": "Health", "description": "Service and MongoDB health."},
    ]

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="CRUD API over a todo list and a portfolio project catalog.",
        lifespan=_build_lifespan(database),
        openapi_tags=tags_metadata,
    )

    logger.debug("Adding CORS middleware...")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    todo_service = todo_service or TodoService(TodoRepository(database=database))
    app.include_router(create_todo_routes(todo_service))
    logger.info("Todo routes registered")

    catalog_service = catalog_service or CatalogService(
        ProjectRepository(database=database)
    )
    app.include_router(create_catalog_routes(catalog_service))
    logger.info("Catalog routes registered")

    app.include_router(create_health_routes(database))
    logger.info("Health routes registered")

    logger.info("FastAPI application created successfully")
    return app


# Create application instance
app = create_app()


# Run with: python cmd/api/main.py (after `pip install -e .`)
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    logger.info("========== Starting Uvicorn Server ==========")
    logger.info(f"Host: {settings.api_host}")
    logger.info(f"Port: {settings.api_port}")

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="debug" if settings.debug else "info",
    )
