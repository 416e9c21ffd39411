"""
Todo API Routes.
"""

from typing import List

from fastapi import APIRouter, status

from core.logger import logger
from internal.api.schemas import (
    MessageResponse,
    TodoCreateRequest,
    TodoResponse,
    TodoToggleResponse,
)
from internal.api.utils import message_response, to_http_exception
from services.interfaces import ITodoService


def create_todo_routes(todo_service: ITodoService) -> APIRouter:
    """
    Factory function to create todo routes with dependency injection.

    Args:
        todo_service: Implementation of ITodoService

    Returns:
        APIRouter: Configured router with all todo endpoints
    """
    router = APIRouter(prefix="/todo", tags=["Todos"])

    @router.get(
        "/get-todos",
        response_model=List[TodoResponse],
        summary="List Todos",
        description="Return every todo in storage order",
        responses={500: {"model": MessageResponse, "description": "Server error"}},
    )
    async def get_todos():
        try:
            todos = await todo_service.list_todos()
            logger.info(f"API: Todos listed: count={len(todos)}")
            return [todo.model_dump(by_alias=True) for todo in todos]
        except Exception as e:
            raise to_http_exception(e, "fetching todos")

    @router.post(
        "/add-todo",
        response_model=TodoResponse,
        status_code=status.HTTP_201_CREATED,
        summary="Add Todo",
        description="Create a todo that is not completed",
        responses={
            400: {"model": MessageResponse, "description": "Todo text is required"},
            500: {"model": MessageResponse, "description": "Server error"},
        },
    )
    async def add_todo(request: TodoCreateRequest):
        """
        Create a todo.

        **Parameters:**
        - **text**: Todo text (required, non-empty)

        **Returns:**
        The created todo with its generated `_id` and `completed: false`.
        """
        try:
            logger.info("API: Add todo request received")
            todo = await todo_service.add_todo(request.text)
            return todo.model_dump(by_alias=True)
        except Exception as e:
            raise to_http_exception(e, "adding todo")

    @router.delete(
        "/delete-todo/{todo_id}",
        response_model=MessageResponse,
        summary="Delete Todo",
        responses={
            404: {"model": MessageResponse, "description": "Todo not found"},
            500: {"model": MessageResponse, "description": "Server error"},
        },
    )
    async def delete_todo(todo_id: str):
        try:
            logger.info(f"API: Delete todo request: id={todo_id}")
            await todo_service.delete_todo(todo_id)
            return message_response("Todo deleted")
        except Exception as e:
            raise to_http_exception(e, "deleting todo")

    @router.post(
        "/toggle-todo/{todo_id}",
        response_model=TodoToggleResponse,
        summary="Toggle Todo",
        description="Flip the completed flag of a todo",
        responses={
            404: {"model": MessageResponse, "description": "Todo not found"},
            500: {"model": MessageResponse, "description": "Server error"},
        },
    )
    async def toggle_todo(todo_id: str):
        """
        Toggle a todo's completion status.

        The flag is read and then written in two separate store calls;
        concurrent toggles of the same todo can lose one flip.
        """
        try:
            logger.info(f"API: Toggle todo request: id={todo_id}")
            completed = await todo_service.toggle_todo(todo_id)
            return {"message": "Todo status toggled", "completed": completed}
        except Exception as e:
            raise to_http_exception(e, "toggling todo status")

    return router
