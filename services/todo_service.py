"""
Service for todo items.
Validates input, maps missing documents to NotFoundError and implements toggle.
"""

from typing import List, Optional

from core.exceptions import NotFoundError, ValidationError
from core.logger import logger
from repositories.models import TodoModel
from repositories.todo_repository import TodoRepository
from .interfaces import ITodoService


class TodoService(ITodoService):
    """Service handling todo operations."""

    def __init__(self, repository: Optional[TodoRepository] = None):
        self.repository = repository or TodoRepository()

    async def list_todos(self) -> List[TodoModel]:
        todos = await self.repository.list_todos()
        logger.debug(f"Listed {len(todos)} todos")
        return todos

    async def add_todo(self, text: Optional[str]) -> TodoModel:
        if not text:
            raise ValidationError("Todo text is required")
        return await self.repository.create_todo(text)

    async def delete_todo(self, todo_id: str) -> None:
        deleted = await self.repository.delete_todo(todo_id)
        if not deleted:
            raise NotFoundError("Todo not found")
        logger.info(f"Todo deleted: id={todo_id}")

    async def toggle_todo(self, todo_id: str) -> bool:
        """
        Read the todo then write the negated flag.

        The read and the write are separate store calls, so two concurrent
        toggles of the same todo may both read the same value and one flip is lost.
        """
        todo = await self.repository.get_todo(todo_id)
        if todo is None:
            raise NotFoundError("Todo not found")

        completed = not todo.completed
        matched = await self.repository.set_completed(todo_id, completed)
        if not matched:
            # Deleted between the read and the write
            raise NotFoundError("Todo not found")

        logger.info(f"Todo toggled: id={todo_id}, completed={completed}")
        return completed
