"""
Interface for Todo Service.
Defines the contract that all todo services must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from repositories.models import TodoModel


class ITodoService(ABC):
    """Interface for todo service operations."""

    @abstractmethod
    async def list_todos(self) -> List[TodoModel]:
        """
        List every todo.

        Returns:
            List[TodoModel]: All todos, empty if there are none
        """
        pass

    @abstractmethod
    async def add_todo(self, text: Optional[str]) -> TodoModel:
        """
        Create a todo that is not completed.

        Args:
            text: Todo text, required and non-empty

        Returns:
            TodoModel: Created todo with its generated id

        Raises:
            ValidationError: If text is missing or empty
        """
        pass

    @abstractmethod
    async def delete_todo(self, todo_id: str) -> None:
        """
        Delete a todo.

        Raises:
            NotFoundError: If no todo has this id
        """
        pass

    @abstractmethod
    async def toggle_todo(self, todo_id: str) -> bool:
        """
        Flip the completed flag of a todo.

        Returns:
            bool: The new completed value

        Raises:
            NotFoundError: If no todo has this id
        """
        pass
