"""
Todo repository for MongoDB operations.
"""

from typing import List, Optional

from core.database import MongoDB, get_database
from core.logger import logger
from repositories.base_repository import BaseRepository, CollectionProvider
from repositories.models import TodoModel


def _todos_collection(database: MongoDB) -> CollectionProvider:
    async def provider():
        collections = await database.get_collections()
        return collections.todos

    return provider


class TodoRepository(BaseRepository):
    """Repository for the todos collection."""

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
            collection_provider = _todos_collection(database or get_database())
        super().__init__(collection_provider, "todos")

    async def list_todos(self) -> List[TodoModel]:
        documents = await self.find_all()
        return self.to_models(documents, TodoModel)

    async def create_todo(self, text: str) -> TodoModel:
        """
        Insert a new, not completed todo.

        Returns:
            Created TodoModel including the generated id
        """
        todo = TodoModel(text=text, completed=False)
        inserted_id = await self.create(todo.to_dict())
        todo.id = str(inserted_id)
        logger.info(f"Todo created: id={todo.id}")
        return todo

    async def get_todo(self, todo_id: str) -> Optional[TodoModel]:
        document = await self.find_by_id(todo_id)
        if document is None:
            return None
        return TodoModel.from_dict(document)

    async def set_completed(self, todo_id: str, completed: bool) -> bool:
        return await self.update_by_id(todo_id, {"completed": completed})

    async def delete_todo(self, todo_id: str) -> bool:
        return await self.delete_by_id(todo_id)
