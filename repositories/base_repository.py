"""
Base repository with common CRUD operations.
Follows Single Responsibility Principle - only handles data access.
"""

from abc import ABC
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type, TypeVar

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError as ModelValidationError
from pymongo.errors import PyMongoError

from core.exceptions import StoreError
from core.logger import logger
from repositories.models import DocumentModel
from repositories.objectid_utils import is_valid_objectid, str_to_objectid

CollectionProvider = Callable[[], Awaitable[AsyncIOMotorCollection]]
ModelT = TypeVar("ModelT", bound=DocumentModel)


class BaseRepository(ABC):
    """
    Base repository providing common CRUD operations.
    Every method issues exactly one call against the collection.
    """

    def __init__(self, collection_provider: CollectionProvider, collection_name: str):
        """
        Initialize repository.

        Args:
            collection_provider: Coroutine function returning the Motor collection
            collection_name: Name used in log messages
        """
        self.collection_provider = collection_provider
        self.collection_name = collection_name

    def _parse_id(self, document_id: str) -> Optional[ObjectId]:
        if not is_valid_objectid(document_id):
            logger.warning(f"Malformed id for {self.collection_name}: {document_id}")
            return None
        return str_to_objectid(document_id)

    def to_models(
        self, documents: List[Dict[str, Any]], model: Type[ModelT]
    ) -> List[ModelT]:
        """
        Map stored documents to models, skipping any that do not fit the model.
        Documents written outside this service may have missing or wrong-typed fields.
        """
        models = []
        for document in documents:
            try:
                models.append(model.from_dict(document))
            except ModelValidationError as e:
                logger.warning(
                    f"Skipping malformed document in {self.collection_name}: "
                    f"_id={document.get('_id')}, errors={e.error_count()}"
                )
        return models

    async def get_collection(self) -> AsyncIOMotorCollection:
        """Get MongoDB collection (connects lazily on first use)."""
        return await self.collection_provider()

    async def create(self, document: Dict[str, Any]) -> Any:
        """
        Create a new document.

        Args:
            document: Document data

        Returns:
            The `_id` generated by MongoDB
        """
        collection = await self.get_collection()
        try:
            result = await collection.insert_one(document)
            logger.debug(
                f"Created document in {self.collection_name}: {result.inserted_id}"
            )
            return result.inserted_id
        except PyMongoError as e:
            logger.error(f"Error creating document in {self.collection_name}: {e}")
            raise StoreError(str(e)) from e

    async def find_all(self) -> List[Dict[str, Any]]:
        """
        Find all documents, in the store's natural order.

        Returns:
            List of documents (empty if the collection is empty)
        """
        collection = await self.get_collection()
        try:
            documents = await collection.find({}).to_list(length=None)
            logger.debug(f"Found {len(documents)} documents in {self.collection_name}")
            return documents
        except PyMongoError as e:
            logger.error(f"Error finding documents in {self.collection_name}: {e}")
            raise StoreError(str(e)) from e

    async def find_by_id(self, document_id: str) -> Optional[Dict[str, Any]]:
        """
        Find document by ID.

        Returns:
            Document if found, None if missing or the ID is malformed
        """
        oid = self._parse_id(document_id)
        if oid is None:
            return None

        collection = await self.get_collection()
        try:
            return await collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.error(f"Error finding document by ID in {self.collection_name}: {e}")
            raise StoreError(str(e)) from e

    async def update_by_id(self, document_id: str, update_data: Dict[str, Any]) -> bool:
        """
        Update document by ID with `$set`.

        Returns:
            True if a document matched, False otherwise
        """
        oid = self._parse_id(document_id)
        if oid is None:
            return False

        collection = await self.get_collection()
        try:
            result = await collection.update_one({"_id": oid}, {"$set": update_data})
            logger.debug(f"Updated document in {self.collection_name}: {document_id}")
            return result.matched_count > 0
        except PyMongoError as e:
            logger.error(f"Error updating document in {self.collection_name}: {e}")
            raise StoreError(str(e)) from e

    async def delete_by_id(self, document_id: str) -> bool:
        """
        Delete document by ID.

        Returns:
            True if deleted, False if missing or the ID is malformed
        """
        oid = self._parse_id(document_id)
        if oid is None:
            return False

        collection = await self.get_collection()
        try:
            result = await collection.delete_one({"_id": oid})
            logger.debug(f"Deleted document in {self.collection_name}: {document_id}")
            return result.deleted_count > 0
        except PyMongoError as e:
            logger.error(f"Error deleting document in {self.collection_name}: {e}")
            raise StoreError(str(e)) from e
