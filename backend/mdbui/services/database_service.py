"""
Database access service for browsing and editing a MongoDB server.
"""
import asyncio
import logging
from typing import Any, Awaitable, Optional, TypeVar

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import InvalidName, PyMongoError

from mdbui.core.errors import InvalidInputError, NotFoundError, UpstreamError
from mdbui.core.pagination import MAX_LIMIT
from mdbui.database.documents import format_document, to_object_id
from mdbui.models.connection import ConnectionProfile
from mdbui.models.database import DatabaseInfo, DatabaseStats, DocumentPage, ServerStats

logger = logging.getLogger(__name__)

T = TypeVar("T")

# MongoDB creates a database lazily with its first collection
PLACEHOLDER_COLLECTION = "init_collection"

SORT_NEWEST_FIRST = [("_id", -1)]


class DatabaseService:
    """
    Operations against one live MongoDB client.

    Every call gets its own timeout; driver errors and timeouts surface as
    UpstreamError with no retry. The client's own pool is shared by all
    concurrent requests.
    """

    def __init__(
        self,
        client: AsyncIOMotorClient,
        profile: Optional[ConnectionProfile] = None,
        timeout: float = 5.0,
        drop_timeout: float = 10.0,
        max_limit: int = MAX_LIMIT,
    ):
        """Bind to a connected client and the profile it was opened for."""
        self.client = client
        self.profile = profile
        self.timeout = timeout
        self.drop_timeout = drop_timeout
        self.max_limit = max_limit

    async def _call(self, awaitable: Awaitable[T], timeout: Optional[float] = None) -> T:
        """Await a driver call under the per-call timeout, wrapping failures."""
        try:
            return await asyncio.wait_for(awaitable, timeout or self.timeout)
        except asyncio.TimeoutError:
            logger.warning("MongoDB call timed out after %ss", timeout or self.timeout)
            raise UpstreamError("MongoDB operation timed out")
        except PyMongoError as exc:
            logger.warning("MongoDB call failed: %s", exc)
            raise UpstreamError(str(exc))

    def _database(self, name: str):
        try:
            return self.client[name]
        except InvalidName as exc:
            raise InvalidInputError(str(exc))

    def _collection(self, db_name: str, name: str):
        try:
            return self._database(db_name)[name]
        except InvalidName as exc:
            raise InvalidInputError(str(exc))

    # ==================== Databases ====================

    async def list_databases(self) -> list[str]:
        return await self._call(self.client.list_database_names())

    async def get_database(self, name: str) -> DatabaseInfo:
        """Get collection names and a best-effort dbStats snapshot."""
        db = self._database(name)
        collections = await self._call(db.list_collection_names())

        try:
            raw_stats = await self._call(db.command("dbStats"))
            stats = DatabaseStats.model_validate(raw_stats)
        except Exception as exc:
            logger.warning("dbStats failed for %s, using collection count only: %s", name, exc)
            stats = DatabaseStats(collections=len(collections))

        return DatabaseInfo(name=name, collections=collections, stats=stats)

    async def create_database(self, name: str) -> None:
        """Create a database by creating a placeholder collection inside it."""
        await self._call(self._database(name).create_collection(PLACEHOLDER_COLLECTION))

    async def drop_database(self, name: str) -> None:
        await self._call(self.client.drop_database(name), timeout=self.drop_timeout)

    # ==================== Collections ====================

    async def list_collections(self, db_name: str) -> list[str]:
        return await self._call(self._database(db_name).list_collection_names())

    async def create_collection(self, db_name: str, name: str) -> None:
        await self._call(self._database(db_name).create_collection(name))

    async def drop_collection(self, db_name: str, name: str) -> None:
        await self._call(self._database(db_name).drop_collection(name))

    # ==================== Documents ====================

    async def list_documents(
        self, db_name: str, collection: str, page: int = 1, limit: int = 20
    ) -> DocumentPage:
        """Get one page of a collection, newest identifiers first."""
        return await self.query_documents(db_name, collection, {}, page, limit)

    async def query_documents(
        self,
        db_name: str,
        collection: str,
        query: Optional[dict[str, Any]],
        page: int = 1,
        limit: int = 20,
    ) -> DocumentPage:
        """
        Get one page of documents matching a raw filter.

        The count and the find are separate calls, so ``total`` is not
        consistent with the returned rows under concurrent writes.
        """
        if page < 1:
            raise InvalidInputError("page must be at least 1")
        if limit < 1 or limit > self.max_limit:
            raise InvalidInputError(f"limit must be between 1 and {self.max_limit}")

        query = query or {}
        coll = self._collection(db_name, collection)
        skip = (page - 1) * limit

        total = await self._call(coll.count_documents(query))
        cursor = coll.find(query, sort=SORT_NEWEST_FIRST, skip=skip, limit=limit)
        documents = await self._call(cursor.to_list(length=limit))

        return DocumentPage(
            documents=[format_document(doc) for doc in documents],
            total=total,
            page=page,
            limit=limit,
        )

    async def get_document(self, db_name: str, collection: str, document_id: str) -> dict[str, Any]:
        object_id = to_object_id(document_id)
        document = await self._call(
            self._collection(db_name, collection).find_one({"_id": object_id})
        )
        if document is None:
            raise NotFoundError("document not found")
        return format_document(document)

    async def create_document(
        self, db_name: str, collection: str, document: dict[str, Any]
    ) -> str:
        """Insert a document and return its identifier as a string."""
        result = await self._call(self._collection(db_name, collection).insert_one(document))
        return str(result.inserted_id)

    async def update_document(
        self, db_name: str, collection: str, document_id: str, document: dict[str, Any]
    ) -> None:
        """Apply ``$set`` with the given fields; ``_id`` is immutable and ignored."""
        object_id = to_object_id(document_id)
        fields = {key: value for key, value in document.items() if key != "_id"}
        if not fields:
            raise InvalidInputError("update document has no fields")

        result = await self._call(
            self._collection(db_name, collection).update_one({"_id": object_id}, {"$set": fields})
        )
        if result.matched_count == 0:
            raise NotFoundError("document not found")

    async def delete_document(self, db_name: str, collection: str, document_id: str) -> None:
        object_id = to_object_id(document_id)
        result = await self._call(
            self._collection(db_name, collection).delete_one({"_id": object_id})
        )
        if result.deleted_count == 0:
            raise NotFoundError("document not found")

    # ==================== Server ====================

    async def get_server_stats(self) -> ServerStats:
        """Get serverStatus counters plus the number of databases."""
        status = await self._call(self.client.admin.command("serverStatus"))
        databases = await self._call(self.client.list_database_names())

        stats = ServerStats.model_validate(status)
        stats.database_count = len(databases)
        return stats
