"""
Atlas Document Repository

Wraps MongoDB Atlas collection access behind DocumentRepositoryInterface.
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.server_api import ServerApi

from .base import DocumentRepositoryInterface, WriteResult

logger = logging.getLogger(__name__)


class AtlasRepository(DocumentRepositoryInterface):
    """
    Repository for one collection of the Atlas database.

    Connection Management:
    - Uses a class-level MongoClient shared by every collection
    - Client is created on first use and reused across requests
    - PyMongo handles the connection pool internally

    Error Handling:
    - Fail-fast: All errors propagate to caller
    - No silent failures - the API layer converts them to responses
    """

    _client: Optional[MongoClient] = None

    def __init__(self, mongodb_uri: str, database: str, collection: str):
        """
        Initialize repository with connection parameters.

        Args:
            mongodb_uri: MongoDB connection string (Atlas SRV URI)
            database: Database name (e.g. "jobportal")
            collection: Collection name (e.g. "jobs")
        """
        self._mongodb_uri = mongodb_uri
        self._database_name = database
        self._collection_name = collection
        self._collection: Optional[Collection] = None

    @classmethod
    def _get_client(cls, mongodb_uri: str) -> MongoClient:
        """
        Get the shared MongoClient, creating it if needed.

        Pins the Stable API version so server upgrades cannot change
        command behavior underneath the service.
        """
        if cls._client is None:
            cls._client = MongoClient(
                mongodb_uri,
                server_api=ServerApi("1", strict=True, deprecation_errors=True),
            )
            logger.info("Atlas MongoClient created")
        return cls._client

    def _get_collection(self) -> Collection:
        """Get the MongoDB collection, creating the client if needed."""
        if self._collection is None:
            client = self._get_client(self._mongodb_uri)
            self._collection = client[self._database_name][self._collection_name]
            logger.info(
                f"Atlas repository connected: {self._database_name}.{self._collection_name}"
            )
        return self._collection

    @property
    def collection_name(self) -> str:
        return self._collection_name

    def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Find a single document."""
        collection = self._get_collection()
        return collection.find_one(filter)

    def find(self, filter: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Find multiple documents."""
        collection = self._get_collection()
        return list(collection.find(filter))

    def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        """Insert a single document."""
        collection = self._get_collection()
        result = collection.insert_one(document)

        return WriteResult(
            acknowledged=result.acknowledged,
            inserted_id=str(result.inserted_id) if result.inserted_id else None,
        )

    def delete_one(self, filter: Dict[str, Any]) -> WriteResult:
        """Delete a single document."""
        collection = self._get_collection()
        result = collection.delete_one(filter)

        return WriteResult(
            acknowledged=result.acknowledged,
            deleted_count=result.deleted_count,
        )

    def ping(self) -> bool:
        """
        Send a ping to confirm a successful connection.

        Raises:
            PyMongoError: If the server cannot be reached
        """
        client = self._get_client(self._mongodb_uri)
        client.admin.command("ping")
        return True

    @classmethod
    def reset_connection(cls) -> None:
        """
        Close and forget the shared client.

        Used on shutdown and in tests.
        """
        if cls._client:
            cls._client.close()
        cls._client = None
        logger.info("Atlas repository connection reset")
