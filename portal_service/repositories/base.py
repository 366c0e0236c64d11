"""
Repository Interface Definitions

Defines the abstract interface for document collection operations.
Stores depend on this interface so tests and alternative backends can
swap the MongoDB implementation without changing consumer code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class WriteResult:
    """
    Result of a write operation.

    Attributes:
        acknowledged: Whether the server acknowledged the write
        inserted_id: String form of the new document's _id (inserts only)
        deleted_count: Number of documents removed (deletes only)
    """
    acknowledged: bool = True
    inserted_id: Optional[str] = None
    deleted_count: int = 0


class DocumentRepositoryInterface(ABC):
    """
    Abstract interface for a single document collection.

    Implementations:
    - AtlasRepository: MongoDB Atlas via PyMongo

    All methods follow fail-fast semantics: database errors propagate
    to the caller unchanged.
    """

    @abstractmethod
    def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Find a single document.

        Args:
            filter: MongoDB query filter (e.g., {"_id": ObjectId(...)})

        Returns:
            Document dict if found, None otherwise
        """
        pass

    @abstractmethod
    def find(self, filter: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Find all documents matching the filter, in storage order.

        Args:
            filter: MongoDB query filter ({} for every document)

        Returns:
            List of matching documents
        """
        pass

    @abstractmethod
    def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        """
        Insert a single document as given.

        Args:
            document: Document to insert

        Returns:
            WriteResult with inserted_id set to the new document's _id
        """
        pass

    @abstractmethod
    def delete_one(self, filter: Dict[str, Any]) -> WriteResult:
        """
        Delete a single document.

        Args:
            filter: MongoDB query filter

        Returns:
            WriteResult with deleted_count (0 when nothing matched)
        """
        pass

    @abstractmethod
    def ping(self) -> bool:
        """
        Check the backing store is reachable.

        Returns:
            True when reachable

        Raises:
            Exception: Backend-specific error when unreachable
        """
        pass
