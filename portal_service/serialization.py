"""
BSON to JSON helpers.

MongoDB documents carry ObjectId values that FastAPI cannot encode;
these helpers render them as their 24-character hex strings.
"""

from typing import Any, Dict, List, Optional

from bson import ObjectId


def to_jsonable(value: Any) -> Any:
    """Recursively replace ObjectId values with strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Serialize one document; None passes through."""
    if document is None:
        return None
    return to_jsonable(document)


def serialize_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Serialize a list of documents."""
    return [to_jsonable(document) for document in documents]
