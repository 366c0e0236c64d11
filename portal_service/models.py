"""
Shared Pydantic models for the portal service.

Job and application documents are schemaless and pass through as plain
dicts; these models cover the request and response envelopes.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .repositories import WriteResult


class TokenRequest(BaseModel):
    """
    Identity payload submitted to POST /jwt.

    Signed as given: extra claims are kept and email is not enforced here.
    A token without an email claim fails the email policy check with 403.
    """

    model_config = ConfigDict(extra="allow")

    email: Optional[str] = Field(None, description="Identity email embedded in the token")


class SuccessResponse(BaseModel):
    """Acknowledgement for cookie issue/clear."""

    success: bool = True


class InsertResponse(BaseModel):
    """Insert acknowledgement in MongoDB driver shape."""

    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    inserted_id: Optional[str] = Field(None, alias="insertedId")

    @classmethod
    def from_result(cls, result: WriteResult) -> "InsertResponse":
        return cls(acknowledged=result.acknowledged, inserted_id=result.inserted_id)


class DeleteResponse(BaseModel):
    """Delete acknowledgement in MongoDB driver shape."""

    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int = Field(0, alias="deletedCount")

    @classmethod
    def from_result(cls, result: WriteResult) -> "DeleteResponse":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str
    timestamp: datetime
    database_error: Optional[str] = None
