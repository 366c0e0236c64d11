"""
Job Store

Thin read/write operations against the jobs collection.

Usage:
    store = JobStore(get_job_repository())
    result = store.create({"title": "Data Engineer", "hr_email": "hr@acme.io"})
    job = store.get_by_id(result.inserted_id)
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId
from bson.errors import InvalidId

from ..repositories import DocumentRepositoryInterface, WriteResult
from .errors import InvalidDocumentId

logger = logging.getLogger(__name__)


def parse_object_id(value: str) -> ObjectId:
    """
    Convert a path identifier into an ObjectId.

    Raises:
        InvalidDocumentId: If value is not a 24-char hex string or 12-byte id
    """
    # ObjectId(None) would mint a fresh id instead of failing
    if value is None:
        raise InvalidDocumentId(value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidDocumentId(value)


class JobStore:
    """Job postings, inserted as submitted and read back unchanged."""

    def __init__(self, repository: DocumentRepositoryInterface):
        self.repository = repository

    def create(self, job: Dict[str, Any]) -> WriteResult:
        """Insert the job as-is. The result carries the generated id."""
        result = self.repository.insert_one(job)
        logger.info(f"Created job {result.inserted_id}")
        return result

    def list(self, hr_email: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List jobs, optionally only those posted by one HR email.

        No pagination and no sort beyond storage order.
        """
        query: Dict[str, Any] = {}
        if hr_email:
            query = {"hr_email": hr_email}
        return self.repository.find(query)

    def get_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        """
        Look up a single job.

        Returns:
            The job document, or None when no job has this id

        Raises:
            InvalidDocumentId: If job_id is malformed
        """
        return self.repository.find_one({"_id": parse_object_id(job_id)})

    def get_many(self, job_ids: Iterable[Any]) -> Dict[str, Dict[str, Any]]:
        """
        Batch lookup keyed by the string form of each job's _id.

        Malformed ids are skipped; ids with no stored job are simply absent
        from the result.
        """
        object_ids = []
        for job_id in job_ids:
            if job_id is None:
                continue
            try:
                object_ids.append(parse_object_id(str(job_id)))
            except InvalidDocumentId:
                logger.debug(f"Skipping malformed job id {job_id!r}")

        if not object_ids:
            return {}

        jobs = self.repository.find({"_id": {"$in": list(set(object_ids))}})
        return {str(job["_id"]): job for job in jobs}
