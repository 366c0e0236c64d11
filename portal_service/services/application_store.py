"""
Application Store

Read/write operations against the job_applications collection.

Listing by applicant email enriches each application with display fields
from the job it references. The join is computed at read time and is
best-effort: an application whose job no longer exists (or whose job_id
cannot resolve) is returned unchanged.
"""

import logging
from typing import Any, Dict, List

from ..repositories import DocumentRepositoryInterface, WriteResult
from .errors import InvalidDocumentId
from .job_store import JobStore, parse_object_id

logger = logging.getLogger(__name__)

# Job fields copied onto each application when its job exists
ENRICHMENT_FIELDS = ("title", "company", "company_logo")


def enrich_applications(
    applications: List[Dict[str, Any]],
    jobs_by_id: Dict[str, Dict[str, Any]],
) -> List[Dict[str, Any]]:
    """
    Copy ENRICHMENT_FIELDS from each referenced job onto its application.

    Mutates and returns the given list. jobs_by_id is keyed by the canonical
    (lowercase hex) form of each job's _id; an application's job_id is
    normalized the same way before the lookup. Applications whose job_id is
    malformed or not in jobs_by_id are left untouched, and only fields the
    job actually has are copied.
    """
    for application in applications:
        try:
            job_key = str(parse_object_id(application.get("job_id")))
        except InvalidDocumentId:
            continue
        job = jobs_by_id.get(job_key)
        if job is None:
            continue
        for field_name in ENRICHMENT_FIELDS:
            if field_name in job:
                application[field_name] = job[field_name]
    return applications


class ApplicationStore:
    """Job applications plus the read-time join to their jobs."""

    def __init__(self, repository: DocumentRepositoryInterface, jobs: JobStore):
        self.repository = repository
        self.jobs = jobs

    def create(self, application: Dict[str, Any]) -> WriteResult:
        """Insert the application as-is."""
        result = self.repository.insert_one(application)
        logger.info(f"Created job application {result.inserted_id}")
        return result

    def list_by_email(self, email: str) -> List[Dict[str, Any]]:
        """
        Fetch an applicant's applications, enriched with job display fields.

        One query for the applications and one batched query for every job
        they reference. A job deleted between the two queries is a soft miss.
        """
        applications = self.repository.find({"applicant_email": email})
        if not applications:
            return applications

        jobs_by_id = self.jobs.get_many(app.get("job_id") for app in applications)
        enrich_applications(applications, jobs_by_id)

        missing = sum(1 for app in applications if "title" not in app and "company" not in app)
        if missing:
            logger.debug(f"{missing} application(s) left unenriched for {email}")
        return applications

    def delete_by_id(self, application_id: str) -> WriteResult:
        """
        Remove one application.

        Returns:
            WriteResult with deleted_count 0 when no application has this id

        Raises:
            InvalidDocumentId: If application_id is malformed
        """
        result = self.repository.delete_one({"_id": parse_object_id(application_id)})
        logger.info(f"Deleted job application {application_id} (count={result.deleted_count})")
        return result
