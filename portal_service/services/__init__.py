"""
Store layer for the portal service.

Each store wraps one collection repository and exposes the operations
the HTTP routes need. The get_* providers are FastAPI dependencies so
tests can swap stores through app.dependency_overrides.
"""

from ..repositories import get_application_repository, get_job_repository
from .application_store import ApplicationStore, enrich_applications, ENRICHMENT_FIELDS
from .errors import InvalidDocumentId
from .job_store import JobStore, parse_object_id


def get_job_store() -> JobStore:
    """Dependency provider for the jobs store."""
    return JobStore(get_job_repository())


def get_application_store() -> ApplicationStore:
    """Dependency provider for the applications store."""
    return ApplicationStore(get_application_repository(), get_job_store())


__all__ = [
    "JobStore",
    "ApplicationStore",
    "InvalidDocumentId",
    "ENRICHMENT_FIELDS",
    "enrich_applications",
    "parse_object_id",
    "get_job_store",
    "get_application_store",
]
