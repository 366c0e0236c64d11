"""
Repository Pattern for MongoDB Operations

Provides an abstraction layer over the jobportal database.

Public API:
- get_job_repository(): Repository for the jobs collection
- get_application_repository(): Repository for the job_applications collection
- reset_repositories(): Drop singletons and close the shared client
- DocumentRepositoryInterface: Abstract interface for one collection
- WriteResult: Result dataclass for write operations

Usage:
    from portal_service.repositories import get_job_repository

    jobs = get_job_repository()
    result = jobs.insert_one({"title": "Backend Engineer", "hr_email": "hr@acme.io"})
    job = jobs.find_one({"_id": ObjectId(result.inserted_id)})
"""

from .base import DocumentRepositoryInterface, WriteResult
from .config import (
    RepositoryConfig,
    get_application_repository,
    get_job_repository,
    reset_repositories,
)

__all__ = [
    "get_job_repository",
    "get_application_repository",
    "reset_repositories",
    "DocumentRepositoryInterface",
    "WriteResult",
    "RepositoryConfig",
]
