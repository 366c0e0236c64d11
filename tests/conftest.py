"""
Global fixtures for the portal service tests.

Environment variables are set BEFORE anything imports portal_service so the
cached PortalSettings instance sees test values. No test talks to MongoDB:
stores run over InMemoryRepository and AtlasRepository tests patch MongoClient.
"""

import os
import sys
from pathlib import Path

os.environ["ENVIRONMENT"] = "development"
os.environ["ACCESS_TOKEN_SECRET"] = "test-access-token-secret-4f9c2a"  # Min 16 chars
os.environ["AUTH_ENABLED"] = "true"
os.environ["COOKIE_SECURE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

# Make the project root and tests/fixtures (as "fixtures") importable
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

import pytest

from fixtures.in_memory_repository import InMemoryRepository
from portal_service.services import ApplicationStore, JobStore


@pytest.fixture
def job_repository() -> InMemoryRepository:
    return InMemoryRepository("jobs")


@pytest.fixture
def application_repository() -> InMemoryRepository:
    return InMemoryRepository("job_applications")


@pytest.fixture
def job_store(job_repository) -> JobStore:
    return JobStore(job_repository)


@pytest.fixture
def application_store(application_repository, job_store) -> ApplicationStore:
    return ApplicationStore(application_repository, job_store)
