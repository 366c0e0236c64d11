"""
Pytest fixtures for the portal HTTP API tests.

The app's store providers are overridden with stores over the in-memory
repositories from the root conftest, so requests never reach MongoDB.
"""

import pytest
from fastapi.testclient import TestClient

from portal_service.auth import TOKEN_COOKIE_NAME, create_access_token
from portal_service.repositories import get_job_repository
from portal_service.services import (
    ApplicationStore,
    JobStore,
    get_application_store,
    get_job_store,
)

from fixtures.sample_jobs import APPLICANT_EMAIL


@pytest.fixture
def app(job_repository, application_repository):
    """Portal app wired to in-memory repositories."""
    from portal_service.app import app

    app.dependency_overrides[get_job_repository] = lambda: job_repository
    app.dependency_overrides[get_job_store] = lambda: JobStore(job_repository)
    app.dependency_overrides[get_application_store] = lambda: ApplicationStore(
        application_repository, JobStore(job_repository)
    )
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """FastAPI test client fixture."""
    return TestClient(app)


@pytest.fixture
def auth_client(client):
    """Client already holding a token cookie for APPLICANT_EMAIL."""
    token = create_access_token({"email": APPLICANT_EMAIL})
    client.cookies.set(TOKEN_COOKIE_NAME, token)
    return client
