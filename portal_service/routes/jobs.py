"""
Job posting routes.

- POST /jobs - Insert a job as submitted
- GET /jobs - List jobs, optionally filtered by HR email (?email=)
- GET /jobs/{job_id} - Fetch one job (null when absent)
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from ..models import InsertResponse
from ..serialization import serialize_document, serialize_documents
from ..services import InvalidDocumentId, JobStore, get_job_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=InsertResponse)
def create_job(
    job: Dict[str, Any] = Body(...),
    store: JobStore = Depends(get_job_store),
) -> InsertResponse:
    """Insert a job posting with no schema enforcement."""
    return InsertResponse.from_result(store.create(job))


@router.get("")
def list_jobs(
    email: Optional[str] = Query(None, description="Only jobs posted by this HR email"),
    store: JobStore = Depends(get_job_store),
) -> List[Dict[str, Any]]:
    """List every job, or only the ones whose hr_email matches."""
    return serialize_documents(store.list(hr_email=email))


@router.get("/{job_id}")
def get_job(
    job_id: str,
    store: JobStore = Depends(get_job_store),
) -> Optional[Dict[str, Any]]:
    """Fetch a single job. Returns null rather than 404 when absent."""
    try:
        job = store.get_by_id(job_id)
    except InvalidDocumentId:
        logger.warning(f"Rejected malformed job id {job_id!r}")
        raise HTTPException(status_code=400, detail="Invalid id format")
    return serialize_document(job)
