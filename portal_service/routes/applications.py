"""
Job application routes.

- POST /job-applications - Insert an application as submitted
- GET /job-applications?email= - An applicant's applications, enriched with
  job title/company/logo (token cookie required, email must match the token)
- DELETE /job-applications/{application_id} - Remove one application
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from ..auth import require_email_match, verify_token
from ..models import DeleteResponse, InsertResponse
from ..serialization import serialize_documents
from ..services import ApplicationStore, InvalidDocumentId, get_application_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/job-applications", tags=["job-applications"])


@router.post("", response_model=InsertResponse)
def create_application(
    application: Dict[str, Any] = Body(...),
    store: ApplicationStore = Depends(get_application_store),
) -> InsertResponse:
    """Insert a job application with no schema enforcement."""
    return InsertResponse.from_result(store.create(application))


@router.get("")
def list_applications(
    email: str = Query(..., description="Applicant email; must match the token"),
    claims: Optional[Dict[str, Any]] = Depends(verify_token),
    store: ApplicationStore = Depends(get_application_store),
) -> List[Dict[str, Any]]:
    """List an applicant's applications with job display fields copied in."""
    require_email_match(claims, email)
    return serialize_documents(store.list_by_email(email))


@router.delete("/{application_id}", response_model=DeleteResponse)
def delete_application(
    application_id: str,
    store: ApplicationStore = Depends(get_application_store),
) -> DeleteResponse:
    """Delete one application. deletedCount is 0 when nothing matched."""
    try:
        result = store.delete_by_id(application_id)
    except InvalidDocumentId:
        logger.warning(f"Rejected malformed application id {application_id!r}")
        raise HTTPException(status_code=400, detail="Invalid id format")
    return DeleteResponse.from_result(result)
