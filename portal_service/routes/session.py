"""
Token cookie issue/clear routes.

- POST /jwt - Sign the submitted identity and set it as the token cookie
- POST /logout - Clear the token cookie
"""

import logging

from fastapi import APIRouter, Response

from ..auth import clear_token_cookie, create_access_token, set_token_cookie
from ..models import SuccessResponse, TokenRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/jwt", response_model=SuccessResponse)
def issue_token(identity: TokenRequest, response: Response) -> SuccessResponse:
    """Issue a one-hour token for the submitted identity."""
    token = create_access_token(identity.model_dump(exclude_unset=True))
    set_token_cookie(response, token)
    logger.info(f"Issued token cookie for {identity.email}")
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
def logout(response: Response) -> SuccessResponse:
    """
    Clear the token cookie.

    The token stays valid until it expires if a client kept a copy.
    """
    clear_token_cookie(response)
    logger.info("Cleared token cookie")
    return SuccessResponse()
