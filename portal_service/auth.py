"""
Authentication Module

Cookie-carried JWT authentication for the portal service.

- create_access_token / set_token_cookie: issue a signed, time-limited token
  and hand it to the browser as an HTTP-only cookie
- clear_token_cookie: drop the cookie on logout (the token itself stays
  valid until it expires; there is no server-side session to revoke)
- verify_token: FastAPI dependency guarding sensitive routes (401)
- require_email_match: per-handler authorization check (403)
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, Response
from jose import JWTError, jwt

from .config import settings


logger = logging.getLogger(__name__)

TOKEN_COOKIE_NAME = "token"
ALGORITHM = "HS256"

UNAUTHORIZED_DETAIL = "unauthorized access"
FORBIDDEN_DETAIL = "forbidden access"


def get_token_secret() -> str:
    """
    Get the token signing secret from validated config.

    Raises:
        HTTPException: 500 if the secret is not configured
    """
    if not settings.access_token_secret:
        logger.error("ACCESS_TOKEN_SECRET is not configured")
        raise HTTPException(
            status_code=500,
            detail="Server authentication not configured"
        )
    return settings.access_token_secret


def create_access_token(
    identity: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Sign the identity payload into a JWT.

    Args:
        identity: Claims to embed (expected to contain "email")
        expires_delta: Token lifetime (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        Encoded JWT string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    claims = dict(identity)
    claims["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(claims, get_token_secret(), algorithm=ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises:
        JWTError: If the token is malformed, tampered with, or expired
    """
    return jwt.decode(token, get_token_secret(), algorithms=[ALGORITHM])


def set_token_cookie(response: Response, token: str) -> None:
    """Attach the token as an HTTP-only cookie."""
    response.set_cookie(
        key=TOKEN_COOKIE_NAME,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )


def clear_token_cookie(response: Response) -> None:
    """Delete the token cookie using the attributes it was set with."""
    response.delete_cookie(
        key=TOKEN_COOKIE_NAME,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )


async def verify_token(request: Request) -> Optional[Dict[str, Any]]:
    """
    Verify the token cookie.

    Raises HTTP 401 if the cookie is missing or the token is invalid or expired.
    On success the decoded claims are stored on request.state.user.

    Args:
        request: Incoming request

    Returns:
        Decoded claims, or None when the guard is disabled

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    if not settings.auth_required:
        return None

    token = request.cookies.get(TOKEN_COOKIE_NAME)
    if not token:
        logger.warning(f"Rejected {request.method} {request.url.path}: no token cookie")
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_DETAIL)

    try:
        claims = decode_access_token(token)
    except JWTError as e:
        logger.warning(f"Rejected {request.method} {request.url.path}: {e}")
        raise HTTPException(status_code=401, detail=UNAUTHORIZED_DETAIL)

    request.state.user = claims
    return claims


def require_email_match(claims: Optional[Dict[str, Any]], email: Optional[str]) -> None:
    """
    Authorization check every guarded handler must call after verify_token.

    Raises:
        HTTPException: 403 if the authenticated email differs from the requested one
    """
    if claims is None:
        return

    if claims.get("email") != email:
        logger.warning(
            f"Forbidden: token email {claims.get('email')!r} requested data for {email!r}"
        )
        raise HTTPException(status_code=403, detail=FORBIDDEN_DETAIL)
