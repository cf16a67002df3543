"""
Notedeck Backend — Auth Gate
==============================

What:  Resolves the caller's user id from the `Authorization` header.
How:   The token is the second whitespace-delimited segment of the header
       ("Bearer <token>"). It is verified by TokenService (signature + expiry);
       the embedded user id is trusted as-is. No user lookup, no session store,
       no revocation check.
Who:   Protected routers declare `Depends(get_current_user_id)`.

Rejections (both 401):
    - header absent, or no second segment → "No token, authorization denied"
    - token present but not verifiable    → "Token is not valid"

Implemented as a route dependency rather than BaseHTTPMiddleware so that only
protected routers pay for it and the resolved id is injected straight into
the handler signature. The id is also stored on request.state.user_id.
"""

import logging
from typing import Optional
from uuid import UUID

from starlette.requests import Request

from app.exceptions import UnauthenticatedError
from app.services.token_service import token_service

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "No token, authorization denied"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Second whitespace-delimited segment of the header, or None."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2:
        return None
    return parts[1]


def resolve_user_id(authorization: Optional[str]) -> UUID:
    """
    Pure header → identity function.

    Raises:
        UnauthenticatedError: missing token, or token fails verification
    """
    token = extract_bearer_token(authorization)
    if not token:
        raise UnauthenticatedError(message=MISSING_TOKEN_MESSAGE)
    return token_service.verify_token(token)


async def get_current_user_id(request: Request) -> UUID:
    """FastAPI dependency: run the gate and attach the id to the request."""
    user_id = resolve_user_id(request.headers.get("Authorization"))
    request.state.user_id = user_id
    return user_id
