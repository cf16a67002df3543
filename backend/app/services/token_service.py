"""
Notedeck Backend — Session Token Service
==========================================

What:  Issues and verifies the stateless bearer tokens used for sessions.
How:   PyJWT, HMAC-signed (HS256 by default) with settings.jwt_secret.
       Claims: userId (user UUID as string), iat, exp (iat + 7 days).
Who:   AuthService.login() issues; the auth gate verifies.

No server-side state:
    Tokens are never stored and cannot be revoked. Verification is the
    signature check plus the expiry check, nothing else.
"""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from app.config import settings
from app.exceptions import UnauthenticatedError

logger = logging.getLogger(__name__)

USER_ID_CLAIM = "userId"
INVALID_TOKEN_MESSAGE = "Token is not valid"


class TokenService:
    """Sign and verify session tokens with the configured secret."""

    def issue_token(self, user_id: uuid.UUID, now: Optional[datetime] = None) -> str:
        """
        Create a signed token bound to `user_id`.

        Raises:
            RuntimeError: JWT_SECRET is not configured
        """
        if not settings.jwt_secret:
            raise RuntimeError("JWT_SECRET is not configured; refusing to sign tokens")

        issued_at = now or datetime.now(timezone.utc)
        payload = {
            USER_ID_CLAIM: str(user_id),
            "iat": issued_at,
            "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
        }
        return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    def verify_token(self, token: str) -> uuid.UUID:
        """
        Verify signature and expiry, return the embedded user id.

        Raises:
            UnauthenticatedError: bad signature, expired, malformed, or
                                  missing/invalid userId claim
        """
        if not settings.jwt_secret:
            logger.error("JWT_SECRET is not configured; every token is rejected")
            raise UnauthenticatedError(message=INVALID_TOKEN_MESSAGE)

        try:
            payload = jwt.decode(
                token,
                settings.jwt_secret,
                algorithms=[settings.jwt_algorithm],
                options={"require": ["exp", "iat", USER_ID_CLAIM]},
            )
            return uuid.UUID(str(payload[USER_ID_CLAIM]))
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise UnauthenticatedError(
                message=INVALID_TOKEN_MESSAGE, context={"reason": "expired"}
            )
        except (jwt.PyJWTError, ValueError) as e:
            logger.info("Rejected invalid token: %s", type(e).__name__)
            raise UnauthenticatedError(
                message=INVALID_TOKEN_MESSAGE, context={"reason": type(e).__name__}
            )


token_service = TokenService()
