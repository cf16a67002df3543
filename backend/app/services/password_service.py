"""
Notedeck Backend — Password Hashing Service
=============================================

What:  One-way hash + verify pair for user passwords.
How:   bcrypt with a per-hash random salt and a fixed work factor
       (settings.bcrypt_rounds, default 10). The salt and cost are embedded
       in the digest, so verify() needs nothing but the stored hash.
Who:   AuthService on register (hash) and login (verify).

bcrypt only reads the first 72 bytes of its input; longer passwords are
rejected instead of being silently truncated.
"""

import logging

import bcrypt

from app.config import settings
from app.exceptions import ValidationError

logger = logging.getLogger(__name__)

BCRYPT_MAX_PASSWORD_BYTES = 72


class PasswordService:
    """Stateless bcrypt wrapper."""

    def hash_password(self, password: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            ValidationError: password longer than bcrypt's 72-byte input limit
        """
        encoded = password.encode("utf-8")
        if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
            raise ValidationError(
                message=f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes",
                field="password",
            )
        salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Constant-time comparison against a stored bcrypt hash."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            # Over-long input or a corrupt stored hash never verifies
            logger.warning("Password verification failed on malformed input")
            return False


password_service = PasswordService()
