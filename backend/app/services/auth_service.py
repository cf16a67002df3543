"""
Notedeck Backend — Auth Service (Registration & Login)
========================================================

What:  Orchestrates registration (validate → check uniqueness → hash → persist)
       and login (lookup → verify → issue token).
How:   Composes the users table, PasswordService and TokenService.
Who:   Called by the /api/auth route handlers.

Error Handling Strategy:
    Application exceptions (ValidationError, ConflictError,
    InvalidCredentialsError) propagate as-is. Any other failure from the
    store or the crypto libraries is logged and wrapped in
    DatabaseError("Server error"). Each operation performs at most one
    write, so there is nothing to undo on failure.

bcrypt is CPU-bound; hashing and verification run in the threadpool so a
login does not stall the event loop for other requests.
"""

import logging
from typing import Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from app.exceptions import (
    ConflictError,
    DatabaseError,
    InvalidCredentialsError,
    NotedeckError,
    ValidationError,
)
from app.models.user import User
from app.schemas.auth import UserPublic
from app.services.password_service import password_service
from app.services.token_service import token_service

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class AuthService:
    """Registration and login. Stateless; the session is passed per call."""

    async def register(
        self,
        db: AsyncSession,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> UserPublic:
        """
        Create a new user account.

        Returns:
            UserPublic (id, name, email). The hash is never returned.

        Raises:
            ValidationError: any of name/email/password missing or empty (no write)
            ConflictError: email already registered, including a concurrent
                           insert rejected by the UNIQUE constraint
            DatabaseError: unexpected store or hashing failure
        """
        if _is_blank(name) or _is_blank(email) or _is_blank(password):
            raise ValidationError(message="All fields required")

        try:
            result = await db.execute(select(User.id).where(User.email == email))
            if result.scalar_one_or_none() is not None:
                raise ConflictError(context={"email": email})

            password_hash = await run_in_threadpool(password_service.hash_password, password)

            user = User(name=name, email=email, password_hash=password_hash)
            db.add(user)
            # Flush and commit inside the try block so a UNIQUE violation or a
            # failed commit surfaces here, before any response is sent
            await db.flush()
            await db.commit()

        except NotedeckError:
            raise
        except IntegrityError:
            logger.info("Registration lost a race on a duplicate email")
            raise ConflictError(context={"email": email, "source": "unique_constraint"})
        except Exception as e:
            logger.error("Registration failed: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Server error",
                context={"operation": "register", "error_type": type(e).__name__},
            )

        logger.info("Registered user %s", user.id)
        return UserPublic(id=user.id, name=user.name, email=user.email)

    async def login(
        self,
        db: AsyncSession,
        email: Optional[str],
        password: Optional[str],
    ) -> Tuple[str, UserPublic]:
        """
        Authenticate by email + password and issue a session token.

        Unknown email and wrong password raise the same InvalidCredentialsError,
        so the response does not reveal whether an account exists.

        Returns:
            (token, UserPublic)

        Raises:
            InvalidCredentialsError: no match, or password does not verify
            DatabaseError: unexpected store, crypto or signing failure
        """
        if _is_blank(email) or _is_blank(password):
            raise InvalidCredentialsError()

        try:
            result = await db.execute(select(User).where(User.email == email))
            user = result.scalar_one_or_none()

            if user is None:
                raise InvalidCredentialsError()

            matches = await run_in_threadpool(
                password_service.verify_password, password, user.password_hash
            )
            if not matches:
                raise InvalidCredentialsError()

            token = token_service.issue_token(user.id)

        except NotedeckError:
            raise
        except Exception as e:
            logger.error("Login failed: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Server error",
                context={"operation": "login", "error_type": type(e).__name__},
            )

        logger.info("User %s logged in", user.id)
        return token, UserPublic(id=user.id, name=user.name, email=user.email)


auth_service = AuthService()
