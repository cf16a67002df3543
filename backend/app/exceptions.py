"""
Notedeck Backend — Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and the auth gate; caught by global handlers.

Exception Hierarchy:
    NotedeckError (base)
    ├── ValidationError          → 400 Bad Request (missing/malformed input)
    ├── ConflictError            → 400 Bad Request (duplicate email)
    ├── InvalidCredentialsError  → 400 Bad Request (unknown user OR wrong password)
    ├── UnauthenticatedError     → 401 Unauthorized (missing/invalid token)
    ├── NotFoundError            → 404 Not Found (missing OR not owned)
    └── DatabaseError            → 500 Internal Server Error

The message of every exception is safe to return to the client.
The context dict is logged server-side only.
"""

from typing import Any, Dict, Optional


class NotedeckError(Exception):
    """
    Base exception for all Notedeck application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotedeckError):
    """
    Raised when client input fails validation.

    When:    Missing required fields, empty title, title too long, malformed id.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(NotedeckError):
    """
    Raised when a registration collides with an existing email.

    Covers both the explicit lookup and a concurrent insert rejected by the
    users.email UNIQUE constraint.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "User already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidCredentialsError(NotedeckError):
    """
    Raised when login fails.

    The same message is used for "no such email" and "wrong password" so the
    response does not reveal which accounts exist.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Invalid credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UnauthenticatedError(NotedeckError):
    """
    Raised by the auth gate when a protected route gets no usable bearer token.

    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Token is not valid",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(NotedeckError):
    """
    Raised when a requested resource does not exist.

    For owner-scoped notes this also covers "exists but belongs to someone
    else"; the two cases share one message.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        message: str = "The requested resource was not found",
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(NotedeckError):
    """
    Raised when a store or crypto operation fails unexpectedly.

    What:    A query, insert, update, delete, hash or signing step failed.
    HTTP:    500 Internal Server Error

    Security Note:
        The message is a fixed per-operation string ("Server error",
        "Error creating note", ...). The original exception type is kept in
        context for the server log only.
    """

    def __init__(
        self,
        message: str = "Server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
