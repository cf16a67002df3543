"""
Notedeck Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn app.main:app) or the `notedeck` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────┐ ┌──────┐ │
    │  │  Req ID  │→│  Logging        │→│ GZip │→│ CORS │ │
    │  └──────────┘ └─────────────────┘ └──────┘ └──────┘ │
    │                                                     │
    │  Routes:                                            │
    │  /api/auth/*   (public)                             │
    │  /api/notes/*  (bearer token, owner-scoped)         │
    │  /api/todos/*  (public, unscoped)                   │
    │  /health                                            │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation/Conflict/Credentials→400  Unauth→401    │
    │  NotFound→404  Database/unexpected→500              │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (DATABASE_URL and JWT_SECRET are mandatory)
    Shutdown:
    1. Dispose database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import (
    ConflictError,
    DatabaseError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDLogFilter, RequestIDMiddleware, error_body
from app.routes import auth, health, notes, todos

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure root logging to stdout.

    Every record carries the id of the request it was emitted under, so one
    request's lines can be pulled out of interleaved output:

        2024-05-02T10:11:12 [WARNING] [3f9c0a1b2d4e] notedeck.access: POST /api/auth/login -> 400 ...
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, then configuration validation. A missing DATABASE_URL
    or JWT_SECRET aborts startup; the server never accepts a request without
    a database or with a guessable signing key.

    Shutdown: dispose the database engine.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Notedeck Backend starting up...")

    try:
        settings.validate_required()
    except ValueError as e:
        logger.error("%s", str(e))
        raise RuntimeError("Refusing to start with incomplete configuration") from e

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Notedeck Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and a single JSON error shape.

    Handler hierarchy:
        ValidationError          → 400
        RequestValidationError   → 400 (malformed body / wrong field types)
        ConflictError            → 400
        InvalidCredentialsError  → 400
        UnauthenticatedError     → 401
        NotFoundError            → 404
        DatabaseError            → 500
        anything else            → 500, built by RequestIDMiddleware so the
                                   body and header still carry the request id

    Exception context (internal details) is logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("Validation error on %s: %s", request.url.path, exc.message)
        details = {"field": exc.field} if exc.field else None
        return JSONResponse(
            status_code=400,
            content=error_body("validation_error", exc.message, details),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        fields = [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()]
        logger.warning("Malformed request body on %s: %s", request.url.path, fields)
        return JSONResponse(
            status_code=400,
            content=error_body("validation_error", "Invalid request body", {"fields": fields}),
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        return JSONResponse(status_code=400, content=error_body("conflict", exc.message))

    @app.exception_handler(InvalidCredentialsError)
    async def handle_invalid_credentials(request: Request, exc: InvalidCredentialsError):
        return JSONResponse(
            status_code=400, content=error_body("invalid_credentials", exc.message)
        )

    @app.exception_handler(UnauthenticatedError)
    async def handle_unauthenticated(request: Request, exc: UnauthenticatedError):
        return JSONResponse(
            status_code=401,
            content=error_body("unauthenticated", exc.message),
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=error_body("not_found", exc.message))

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("Database error on %s: %s | context=%s", request.url.path, exc.message, exc.context)
        return JSONResponse(status_code=500, content=error_body("server_error", exc.message))


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Notedeck API",
        description=(
            "User accounts with bearer-token sessions, per-user notes, "
            "and a shared todo list."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → GZip → CORS → route

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(notes.router)
    app.include_router(todos.router)
    app.include_router(health.router)

    return app


# uvicorn expects `app.main:app` to be importable
app = create_app()


def run() -> None:
    """
    Console entrypoint (`notedeck`).

    Exits with status 1 before binding a port when required configuration
    is missing.
    """
    setup_logging()
    try:
        settings.validate_required()
    except ValueError as e:
        logger.error("%s", str(e))
        sys.exit(1)

    uvicorn.run(
        "app.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
