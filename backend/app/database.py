"""
Notedeck Backend — Database Session Management
================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Builds an async engine with connection pooling on first use, provides a
       session dependency that auto-commits on success and auto-rolls-back on error.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created on first use; sessions are created per-request.

Lazy engine:
    The engine is not built at import time. A missing DATABASE_URL is reported
    by Settings.validate_required() at startup instead of surfacing as an
    SQLAlchemy ArgumentError while modules are still being imported.

Connection Pooling Strategy:
    pool_size:         Persistent connections for normal load
    max_overflow:      Temporary connections for traffic spikes
    pool_pre_ping:     Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour
"""

from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

from sqlalchemy import DateTime, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from app.config import settings


_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """
    Return the process-wide async engine, creating it on first call.

    SQLite URLs (local development) use SQLAlchemy's default pool for the
    dialect; pool sizing only applies to server databases.
    """
    global _engine
    if _engine is None:
        kwargs = {"echo": settings.log_level == "DEBUG"}
        if not settings.database_url.startswith("sqlite"):
            kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_pre_ping=settings.db_pool_pre_ping,
                pool_recycle=3600,
            )
        _engine = create_async_engine(settings.database_url, **kwargs)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to the engine.

    expire_on_commit=False: accessing attributes after commit must not trigger
    a lazy reload outside the session context (responses are serialized after
    the dependency commits).
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_factory


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models share this metadata object; Alembic reads it for --autogenerate.
    """
    pass


def utc_now() -> datetime:
    """Timezone-aware current time; all timestamps are stored in UTC."""
    return datetime.now(timezone.utc)


class TimestampMixin:
    """
    created_at / updated_at columns shared by every table.

    Both are assigned in Python so that consecutive writes from one process
    get strictly increasing microsecond timestamps, which the
    newest-first listings rely on.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
        server_default=text("CURRENT_TIMESTAMP"),
    )


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler (the handler performs queries)
        3. On success: commits anything still pending. Services commit their
           own writes, because this step can run after the response is sent.
        4. On error: rolls back the transaction and re-raises
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
