"""
Notedeck Backend — Note SQLAlchemy Model
==========================================

What:  ORM model representing the `notes` table.
Who:   Used by NoteService for owner-scoped CRUD and by Alembic for schema management.

Table Design:
    - UUID primary key
    - user_id: owner reference (FK → users.id). Every read, update and delete
      filters on (id, user_id) together.
    - title: short text, validated in the service layer
    - completed: defaults to false

Index on (user_id, created_at DESC):
    Serves the only listing query, "this user's notes, newest first".
"""

import uuid

from sqlalchemy import Boolean, ForeignKey, Index, String, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, TimestampMixin

TITLE_MAX_LENGTH = 200


class Note(TimestampMixin, Base):
    """A checklist entry owned by a single user."""

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)

    completed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    __table_args__ = (
        Index("idx_notes_user_created_at", "user_id", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, user_id={self.user_id}, "
            f"completed={self.completed})>"
        )
