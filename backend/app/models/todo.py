"""
Notedeck Backend — Todo SQLAlchemy Model
==========================================

What:  ORM model representing the `todos` table.
Who:   Used by TodoService. Todos have no owner; any caller may read or change any row.
"""

import uuid

from sqlalchemy import Boolean, Index, String, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, TimestampMixin
from app.models.note import TITLE_MAX_LENGTH


class Todo(TimestampMixin, Base):
    __tablename__ = "todos"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)

    completed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    __table_args__ = (
        Index("idx_todos_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Todo(id={self.id}, completed={self.completed})>"
