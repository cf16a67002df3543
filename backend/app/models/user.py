"""
Notedeck Backend — User SQLAlchemy Model
==========================================

What:  ORM model representing the `users` table (the credential store).
Who:   Used by AuthService for registration and login lookups.

Table Design:
    - UUID primary key, assigned on insert
    - email: UNIQUE constraint; exact-match comparison
    - password_hash: bcrypt digest (60 chars). The plaintext is never stored.

Users are created on registration and never updated or deleted by the API.
"""

import uuid

from sqlalchemy import String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base, TimestampMixin


class User(TimestampMixin, Base):
    """A registered account."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Uniqueness is enforced here, not by application locking: two concurrent
    # registrations with one email cannot both commit.
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    def __repr__(self) -> str:
        # password_hash deliberately omitted
        return f"<User(id={self.id}, email='{self.email}')>"
