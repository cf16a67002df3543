"""
Notedeck Backend — Note Service (Owner-Scoped CRUD)
=====================================================

What:  List, create, update and delete notes on behalf of one authenticated user.
Who:   Called by the /api/notes route handlers with the user id resolved by
       the auth gate.

Ownership Scoping:
    Every statement filters on the owner id. Update and delete are one
    filtered statement each:

        UPDATE notes SET ... WHERE id = :id AND user_id = :owner RETURNING *
        DELETE FROM notes      WHERE id = :id AND user_id = :owner RETURNING id

    There is no separate existence check, so there is no window between
    "does it exist" and "is it yours". Zero affected rows means NotFoundError,
    whether the note never existed or belongs to someone else.

Design Decision:
    NoteService is stateless — it receives the db session for each call.
    Each write commits before returning, so a failed commit is reported as a
    DatabaseError on the same request instead of after the response is sent.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import utc_now
from app.exceptions import DatabaseError, NotFoundError, NotedeckError, ValidationError
from app.models.note import Note, TITLE_MAX_LENGTH
from app.schemas.note import NoteResponse

logger = logging.getLogger(__name__)

NOTE_NOT_FOUND_MESSAGE = "Note not found or unauthorized"


def clean_title(title: Optional[str]) -> str:
    """
    Apply the title rules shared by notes and todos.

    Returns the trimmed title.

    Raises:
        ValidationError: missing, blank, or longer than TITLE_MAX_LENGTH
    """
    if title is None or not title.strip():
        raise ValidationError(message="Title is required", field="title")
    title = title.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            message=f"Title must be at most {TITLE_MAX_LENGTH} characters",
            field="title",
        )
    return title


def _parse_note_id(note_id: str) -> UUID:
    # A malformed id can't match any row; report it like any other miss
    try:
        return UUID(str(note_id))
    except ValueError:
        raise NotFoundError(
            message=NOTE_NOT_FOUND_MESSAGE, resource="note", resource_id=str(note_id)
        )


class NoteService:
    """
    Business logic layer for owner-scoped notes.

    Error Handling Strategy:
        ValidationError / NotFoundError propagate unchanged. Anything else is
        logged and wrapped in DatabaseError with a fixed per-operation message.
    """

    async def list_notes(self, db: AsyncSession, owner_id: UUID) -> List[NoteResponse]:
        """
        Return the owner's notes, newest first. An empty list is a valid result.
        """
        try:
            result = await db.execute(
                select(Note)
                .where(Note.user_id == owner_id)
                .order_by(Note.created_at.desc())
            )
            notes = result.scalars().all()
        except Exception as e:
            logger.error("Database error listing notes for %s: %s", owner_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Server Error",
                context={"operation": "list_notes", "error_type": type(e).__name__},
            )

        return [NoteResponse.model_validate(note) for note in notes]

    async def create_note(
        self,
        db: AsyncSession,
        owner_id: UUID,
        title: Optional[str],
        completed: Optional[bool] = None,
    ) -> NoteResponse:
        """
        Create a note owned by `owner_id`.

        `completed` is false unless explicitly given.

        Raises:
            ValidationError: title missing/blank/too long
            DatabaseError: insert failed
        """
        title = clean_title(title)

        try:
            note = Note(
                user_id=owner_id,
                title=title,
                completed=bool(completed) if completed is not None else False,
            )
            db.add(note)
            await db.flush()  # Assigns id and timestamps
            await db.commit()
        except Exception as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error creating note",
                context={"operation": "create_note", "error_type": type(e).__name__},
            )

        logger.info("Note %s created for user %s", note.id, owner_id)
        return NoteResponse.model_validate(note)

    async def update_note(
        self,
        db: AsyncSession,
        owner_id: UUID,
        note_id: str,
        changes: Dict[str, Any],
    ) -> NoteResponse:
        """
        Apply `changes` (title and/or completed) to one of the owner's notes.

        Fields absent from `changes`, or given as null, are left unchanged.

        Raises:
            ValidationError: supplied title is blank or too long
            NotFoundError: no note with this id belongs to the owner
            DatabaseError: update failed
        """
        note_uuid = _parse_note_id(note_id)

        values: Dict[str, Any] = {"updated_at": utc_now()}
        if changes.get("title") is not None:
            values["title"] = clean_title(changes["title"])
        if changes.get("completed") is not None:
            values["completed"] = bool(changes["completed"])

        try:
            result = await db.execute(
                update(Note)
                .where(Note.id == note_uuid, Note.user_id == owner_id)
                .values(**values)
                .returning(Note)
            )
            note = result.scalar_one_or_none()

            if note is None:
                raise NotFoundError(
                    message=NOTE_NOT_FOUND_MESSAGE, resource="note", resource_id=str(note_uuid)
                )
            await db.commit()

        except NotedeckError:
            raise
        except Exception as e:
            logger.error("Database error updating note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Error updating note",
                context={"operation": "update_note", "error_type": type(e).__name__},
            )

        return NoteResponse.model_validate(note)

    async def delete_note(self, db: AsyncSession, owner_id: UUID, note_id: str) -> None:
        """
        Delete one of the owner's notes.

        Deleting the same id twice raises NotFoundError the second time.

        Raises:
            NotFoundError: no note with this id belongs to the owner
            DatabaseError: delete failed
        """
        note_uuid = _parse_note_id(note_id)

        try:
            result = await db.execute(
                delete(Note)
                .where(Note.id == note_uuid, Note.user_id == owner_id)
                .returning(Note.id)
            )
            deleted_id = result.scalar_one_or_none()

            if deleted_id is None:
                raise NotFoundError(
                    message=NOTE_NOT_FOUND_MESSAGE, resource="note", resource_id=str(note_uuid)
                )
            await db.commit()

        except NotedeckError:
            raise
        except Exception as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Error deleting note",
                context={"operation": "delete_note", "error_type": type(e).__name__},
            )

        logger.info("Note %s deleted by user %s", note_uuid, owner_id)


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
