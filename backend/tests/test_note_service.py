"""
Notedeck Backend — Note Service Tests
=======================================

What:  Tests for owner-scoped NoteService operations.
How:   Real queries against an in-memory SQLite database; mock sessions only
       for fault injection.

What we test:
    ✅ list returns only the owner's notes, newest first; empty list is fine
    ✅ create defaults completed to false and validates the title
    ✅ update/delete by another user → NotFoundError, row untouched
    ✅ nonexistent and malformed ids → NotFoundError
    ✅ second delete of the same id → NotFoundError
    ✅ store faults → DatabaseError with per-operation message
"""

import uuid
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select

from app.exceptions import DatabaseError, NotFoundError, ValidationError
from app.models.note import Note
from app.models.user import User
from app.services.note_service import NoteService, clean_title


async def _make_user(db, email):
    user = User(name=email.split("@")[0], email=email, password_hash="x")
    db.add(user)
    await db.flush()
    return user.id


class TestCleanTitle:

    def test_trims(self):
        assert clean_title("  Buy milk  ") == "Buy milk"

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_required(self, title):
        with pytest.raises(ValidationError) as exc_info:
            clean_title(title)
        assert exc_info.value.message == "Title is required"

    def test_max_length(self):
        assert clean_title("a" * 200) == "a" * 200
        with pytest.raises(ValidationError):
            clean_title("a" * 201)


class TestNoteServiceList:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_empty(self, db_session):
        owner = await _make_user(db_session, "alice@example.com")
        assert await self.service.list_notes(db_session, owner) == []

    @pytest.mark.asyncio
    async def test_only_own_notes_newest_first(self, db_session):
        alice = await _make_user(db_session, "alice@example.com")
        bob = await _make_user(db_session, "bob@example.com")

        await self.service.create_note(db_session, alice, "first")
        await self.service.create_note(db_session, bob, "bob's note")
        await self.service.create_note(db_session, alice, "second")

        notes = await self.service.list_notes(db_session, alice)

        assert [n.title for n in notes] == ["second", "first"]
        assert all(n.user_id == alice for n in notes)

    @pytest.mark.asyncio
    async def test_store_fault(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=Exception("Database error"))
        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_notes(mock_db_session, uuid.uuid4())
        assert exc_info.value.message == "Server Error"


class TestNoteServiceCreate:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_completed_defaults_to_false(self, db_session):
        owner = await _make_user(db_session, "alice@example.com")

        note = await self.service.create_note(db_session, owner, "New Note")

        assert note.completed is False
        assert note.user_id == owner
        stored = (await db_session.execute(select(Note).where(Note.id == note.id))).scalar_one()
        assert stored.completed is False

    @pytest.mark.asyncio
    async def test_explicit_completed(self, db_session):
        owner = await _make_user(db_session, "alice@example.com")
        note = await self.service.create_note(db_session, owner, "Done already", completed=True)
        assert note.completed is True

    @pytest.mark.asyncio
    async def test_title_required(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.create_note(mock_db_session, uuid.uuid4(), None)
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_fault(self, mock_db_session):
        mock_db_session.flush = AsyncMock(side_effect=Exception("Database error"))
        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_note(mock_db_session, uuid.uuid4(), "New Note")
        assert exc_info.value.message == "Error creating note"

    @pytest.mark.asyncio
    async def test_failed_commit(self, mock_db_session):
        mock_db_session.commit = AsyncMock(side_effect=Exception("connection lost"))
        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_note(mock_db_session, uuid.uuid4(), "New Note")
        assert exc_info.value.message == "Error creating note"
        mock_db_session.flush.assert_awaited_once()


class TestNoteServiceUpdate:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_update_own_note(self, db_session):
        owner = await _make_user(db_session, "alice@example.com")
        note = await self.service.create_note(db_session, owner, "Old Title")

        updated = await self.service.update_note(
            db_session, owner, str(note.id), {"title": "Updated Title", "completed": True}
        )

        assert updated.id == note.id
        assert updated.title == "Updated Title"
        assert updated.completed is True

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, db_session):
        owner = await _make_user(db_session, "alice@example.com")
        note = await self.service.create_note(db_session, owner, "Keep me")

        updated = await self.service.update_note(db_session, owner, str(note.id), {"completed": True})

        assert updated.title == "Keep me"
        assert updated.completed is True

    @pytest.mark.asyncio
    async def test_other_users_note_is_not_found(self, db_session):
        alice = await _make_user(db_session, "alice@example.com")
        bob = await _make_user(db_session, "bob@example.com")
        note = await self.service.create_note(db_session, alice, "Alice's")

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.update_note(db_session, bob, str(note.id), {"title": "Hijacked"})

        assert exc_info.value.message == "Note not found or unauthorized"
        notes = await self.service.list_notes(db_session, alice)
        assert notes[0].title == "Alice's"

    @pytest.mark.asyncio
    async def test_nonexistent_id(self, db_session):
        owner = await _make_user(db_session, "alice@example.com")
        with pytest.raises(NotFoundError):
            await self.service.update_note(db_session, owner, str(uuid.uuid4()), {"title": "x"})

    @pytest.mark.asyncio
    async def test_malformed_id(self, db_session):
        owner = await _make_user(db_session, "alice@example.com")
        with pytest.raises(NotFoundError):
            await self.service.update_note(db_session, owner, "not-a-uuid", {"title": "x"})

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, db_session):
        owner = await _make_user(db_session, "alice@example.com")
        note = await self.service.create_note(db_session, owner, "Title")
        with pytest.raises(ValidationError):
            await self.service.update_note(db_session, owner, str(note.id), {"title": "  "})

    @pytest.mark.asyncio
    async def test_store_fault(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=Exception("Database error"))
        with pytest.raises(DatabaseError) as exc_info:
            await self.service.update_note(
                mock_db_session, uuid.uuid4(), str(uuid.uuid4()), {"title": "x"}
            )
        assert exc_info.value.message == "Error updating note"


class TestNoteServiceDelete:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_delete_twice(self, db_session):
        owner = await _make_user(db_session, "alice@example.com")
        note = await self.service.create_note(db_session, owner, "Short-lived")

        await self.service.delete_note(db_session, owner, str(note.id))
        assert await self.service.list_notes(db_session, owner) == []

        with pytest.raises(NotFoundError):
            await self.service.delete_note(db_session, owner, str(note.id))

    @pytest.mark.asyncio
    async def test_other_users_note_survives(self, db_session):
        alice = await _make_user(db_session, "alice@example.com")
        bob = await _make_user(db_session, "bob@example.com")
        note = await self.service.create_note(db_session, alice, "Alice's")

        with pytest.raises(NotFoundError):
            await self.service.delete_note(db_session, bob, str(note.id))

        assert len(await self.service.list_notes(db_session, alice)) == 1

    @pytest.mark.asyncio
    async def test_store_fault(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=Exception("Database error"))
        with pytest.raises(DatabaseError) as exc_info:
            await self.service.delete_note(mock_db_session, uuid.uuid4(), str(uuid.uuid4()))
        assert exc_info.value.message == "Error deleting note"
