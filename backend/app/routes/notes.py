"""
Notedeck Backend — Notes Route Handlers
=========================================

What:  Owner-scoped CRUD under /api/notes.
How:   Every handler depends on get_current_user_id (the auth gate) and passes
       the resolved id to NoteService, which filters every statement on it.
Who:   Called by the frontend checklist view.

PUT and PATCH share one handler: both apply only the supplied fields.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.middleware.auth import get_current_user_id
from app.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)
from app.services.note_service import note_service


# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(
    prefix="/api/notes",
    tags=["Notes"],
    responses={401: {"description": "Missing or invalid token", "model": ErrorResponse}},
)


@router.get(
    "",
    response_model=List[NoteResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List the caller's notes, newest first",
)
async def list_notes(
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    return await note_service.list_notes(db=db, owner_id=user_id)


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Title missing or too long", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a note owned by the caller",
)
async def create_note(
    body: NoteCreate,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.create_note(
        db=db, owner_id=user_id, title=body.title, completed=body.completed
    )


@router.api_route(
    "/{note_id}",
    methods=["PUT", "PATCH"],
    response_model=NoteResponse,
    responses={
        400: {"description": "Invalid title", "model": ErrorResponse},
        404: {"description": "Note not found or not owned by caller", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Update title and/or completion of one of the caller's notes",
)
async def update_note(
    note_id: str,
    body: NoteUpdate,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.update_note(
        db=db,
        owner_id=user_id,
        note_id=note_id,
        changes=body.model_dump(exclude_unset=True),
    )


@router.delete(
    "/{note_id}",
    response_model=MessageResponse,
    responses={
        404: {"description": "Note not found or not owned by caller", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete one of the caller's notes",
)
async def delete_note(
    note_id: str,
    user_id: UUID = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await note_service.delete_note(db=db, owner_id=user_id, note_id=note_id)
    return MessageResponse(message="Note deleted successfully")
