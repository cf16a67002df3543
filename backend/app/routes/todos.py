"""
Notedeck Backend — Todo Route Handlers
========================================

What:  Unscoped CRUD under /api/todos. No auth gate.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.note import ErrorResponse, MessageResponse
from app.schemas.todo import TodoCreate, TodoPatch, TodoReplace, TodoResponse
from app.services.todo_service import todo_service


router = APIRouter(prefix="/api/todos", tags=["Todos"])

_NOT_FOUND = {404: {"description": "Todo not found", "model": ErrorResponse}}
_BAD_ID = {400: {"description": "Invalid ID or invalid fields", "model": ErrorResponse}}


@router.get("", response_model=List[TodoResponse], summary="List all todos, newest first")
async def list_todos(db: AsyncSession = Depends(get_db_session)) -> List[TodoResponse]:
    return await todo_service.list_todos(db=db)


@router.get(
    "/{todo_id}",
    response_model=TodoResponse,
    responses={**_BAD_ID, **_NOT_FOUND},
    summary="Get a single todo",
)
async def get_todo(todo_id: str, db: AsyncSession = Depends(get_db_session)) -> TodoResponse:
    return await todo_service.get_todo(db=db, todo_id=todo_id)


@router.post(
    "",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Title is required", "model": ErrorResponse}},
    summary="Create a todo",
)
async def create_todo(
    body: TodoCreate,
    db: AsyncSession = Depends(get_db_session),
) -> TodoResponse:
    return await todo_service.create_todo(db=db, title=body.title, completed=body.completed)


@router.put(
    "/{todo_id}",
    response_model=TodoResponse,
    responses={**_BAD_ID, **_NOT_FOUND},
    summary="Replace a todo",
)
async def replace_todo(
    todo_id: str,
    body: TodoReplace,
    db: AsyncSession = Depends(get_db_session),
) -> TodoResponse:
    return await todo_service.replace_todo(
        db=db, todo_id=todo_id, title=body.title, completed=body.completed
    )


@router.patch(
    "/{todo_id}",
    response_model=TodoResponse,
    responses={**_BAD_ID, **_NOT_FOUND},
    summary="Partially update a todo",
)
async def patch_todo(
    todo_id: str,
    body: TodoPatch,
    db: AsyncSession = Depends(get_db_session),
) -> TodoResponse:
    return await todo_service.patch_todo(
        db=db, todo_id=todo_id, changes=body.model_dump(exclude_unset=True)
    )


@router.delete(
    "/{todo_id}",
    response_model=MessageResponse,
    responses={**_BAD_ID, **_NOT_FOUND},
    summary="Delete a todo",
)
async def delete_todo(todo_id: str, db: AsyncSession = Depends(get_db_session)) -> MessageResponse:
    await todo_service.delete_todo(db=db, todo_id=todo_id)
    return MessageResponse(message="Todo deleted")
