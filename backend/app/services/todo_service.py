"""
Notedeck Backend — Todo Service (Unscoped CRUD)
=================================================

What:  CRUD over the shared todo list. No ownership: any caller can read,
       change or delete any todo by id.
Who:   Called by the /api/todos route handlers.

Two update flavours:
    replace_todo (PUT)  — the body is the whole todo; title is required and an
                          omitted `completed` resets to false.
    patch_todo (PATCH)  — only supplied fields change; each is re-validated.

Both are a single `UPDATE ... WHERE id = :id RETURNING *`. Every write commits
before returning.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import utc_now
from app.exceptions import DatabaseError, NotFoundError, NotedeckError, ValidationError
from app.models.todo import Todo
from app.schemas.todo import TodoResponse
from app.services.note_service import clean_title

logger = logging.getLogger(__name__)

TODO_NOT_FOUND_MESSAGE = "Todo not found"


def _parse_todo_id(todo_id: str) -> UUID:
    try:
        return UUID(str(todo_id))
    except ValueError:
        raise ValidationError(message="Invalid ID", field="id", context={"todo_id": str(todo_id)})


def _not_found(todo_id: UUID) -> NotFoundError:
    return NotFoundError(message=TODO_NOT_FOUND_MESSAGE, resource="todo", resource_id=str(todo_id))


class TodoService:
    """Business logic for todos. Stateless; the session is passed per call."""

    async def list_todos(self, db: AsyncSession) -> List[TodoResponse]:
        """All todos, newest first."""
        try:
            result = await db.execute(select(Todo).order_by(Todo.created_at.desc()))
            todos = result.scalars().all()
        except Exception as e:
            logger.error("Database error listing todos: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch todos",
                context={"operation": "list_todos", "error_type": type(e).__name__},
            )
        return [TodoResponse.model_validate(todo) for todo in todos]

    async def get_todo(self, db: AsyncSession, todo_id: str) -> TodoResponse:
        todo_uuid = _parse_todo_id(todo_id)
        try:
            result = await db.execute(select(Todo).where(Todo.id == todo_uuid))
            todo = result.scalar_one_or_none()
        except Exception as e:
            logger.error("Database error fetching todo %s: %s", todo_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to fetch todo",
                context={"operation": "get_todo", "error_type": type(e).__name__},
            )
        if todo is None:
            raise _not_found(todo_uuid)
        return TodoResponse.model_validate(todo)

    async def create_todo(
        self,
        db: AsyncSession,
        title: Optional[str],
        completed: Optional[bool] = None,
    ) -> TodoResponse:
        """
        Raises:
            ValidationError: title missing/blank/too long
            DatabaseError: insert failed
        """
        title = clean_title(title)
        try:
            todo = Todo(title=title, completed=bool(completed) if completed is not None else False)
            db.add(todo)
            await db.flush()
            await db.commit()
        except Exception as e:
            logger.error("Database error creating todo: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to create todo",
                context={"operation": "create_todo", "error_type": type(e).__name__},
            )
        return TodoResponse.model_validate(todo)

    async def replace_todo(
        self,
        db: AsyncSession,
        todo_id: str,
        title: Optional[str],
        completed: Optional[bool],
    ) -> TodoResponse:
        """
        Full replacement (PUT).

        Raises:
            ValidationError: malformed id, or title missing/blank/too long
            NotFoundError: no todo with this id
            DatabaseError: update failed
        """
        todo_uuid = _parse_todo_id(todo_id)
        values = {
            "title": clean_title(title),
            "completed": bool(completed) if completed is not None else False,
            "updated_at": utc_now(),
        }
        return await self._apply_update(db, todo_uuid, values)

    async def patch_todo(
        self,
        db: AsyncSession,
        todo_id: str,
        changes: Dict[str, Any],
    ) -> TodoResponse:
        """
        Partial update (PATCH). Fields absent from `changes`, or null, are kept.

        Raises:
            ValidationError: malformed id, or a supplied title is blank/too long
            NotFoundError: no todo with this id
            DatabaseError: update failed
        """
        todo_uuid = _parse_todo_id(todo_id)
        values: Dict[str, Any] = {"updated_at": utc_now()}
        if changes.get("title") is not None:
            values["title"] = clean_title(changes["title"])
        if changes.get("completed") is not None:
            values["completed"] = bool(changes["completed"])
        return await self._apply_update(db, todo_uuid, values)

    async def delete_todo(self, db: AsyncSession, todo_id: str) -> None:
        todo_uuid = _parse_todo_id(todo_id)
        try:
            result = await db.execute(
                delete(Todo).where(Todo.id == todo_uuid).returning(Todo.id)
            )
            if result.scalar_one_or_none() is None:
                raise _not_found(todo_uuid)
            await db.commit()
        except NotedeckError:
            raise
        except Exception as e:
            logger.error("Database error deleting todo %s: %s", todo_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to delete todo",
                context={"operation": "delete_todo", "error_type": type(e).__name__},
            )
        logger.info("Todo %s deleted", todo_uuid)

    async def _apply_update(
        self, db: AsyncSession, todo_uuid: UUID, values: Dict[str, Any]
    ) -> TodoResponse:
        try:
            result = await db.execute(
                update(Todo).where(Todo.id == todo_uuid).values(**values).returning(Todo)
            )
            todo = result.scalar_one_or_none()
            if todo is None:
                raise _not_found(todo_uuid)
            await db.commit()
        except NotedeckError:
            raise
        except Exception as e:
            logger.error("Database error updating todo %s: %s", todo_uuid, str(e), exc_info=True)
            raise DatabaseError(
                message="Failed to update todo",
                context={"operation": "update_todo", "error_type": type(e).__name__},
            )
        return TodoResponse.model_validate(todo)


todo_service = TodoService()
