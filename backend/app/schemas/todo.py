"""Request/response contracts for /api/todos."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TodoCreate(BaseModel):
    title: Optional[str] = Field(default=None, description="Todo title (required)")
    completed: Optional[bool] = Field(default=None)


class TodoReplace(BaseModel):
    """PUT body: the whole todo. An omitted `completed` resets it to false."""
    title: Optional[str] = Field(default=None)
    completed: Optional[bool] = Field(default=None)


class TodoPatch(BaseModel):
    """PATCH body: only supplied fields are changed."""
    title: Optional[str] = Field(default=None)
    completed: Optional[bool] = Field(default=None)


class TodoResponse(BaseModel):
    id: uuid.UUID
    title: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
