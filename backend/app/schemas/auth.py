"""
Notedeck Backend — Authentication Schemas
===========================================

What:  Request/response contracts for /api/auth/register and /api/auth/login.

Every request field is Optional on purpose: presence is a business rule
checked by AuthService so that a missing field yields the documented
400 "All fields required" instead of FastAPI's generic 422.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Login email (unique)")
    password: Optional[str] = Field(default=None, description="Plaintext password")


class LoginRequest(BaseModel):
    email: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)


class UserPublic(BaseModel):
    """
    What:  The externally visible part of a user record.
    Why:   The only user shape the API ever returns; it has no hash field,
           so the digest cannot leak through serialization.
    """
    id: uuid.UUID = Field(description="User identifier")
    name: str
    email: str

    model_config = {"from_attributes": True}


class RegisterResponse(BaseModel):
    message: str = Field(default="Registered successfully")
    user: UserPublic


class LoginResponse(BaseModel):
    token: str = Field(description="Signed bearer token, valid for 7 days")
    user: UserPublic
