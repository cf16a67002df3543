"""
Notedeck Backend — Auth Route Handlers
========================================

What:  POST /api/auth/register and POST /api/auth/login.
How:   Thin handlers; AuthService does validation, hashing and token issuance.
       These routes are public (no auth gate).
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.auth import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse
from app.schemas.note import ErrorResponse
from app.services.auth_service import auth_service


router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing fields or user already exists", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db_session),
) -> RegisterResponse:
    user = await auth_service.register(
        db=db, name=body.name, email=body.email, password=body.password
    )
    return RegisterResponse(message="Registered successfully", user=user)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Invalid credentials", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Log in and receive a bearer token",
    description=(
        "Returns a signed token valid for 7 days. Send it as "
        "`Authorization: Bearer <token>` on protected routes."
    ),
)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    token, user = await auth_service.login(db=db, email=body.email, password=body.password)
    return LoginResponse(token=token, user=user)
