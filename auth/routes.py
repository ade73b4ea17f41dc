"""
Auth API routes — register, login, current user.

Route prefix: /api
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from services.auth_service import AuthService
from services.errors import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from utils.schemas import AuthResponse, LoginRequest, RegisterRequest, UserOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
) -> AuthResponse:
    """Register a new user and sign them in."""
    try:
        user, token = await AuthService(session).register(req.name, req.email, req.password)
    except EmailAlreadyRegisteredError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=exc.message)

    return AuthResponse(user=UserOut.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
) -> AuthResponse:
    """Login with email + password."""
    try:
        user, token = await AuthService(session).login(req.email, req.password)
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=exc.message)

    return AuthResponse(user=UserOut.model_validate(user), token=token)


@router.get("/me", response_model=UserOut)
async def me(
    user_id: int = Depends(get_current_user_id),
    session: AsyncSession = Depends(db_session),
) -> UserOut:
    """Return the authenticated user's profile."""
    try:
        user = await AuthService(session).get_user(user_id)
    except UserNotFoundError:
        # Token is valid but the account is gone
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return UserOut.model_validate(user)
