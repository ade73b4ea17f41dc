"""
FastAPI dependencies for authentication.

Provides ``db_session`` and ``get_current_user_id`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

import logging
from typing import AsyncGenerator, Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import TokenError, decode_token
from database.session import get_db_session

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "Bearer "


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


async def get_current_user_id(
    authorization: Optional[str] = Header(None, alias="Authorization"),
) -> int:
    """
    Extract and verify the Bearer token, returning the authenticated
    ``user_id``.
    """
    if not authorization:
        raise _unauthorized("Authorization header required")
    if not authorization.startswith(_BEARER_PREFIX):
        raise _unauthorized("Bearer token required")

    try:
        claims = decode_token(authorization[len(_BEARER_PREFIX):].strip())
    except TokenError as exc:
        logger.debug("Rejected token: %s", exc)
        raise _unauthorized("Invalid token")

    user_id = claims.get("user_id")
    # JSON numbers may arrive as floats; bools are ints in Python
    if isinstance(user_id, float) and user_id.is_integer():
        user_id = int(user_id)
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise _unauthorized("Invalid user ID in token")
    return user_id
