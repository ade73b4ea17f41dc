"""
Registration, login and user lookup.
"""

from __future__ import annotations

import logging
from typing import Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import create_token
from auth.password import hash_password, needs_rehash, verify_password
from database.models import User
from database.user_repository import UserRepository
from services.errors import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    return create_token(user.id, user.email, user.name)


class AuthService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)

    async def register(self, name: str, email: str, password: str) -> Tuple[User, str]:
        """Create a user and return it with a fresh token."""
        if await self.users.email_exists(email):
            raise EmailAlreadyRegisteredError()

        try:
            user = await self.users.create(name, email, hash_password(password))
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same email
            await self.session.rollback()
            raise EmailAlreadyRegisteredError() from exc

        logger.info("Registered user %s (%s)", user.id, user.email)
        return user, issue_token(user)

    async def login(self, email: str, password: str) -> Tuple[User, str]:
        """Check credentials and return the user with a fresh token."""
        user = await self.users.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", email)
            raise InvalidCredentialsError()

        if needs_rehash(user.password_hash):
            user.password_hash = hash_password(password)
            await self.session.flush()
            logger.info("Upgraded password hash for user %s", user.id)

        logger.info("Login: %s (%s)", user.id, user.email)
        return user, issue_token(user)

    async def get_user(self, user_id: int) -> User:
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user
