"""
services — business rules between the HTTP routes and the repositories.
"""

from services.auth_service import AuthService
from services.errors import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidTaskError,
    ServiceError,
    TaskNotFoundError,
    UserNotFoundError,
)
from services.task_service import TaskService

__all__ = [
    "AuthService",
    "TaskService",
    "ServiceError",
    "EmailAlreadyRegisteredError",
    "InvalidCredentialsError",
    "InvalidTaskError",
    "TaskNotFoundError",
    "UserNotFoundError",
]
