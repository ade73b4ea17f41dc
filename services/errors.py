"""
Domain errors raised by the service layer.

Routes translate these into HTTP responses; nothing below the route layer
knows about status codes.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base class for expected, user-facing failures."""

    message = "Request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class EmailAlreadyRegisteredError(ServiceError):
    message = "Email already registered"


class InvalidCredentialsError(ServiceError):
    # Same text for unknown email and wrong password
    message = "Invalid email or password"


class UserNotFoundError(ServiceError):
    message = "User not found"


class TaskNotFoundError(ServiceError):
    message = "Task not found"


class InvalidTaskError(ServiceError):
    message = "Invalid task"
