"""
Pydantic schemas for the Task Manager API.

Responses are serialised with camelCase keys; requests accept either
camelCase or snake_case.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from auth.password import MAX_PASSWORD_BYTES, password_too_long


class APIModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Users / Auth
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(APIModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, value: str) -> str:
        value = value.strip().lower()
        local, sep, domain = value.partition("@")
        if not sep or not local or not domain:
            raise ValueError("Invalid email address")
        return value

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(APIModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def _normalise_email(cls, value: str) -> str:
        return value.strip().lower()


class UserOut(APIModel):
    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None


class AuthResponse(APIModel):
    user: UserOut
    token: str


# ═══════════════════════════════════════════════════════════════════════════════
# Tasks
# ═══════════════════════════════════════════════════════════════════════════════


class TaskCreateRequest(APIModel):
    # Blank or missing titles are rejected by the service with a clear message
    title: str = Field("", max_length=255)
    description: str = ""
    done: bool = False

    @field_validator("title", "description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class TaskUpdateRequest(APIModel):
    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    done: Optional[bool] = None

    def changes(self) -> Dict[str, Any]:
        """Fields the client actually sent (``null`` counts as not sent)."""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class TaskOut(APIModel):
    id: int
    title: str
    description: str = ""
    done: bool = False
    user_id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    message: str
