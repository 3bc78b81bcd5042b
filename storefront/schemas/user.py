# storefront/schemas/user.py
import uuid
from datetime import datetime

from pydantic import EmailStr, ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class UserCreate(SQLModel):
    """
    Registration payload.

    Validation rules:
      - email must be a valid EmailStr
      - password at least 6 characters
      - names are optional; blank strings become None
    """

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("first_name", "last_name")
    @classmethod
    def normalize_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        return v or None


class UserLogin(SQLModel):
    """Login payload."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class UserRead(SQLModel):
    """Response schema returned to clients (no password hash)."""

    id: uuid.UUID
    email: str
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime


class AuthResponse(SQLModel):
    """Returned by register and login."""

    user: UserRead
    access_token: str
    token_type: str = "bearer"
