# storefront/schemas/category.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class CategoryCreate(SQLModel):
    """
    Payload for creating a category.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    slug: str = Field(max_length=255)
    description: str | None = None
    image_url: str | None = None

    @field_validator("name", "slug")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class CategoryRead(SQLModel):
    """
    Category representation for clients.
    """

    id: uuid.UUID
    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None
    created_at: datetime
