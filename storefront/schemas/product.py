# storefront/schemas/product.py
import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

from storefront.schemas.category import CategoryRead


class ProductBase(SQLModel):
    """
    Shared fields for product payloads and read models.
    """

    name: str = Field(max_length=255)
    description: str | None = None
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    original_price: Decimal | None = Field(
        default=None, ge=0, max_digits=10, decimal_places=2
    )
    image_url: str
    category_id: uuid.UUID | None = None
    stock: int = Field(default=0, ge=0)
    is_active: bool = True
    is_featured: bool = False
    rating: Decimal = Field(default=Decimal("0"), ge=0, le=5, max_digits=2, decimal_places=1)
    review_count: int = Field(default=0, ge=0)


class ProductCreate(ProductBase):
    """
    Payload for creating a product.
    """

    model_config = ConfigDict(extra="forbid")

    @field_validator("name", "image_url")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class ProductRead(ProductBase):
    """
    Product representation for clients.
    """

    id: uuid.UUID
    created_at: datetime


class ProductWithCategory(ProductRead):
    """
    Product joined with its category (null if unassigned).
    """

    category: CategoryRead | None = None
