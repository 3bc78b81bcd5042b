# storefront/models/product.py
import uuid
from datetime import datetime, timezone
from decimal import Decimal

from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    The cart only ever reads products; `price` is the live unit price
    used for every cart total (no snapshot at add time).
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        max_length=255,
        index=True,
        description="Display name of the product",
    )

    description: str | None = Field(
        default=None,
        description="Optional long description",
    )

    price: Decimal = Field(
        max_digits=10,
        decimal_places=2,
        description="Current unit price",
    )

    original_price: Decimal | None = Field(
        default=None,
        max_digits=10,
        decimal_places=2,
        description="Pre-discount price shown struck through, if any",
    )

    image_url: str = Field(
        description="Main product image URL",
    )

    category_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="categories.id",
        index=True,
    )

    stock: int = Field(
        default=0,
        ge=0,
        description="Units in stock (informational; the cart does not enforce it)",
    )

    is_active: bool = Field(
        default=True,
        index=True,
        description="Whether this product is visible on the storefront",
    )

    is_featured: bool = Field(
        default=False,
        index=True,
        description="Shown on the home page",
    )

    rating: Decimal = Field(
        default=Decimal("0"),
        max_digits=2,
        decimal_places=1,
        ge=0,
        le=5,
    )

    review_count: int = Field(default=0, ge=0)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
