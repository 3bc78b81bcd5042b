# storefront/models/cart.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, UniqueConstraint
from sqlmodel import SQLModel, Field

# Upper bound for one cart line, far below the INTEGER column limit.
MAX_QUANTITY = 10_000


class CartItem(SQLModel, table=True):
    """
    Shopping cart entry for an anonymous browser session.

    One session cannot have 2 rows for the same product; the unique
    constraint is the conflict target of the add-to-cart upsert.
    """

    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("session_id", "product_id", name="uq_cart_items_session_product"),
        CheckConstraint(f"quantity <= {MAX_QUANTITY}", name="ck_cart_items_quantity_max"),
    )

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    session_id: str = Field(
        max_length=255,
        index=True,
        description="Opaque cart session key from the session cookie",
    )

    # Not a foreign key: a product may be deleted while carts still point at it.
    product_id: uuid.UUID = Field(index=True)

    quantity: int = Field(
        default=1,
        gt=0,
        le=MAX_QUANTITY,
        description="Between 1 and MAX_QUANTITY",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
