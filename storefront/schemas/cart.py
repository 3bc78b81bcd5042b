# storefront/schemas/cart.py
import uuid
from datetime import datetime
from decimal import Decimal

from sqlmodel import SQLModel, Field

from storefront.models.cart import MAX_QUANTITY
from storefront.schemas.product import ProductRead


class CartItemCreate(SQLModel):
    """
    Payload for adding to cart. Quantity defaults to one.
    """

    product_id: uuid.UUID
    quantity: int = Field(default=1, gt=0, le=MAX_QUANTITY)


class CartItemUpdate(SQLModel):
    """
    Payload for overwriting the quantity of a cart item.
    """

    quantity: int = Field(gt=0, le=MAX_QUANTITY)


class CartItemRead(SQLModel):
    """
    Read model for a single stored cart row.
    """

    id: uuid.UUID
    session_id: str
    product_id: uuid.UUID
    quantity: int
    created_at: datetime


class CartItemWithProduct(CartItemRead):
    """
    Cart row joined with its product.

    `product` is None when the product was deleted or deactivated;
    such items are shown but priced at nothing.
    """

    product: ProductRead | None = None


class CartTotals(SQLModel):
    """
    Aggregate counts over the priced (product-resolved) items of a cart.
    """

    item_count: int = 0
    total: Decimal = Decimal("0.00")


class CartSummary(CartTotals):
    """
    Full cart response: joined items plus totals.
    """

    items: list[CartItemWithProduct]
