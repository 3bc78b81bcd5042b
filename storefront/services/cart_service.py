# storefront/services/cart_service.py
import logging
import uuid
from decimal import Decimal
from typing import Iterable

from fastapi import HTTPException, status
from sqlmodel import Session

from storefront.models.cart import MAX_QUANTITY, CartItem
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.cart import CartItemWithProduct, CartSummary, CartTotals
from storefront.schemas.product import ProductRead

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


class CartService:
    """
    Business logic for the session cart.

    Responsibilities:
      - merge-on-add: adding a product already in the cart increases its
        quantity, it never creates a second row
      - join cart rows with their products for display
      - price the cart from the products' *current* prices
      - tolerate dangling items (deleted/inactive product => product=None)

    Stock is informational only and is not checked here.
    """

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        self.cart_repo = cart_repo
        self.product_repo = product_repo

    # ---- internal helpers ----

    @staticmethod
    def _require_valid_quantity(quantity: int) -> None:
        if quantity < 1:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Quantity must be at least 1",
            )
        if quantity > MAX_QUANTITY:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Quantity must be at most {MAX_QUANTITY}",
            )

    def _get_valid_product(self, session: Session, product_id: uuid.UUID):
        product = self.product_repo.get_by_id(session, product_id)
        if not product or not product.is_active:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    # ---- pricing ----

    @staticmethod
    def summarize(items: Iterable[CartItemWithProduct]) -> CartTotals:
        """
        Price a joined cart.

          line_total = product.price * quantity
          total      = sum of line totals
          item_count = sum of quantities

        Items whose product is None are skipped for both sums.
        """
        item_count = 0
        total = Decimal("0")

        for it in items:
            if it.product is None:
                continue
            item_count += it.quantity
            total += it.product.price * it.quantity

        return CartTotals(item_count=item_count, total=total.quantize(CENTS))

    # ---- public operations ----

    def list_items(
        self,
        session: Session,
        session_id: str,
    ) -> list[CartItemWithProduct]:
        """
        Return the session's cart rows in insertion order, each joined
        with its product (None when the product is gone or inactive).
        """
        items = self.cart_repo.list_for_session(session, session_id)
        products = self.product_repo.get_active_by_ids(
            session, [it.product_id for it in items]
        )

        joined: list[CartItemWithProduct] = []
        for it in items:
            product = products.get(it.product_id)
            joined.append(
                CartItemWithProduct(
                    id=it.id,
                    session_id=it.session_id,
                    product_id=it.product_id,
                    quantity=it.quantity,
                    created_at=it.created_at,
                    product=ProductRead.model_validate(product) if product else None,
                )
            )
        return joined

    def get_summary(
        self,
        session: Session,
        session_id: str,
    ) -> CartSummary:
        """
        Return the joined items together with item_count and total.
        """
        items = self.list_items(session, session_id)
        totals = self.summarize(items)
        return CartSummary(items=items, item_count=totals.item_count, total=totals.total)

    def add_item(
        self,
        session: Session,
        session_id: str,
        product_id: uuid.UUID,
        quantity: int = 1,
    ) -> CartItem:
        """
        Add a product to the cart.

        Rules:
          - product must exist and be active
          - an existing row gets existing_quantity + quantity
          - otherwise a new row is created with `quantity`
          - the merged quantity may not exceed MAX_QUANTITY (400)

        The increment is a single upsert, so concurrent adds for the same
        (session, product) never lose an update.
        """
        self._require_valid_quantity(quantity)
        self._get_valid_product(session, product_id)

        item = self.cart_repo.upsert_increment(session, session_id, product_id, quantity)
        if item is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Quantity must be at most {MAX_QUANTITY}",
            )
        logger.info(
            "cart add session=%s product=%s +%d -> %d",
            session_id, product_id, quantity, item.quantity,
        )
        return item

    def update_quantity(
        self,
        session: Session,
        session_id: str,
        product_id: uuid.UUID,
        quantity: int,
    ) -> CartItem:
        """
        Overwrite the quantity of an item already in the cart.

        Missing item => 404, nothing is created.
        """
        self._require_valid_quantity(quantity)
        item = self.cart_repo.get_item(session, session_id, product_id)

        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cart item not found",
            )

        item.quantity = quantity
        item = self.cart_repo.update(session, item)
        logger.info("cart update session=%s product=%s = %d", session_id, product_id, quantity)
        return item

    def remove_item(
        self,
        session: Session,
        session_id: str,
        product_id: uuid.UUID,
    ) -> None:
        """
        Remove a product from the cart. Removing an absent product is a no-op.
        """
        removed = self.cart_repo.delete_item(session, session_id, product_id)
        logger.info("cart remove session=%s product=%s removed=%d", session_id, product_id, removed)

    def clear_cart(
        self,
        session: Session,
        session_id: str,
    ) -> None:
        """
        Delete every item of the session's cart.
        """
        removed = self.cart_repo.clear(session, session_id)
        logger.info("cart clear session=%s removed=%d", session_id, removed)
