# storefront/repositories/cart_repo.py
import threading
import uuid
from collections import defaultdict
from datetime import datetime, timezone

from sqlalchemy import delete
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import Session, col, select

from storefront.models.cart import MAX_QUANTITY, CartItem

# Dialects with INSERT ... ON CONFLICT DO UPDATE
UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class KeyedLocks:
    """
    One threading.Lock per (session_id, product_id) key.

    Only used when the database cannot do the add-to-cart upsert in a
    single statement. Serialises writers inside this process only.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[tuple[str, uuid.UUID], threading.Lock] = defaultdict(threading.Lock)

    def get(self, session_id: str, product_id: uuid.UUID) -> threading.Lock:
        with self._guard:
            return self._locks[(session_id, product_id)]


class CartRepository:
    """
    Data access layer for cart_items.

    Rows are addressed by (session_id, product_id); the table holds at
    most one row per pair. Business logic lives in CartService.
    """

    def __init__(self):
        self._locks = KeyedLocks()

    # ---- Reads ----

    def list_for_session(self, session: Session, session_id: str) -> list[CartItem]:
        stmt = (
            select(CartItem)
            .where(CartItem.session_id == session_id)
            .order_by(col(CartItem.created_at), col(CartItem.id))
        )
        return session.exec(stmt).all()

    def get_item(
        self, session: Session, session_id: str, product_id: uuid.UUID
    ) -> CartItem | None:
        stmt = select(CartItem).where(
            CartItem.session_id == session_id, CartItem.product_id == product_id
        )
        return session.exec(stmt).first()

    # ---- Writes ----

    def upsert_increment(
        self,
        session: Session,
        session_id: str,
        product_id: uuid.UUID,
        quantity: int,
    ) -> CartItem | None:
        """
        Insert a row for (session_id, product_id) or add `quantity` to the
        existing one, atomically, and return the stored row.

        Returns None, leaving the row untouched, when the merged quantity
        would exceed MAX_QUANTITY.
        """
        insert = UPSERT_INSERTS.get(session.get_bind().dialect.name)
        if insert is None:
            return self._locked_increment(session, session_id, product_id, quantity)

        table = CartItem.__table__
        stmt = insert(table).values(
            id=uuid.uuid4(),
            session_id=session_id,
            product_id=product_id,
            quantity=quantity,
            created_at=datetime.now(timezone.utc),
        )
        merged = table.c.quantity + stmt.excluded.quantity
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.session_id, table.c.product_id],
            set_={"quantity": merged},
            where=merged <= MAX_QUANTITY,
        ).returning(table.c.id)

        item_id = session.exec(stmt).scalar_one_or_none()
        session.commit()
        if item_id is None:
            return None
        return session.get(CartItem, item_id, populate_existing=True)

    def _locked_increment(
        self,
        session: Session,
        session_id: str,
        product_id: uuid.UUID,
        quantity: int,
    ) -> CartItem | None:
        with self._locks.get(session_id, product_id):
            existing = self.get_item(session, session_id, product_id)
            if existing:
                if existing.quantity + quantity > MAX_QUANTITY:
                    return None
                existing.quantity = existing.quantity + quantity
                return self.update(session, existing)
            item = CartItem(session_id=session_id, product_id=product_id, quantity=quantity)
            return self.create(session, item)

    def create(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def update(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def delete_item(self, session: Session, session_id: str, product_id: uuid.UUID) -> int:
        """
        Delete the row for (session_id, product_id) if present.

        Returns the number of rows removed (0 or 1).
        """
        stmt = delete(CartItem).where(
            CartItem.session_id == session_id, CartItem.product_id == product_id
        )
        result = session.exec(stmt)
        session.commit()
        return result.rowcount

    def clear(self, session: Session, session_id: str) -> int:
        stmt = delete(CartItem).where(CartItem.session_id == session_id)
        result = session.exec(stmt)
        session.commit()
        return result.rowcount
