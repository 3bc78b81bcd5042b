# storefront/repositories/product_repo.py
import uuid

from sqlalchemy import or_
from sqlmodel import Session, col, select

from storefront.models.category import Category
from storefront.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    - Storefront listings only ever see active products and come back
      as (Product, Category | None) pairs, newest first.
    """

    # ----- Helpers -----

    @staticmethod
    def _active_with_category():
        return (
            select(Product, Category)
            .join(Category, Product.category_id == Category.id, isouter=True)
            .where(Product.is_active == True)  # noqa: E712
        )

    # ----- Lookups -----

    def get_by_id(self, session: Session, product_id: uuid.UUID) -> Product | None:
        return session.get(Product, product_id)

    def get_by_name(self, session: Session, name: str) -> Product | None:
        stmt = select(Product).where(Product.name == name)
        return session.exec(stmt).first()

    def get_active_by_ids(
        self,
        session: Session,
        product_ids: list[uuid.UUID],
    ) -> dict[uuid.UUID, Product]:
        """
        Map id -> Product for the active products among `product_ids`.
        Missing or inactive ids are simply absent from the result.
        """
        if not product_ids:
            return {}
        stmt = select(Product).where(
            col(Product.id).in_(product_ids),
            Product.is_active == True,  # noqa: E712
        )
        return {p.id: p for p in session.exec(stmt).all()}

    def get_active_with_category(
        self,
        session: Session,
        product_id: uuid.UUID,
    ) -> tuple[Product, Category | None] | None:
        stmt = self._active_with_category().where(Product.id == product_id)
        return session.exec(stmt).first()

    # ----- Listings -----

    def list_active(
        self,
        session: Session,
        limit: int = 20,
        offset: int = 0,
    ) -> list[tuple[Product, Category | None]]:
        stmt = (
            self._active_with_category()
            .order_by(col(Product.created_at).desc())
            .offset(offset)
            .limit(limit)
        )
        return session.exec(stmt).all()

    def list_by_category(
        self,
        session: Session,
        category_id: uuid.UUID,
        limit: int = 20,
        offset: int = 0,
    ) -> list[tuple[Product, Category | None]]:
        stmt = (
            self._active_with_category()
            .where(Product.category_id == category_id)
            .order_by(col(Product.created_at).desc())
            .offset(offset)
            .limit(limit)
        )
        return session.exec(stmt).all()

    def list_featured(
        self,
        session: Session,
        limit: int = 8,
    ) -> list[tuple[Product, Category | None]]:
        stmt = (
            self._active_with_category()
            .where(Product.is_featured == True)  # noqa: E712
            .order_by(col(Product.created_at).desc())
            .limit(limit)
        )
        return session.exec(stmt).all()

    def search(
        self,
        session: Session,
        query: str,
        limit: int = 20,
        offset: int = 0,
    ) -> list[tuple[Product, Category | None]]:
        """
        Case-insensitive substring match on name or description.
        """
        pattern = f"%{query}%"
        stmt = (
            self._active_with_category()
            .where(
                or_(
                    col(Product.name).ilike(pattern),
                    col(Product.description).ilike(pattern),
                )
            )
            .order_by(col(Product.created_at).desc())
            .offset(offset)
            .limit(limit)
        )
        return session.exec(stmt).all()

    # ----- CRUD -----

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product
