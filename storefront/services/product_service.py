# storefront/services/product_service.py
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from storefront.models.category import Category
from storefront.models.product import Product
from storefront.repositories.category_repo import CategoryRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.category import CategoryRead
from storefront.schemas.product import ProductCreate, ProductWithCategory


class ProductService:
    """
    Business logic for the product catalog.

    Responsibilities:
      - pick the right listing (featured / search / category / all)
      - attach the category to every product returned
      - validate category references on create
    """

    def __init__(self, repo: ProductRepository, category_repo: CategoryRepository):
        self.repo = repo
        self.category_repo = category_repo

    # ----- Helpers -----

    @staticmethod
    def _with_category(product: Product, category: Category | None) -> ProductWithCategory:
        read = ProductWithCategory.model_validate(product)
        read.category = CategoryRead.model_validate(category) if category else None
        return read

    # ----- Products -----

    def list_products(
        self,
        session: Session,
        limit: int = 20,
        offset: int = 0,
        category_id: uuid.UUID | None = None,
        search: str | None = None,
        featured: bool = False,
    ) -> list[ProductWithCategory]:
        """
        Storefront listing. Filters are not combined; the first one set
        wins in this order: featured, search, category.
        """
        if featured:
            rows = self.repo.list_featured(session, limit=limit)
        elif search:
            rows = self.repo.search(session, search, limit=limit, offset=offset)
        elif category_id:
            rows = self.repo.list_by_category(session, category_id, limit=limit, offset=offset)
        else:
            rows = self.repo.list_active(session, limit=limit, offset=offset)

        return [self._with_category(product, category) for product, category in rows]

    def get_product(self, session: Session, product_id: uuid.UUID) -> ProductWithCategory:
        row = self.repo.get_active_with_category(session, product_id)
        if not row:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        product, category = row
        return self._with_category(product, category)

    def create_product(
        self,
        session: Session,
        payload: ProductCreate,
    ) -> Product:
        """
        Create a new product. An explicit category_id must exist.
        """
        if payload.category_id and not self.category_repo.get_by_id(session, payload.category_id):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Category not found",
            )

        product = Product.model_validate(payload)
        return self.repo.create(session, product)
