# storefront/services/category_service.py
from fastapi import HTTPException, status
from sqlmodel import Session

from storefront.models.category import Category
from storefront.repositories.category_repo import CategoryRepository
from storefront.schemas.category import CategoryCreate


class CategoryService:
    """
    Business logic for categories: slug lookup and slug uniqueness.
    """

    def __init__(self, repo: CategoryRepository):
        self.repo = repo

    def list_categories(self, session: Session) -> list[Category]:
        return self.repo.list_all(session)

    def get_by_slug(self, session: Session, slug: str) -> Category:
        category = self.repo.get_by_slug(session, slug)
        if not category:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Category not found",
            )
        return category

    def create_category(self, session: Session, payload: CategoryCreate) -> Category:
        if self.repo.get_by_slug(session, payload.slug) is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Category slug already exists",
            )
        return self.repo.create(session, Category.model_validate(payload))
