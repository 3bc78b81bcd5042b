# storefront/routers/categories.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories.category_repo import CategoryRepository
from storefront.schemas.category import CategoryCreate, CategoryRead
from storefront.services.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])

repo = CategoryRepository()
service = CategoryService(repo)


@router.get("", response_model=list[CategoryRead])
def list_categories(session: Session = Depends(get_session)):
    """List all categories ordered by name."""
    return service.list_categories(session)


@router.get("/{slug}", response_model=CategoryRead)
def get_category(slug: str, session: Session = Depends(get_session)):
    """Get a category by its slug."""
    return service.get_by_slug(session, slug)


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryCreate,
    session: Session = Depends(get_session),
):
    """Create a category. Slugs are unique."""
    return service.create_category(session, payload)
