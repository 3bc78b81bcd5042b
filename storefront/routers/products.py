# storefront/routers/products.py
import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories.category_repo import CategoryRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import ProductCreate, ProductRead, ProductWithCategory
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
category_repo = CategoryRepository()
service = ProductService(repo, category_repo)


@router.get("", response_model=list[ProductWithCategory])
def list_products(
    session: Session = Depends(get_session),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    category_id: uuid.UUID | None = None,
    category_id_camel: uuid.UUID | None = Query(
        default=None, alias="categoryId", include_in_schema=False
    ),
    search: str | None = None,
    featured: bool = False,
):
    """
    List active products, newest first.

    - `featured=true` returns the featured products (ignores offset).
    - else `search` matches name/description, case-insensitive.
    - else `category_id` filters by category (`categoryId` is accepted too).
    """
    return service.list_products(
        session,
        limit=limit,
        offset=offset,
        category_id=category_id or category_id_camel,
        search=search,
        featured=featured,
    )


@router.get("/{product_id}", response_model=ProductWithCategory)
def get_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a single active product by id, with its category.
    """
    return service.get_product(session, product_id)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new product.
    """
    return service.create_product(session, payload)
