# storefront/routers/seed.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories.category_repo import CategoryRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.services.seed_service import SeedService

router = APIRouter(tags=["Sample data"])

service = SeedService(CategoryRepository(), ProductRepository())


@router.post("/init-data")
def init_data(session: Session = Depends(get_session)) -> dict[str, str]:
    """
    Load the demo categories and products (skips rows that already exist).
    """
    service.load_sample_data(session)
    return {"message": "Sample data initialized successfully"}
