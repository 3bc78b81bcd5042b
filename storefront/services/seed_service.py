# storefront/services/seed_service.py
import logging
from decimal import Decimal

from sqlmodel import Session

from storefront.models.category import Category
from storefront.models.product import Product
from storefront.repositories.category_repo import CategoryRepository
from storefront.repositories.product_repo import ProductRepository

logger = logging.getLogger(__name__)

_IMG = "https://images.unsplash.com/photo-{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=400"

SAMPLE_CATEGORIES: list[dict] = [
    {
        "name": "Electronics",
        "slug": "electronics",
        "description": "Latest electronic devices and gadgets",
        "image_url": _IMG.format("1498049794561-7780e7231661"),
    },
    {
        "name": "Fashion",
        "slug": "fashion",
        "description": "Trendy clothing and accessories",
        "image_url": _IMG.format("1445205170230-053b83016050"),
    },
    {
        "name": "Home & Garden",
        "slug": "home-garden",
        "description": "Everything for your home and garden",
        "image_url": _IMG.format("1586023492125-27b2c045efd7"),
    },
    {
        "name": "Sports",
        "slug": "sports",
        "description": "Sports and fitness equipment",
        "image_url": _IMG.format("1571019613454-1cb2f99b2d8b"),
    },
    {
        "name": "Books",
        "slug": "books",
        "description": "Books and literature",
        "image_url": _IMG.format("1507003211169-0a1dd7228f2d"),
    },
    {
        "name": "Beauty",
        "slug": "beauty",
        "description": "Beauty and cosmetics",
        "image_url": _IMG.format("1596462502278-27bfdc403348"),
    },
]

# (category slug, product fields)
SAMPLE_PRODUCTS: list[tuple[str, dict]] = [
    ("electronics", {
        "name": "Premium Wireless Headphones",
        "description": "High-quality sound with active noise cancellation",
        "price": Decimal("199.99"),
        "original_price": Decimal("249.99"),
        "image_url": _IMG.format("1505740420928-5e560c06d30e"),
        "stock": 50,
        "is_featured": True,
        "rating": Decimal("4.8"),
        "review_count": 156,
    }),
    ("electronics", {
        "name": "Latest Smartphone Pro",
        "description": "Advanced camera system and lightning-fast performance",
        "price": Decimal("899.00"),
        "image_url": _IMG.format("1511707171634-5f897ff02aa9"),
        "stock": 30,
        "is_featured": True,
        "rating": Decimal("4.5"),
        "review_count": 89,
    }),
    ("electronics", {
        "name": "Professional Laptop Pro",
        "description": "High-performance laptop for creative professionals",
        "price": Decimal("1299.00"),
        "original_price": Decimal("1499.00"),
        "image_url": _IMG.format("1496181133206-80ce9b88a853"),
        "stock": 25,
        "is_featured": True,
        "rating": Decimal("4.9"),
        "review_count": 234,
    }),
    ("electronics", {
        "name": "Smart Fitness Watch",
        "description": "Track your health and stay connected",
        "price": Decimal("299.99"),
        "image_url": _IMG.format("1523275335684-37898b6baf30"),
        "stock": 75,
        "is_featured": True,
        "rating": Decimal("4.3"),
        "review_count": 127,
    }),
    ("electronics", {
        "name": "Wireless Gaming Mouse",
        "description": "High-precision gaming mouse with RGB lighting",
        "price": Decimal("79.99"),
        "image_url": _IMG.format("1527864550417-7fd91fc51a46"),
        "stock": 100,
        "rating": Decimal("4.6"),
        "review_count": 92,
    }),
    ("fashion", {
        "name": "Designer T-Shirt",
        "description": "Premium cotton t-shirt with modern design",
        "price": Decimal("39.99"),
        "image_url": _IMG.format("1521572163474-6864f9cf17ab"),
        "stock": 200,
        "rating": Decimal("4.2"),
        "review_count": 45,
    }),
    ("sports", {
        "name": "Yoga Mat Pro",
        "description": "Non-slip yoga mat for all skill levels",
        "price": Decimal("49.99"),
        "image_url": _IMG.format("1544367567-0f2fcb009e0b"),
        "stock": 80,
        "rating": Decimal("4.7"),
        "review_count": 73,
    }),
    ("books", {
        "name": "The Great Novel",
        "description": "Bestselling fiction novel of the year",
        "price": Decimal("19.99"),
        "image_url": _IMG.format("1481627834876-b7833e8f5570"),
        "stock": 150,
        "rating": Decimal("4.8"),
        "review_count": 312,
    }),
]


class SeedService:
    """
    Loads the demo catalog.

    Safe to call repeatedly: categories are matched by slug and products
    by name, existing rows are left alone.
    """

    def __init__(self, category_repo: CategoryRepository, product_repo: ProductRepository):
        self.category_repo = category_repo
        self.product_repo = product_repo

    def load_sample_data(self, session: Session) -> tuple[int, int]:
        """
        Insert missing sample categories and products.

        Returns:
            (categories created, products created)
        """
        categories: dict[str, Category] = {}
        created_categories = 0
        for fields in SAMPLE_CATEGORIES:
            category = self.category_repo.get_by_slug(session, fields["slug"])
            if category is None:
                category = self.category_repo.create(session, Category(**fields))
                created_categories += 1
            categories[category.slug] = category

        created_products = 0
        for slug, fields in SAMPLE_PRODUCTS:
            if self.product_repo.get_by_name(session, fields["name"]) is not None:
                continue
            product = Product(category_id=categories[slug].id, **fields)
            self.product_repo.create(session, product)
            created_products += 1

        logger.info(
            "sample data: %d categories, %d products created",
            created_categories, created_products,
        )
        return created_categories, created_products
