"""
Shared fixtures.

Every test gets a fresh in-memory SQLite database; the app's
`get_session` dependency is overridden to use it.
"""
import os
from decimal import Decimal

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from storefront.database import get_session
from storefront.main import app
from storefront.models.category import Category
from storefront.models.product import Product


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def test_client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(session):
    """Factory inserting a product straight into the database."""

    def _make(name="Widget", price="10.00", **fields):
        product = Product(
            name=name,
            price=Decimal(price),
            image_url="https://img.example.org/widget.jpg",
            **fields,
        )
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    return _make


@pytest.fixture
def make_category(session):
    def _make(name="Electronics", slug="electronics"):
        category = Category(name=name, slug=slug)
        session.add(category)
        session.commit()
        session.refresh(category)
        return category

    return _make
