"""
Tests for the sample catalog loader.
"""
from storefront.services.seed_service import SAMPLE_CATEGORIES, SAMPLE_PRODUCTS


def test_init_data_loads_catalog(test_client):
    response = test_client.post("/api/init-data")

    assert response.status_code == 200
    assert response.json() == {"message": "Sample data initialized successfully"}
    assert len(test_client.get("/api/categories").json()) == len(SAMPLE_CATEGORIES)
    products = test_client.get("/api/products", params={"limit": 100}).json()
    assert len(products) == len(SAMPLE_PRODUCTS)
    assert all(p["category"] is not None for p in products)


def test_init_data_is_repeatable(test_client):
    test_client.post("/api/init-data")
    response = test_client.post("/api/init-data")

    assert response.status_code == 200
    assert len(test_client.get("/api/categories").json()) == len(SAMPLE_CATEGORIES)
    products = test_client.get("/api/products", params={"limit": 100}).json()
    assert len(products) == len(SAMPLE_PRODUCTS)


def test_featured_sample_products(test_client):
    test_client.post("/api/init-data")

    featured = test_client.get("/api/products", params={"featured": "true"}).json()

    assert len(featured) == 4
    assert all(p["is_featured"] for p in featured)


def test_sample_products_can_go_in_the_cart(test_client):
    test_client.post("/api/init-data")
    [novel] = test_client.get("/api/products", params={"search": "novel"}).json()

    test_client.post("/api/cart", json={"product_id": novel["id"], "quantity": 2})
    summary = test_client.get("/api/cart/summary").json()

    assert summary["item_count"] == 2
    assert summary["total"] == "39.98"
