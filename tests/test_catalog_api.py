"""
Component tests for categories and products.
"""
import uuid
from decimal import Decimal


class TestCategories:
    def test_list_is_ordered_by_name(self, test_client, make_category):
        make_category(name="Sports", slug="sports")
        make_category(name="Books", slug="books")

        response = test_client.get("/api/categories")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Books", "Sports"]

    def test_get_by_slug(self, test_client, make_category):
        make_category(name="Fashion", slug="fashion")

        response = test_client.get("/api/categories/fashion")

        assert response.status_code == 200
        assert response.json()["name"] == "Fashion"

    def test_unknown_slug_is_404(self, test_client):
        response = test_client.get("/api/categories/nope")

        assert response.status_code == 404
        assert response.json()["detail"] == "Category not found"

    def test_create(self, test_client):
        response = test_client.post(
            "/api/categories",
            json={"name": "Beauty", "slug": "beauty", "description": "Cosmetics"},
        )

        assert response.status_code == 201
        assert response.json()["slug"] == "beauty"
        assert test_client.get("/api/categories/beauty").status_code == 200

    def test_duplicate_slug_is_400(self, test_client, make_category):
        make_category(name="Books", slug="books")

        response = test_client.post("/api/categories", json={"name": "Other", "slug": "books"})

        assert response.status_code == 400

    def test_blank_name_is_400(self, test_client):
        response = test_client.post("/api/categories", json={"name": "  ", "slug": "x"})

        assert response.status_code == 400


class TestProducts:
    def test_list_hides_inactive(self, test_client, make_product):
        make_product(name="Visible")
        make_product(name="Hidden", is_active=False)

        names = [p["name"] for p in test_client.get("/api/products").json()]

        assert names == ["Visible"]

    def test_list_includes_category(self, test_client, make_product, make_category):
        category = make_category()
        make_product(name="Phone", category_id=category.id)
        make_product(name="Loose")

        products = {p["name"]: p for p in test_client.get("/api/products").json()}

        assert products["Phone"]["category"]["slug"] == "electronics"
        assert products["Loose"]["category"] is None

    def test_limit_and_offset(self, test_client, make_product):
        for i in range(5):
            make_product(name=f"P{i}")

        page = test_client.get("/api/products", params={"limit": 2, "offset": 1}).json()

        assert len(page) == 2

    def test_filter_by_category(self, test_client, make_product, make_category):
        books = make_category(name="Books", slug="books")
        make_product(name="Novel", category_id=books.id)
        make_product(name="Mouse")

        response = test_client.get("/api/products", params={"category_id": str(books.id)})

        assert [p["name"] for p in response.json()] == ["Novel"]

    def test_filter_by_category_camel_case_param(self, test_client, make_product, make_category):
        books = make_category(name="Books", slug="books")
        make_product(name="Novel", category_id=books.id)
        make_product(name="Mouse")

        response = test_client.get("/api/products", params={"categoryId": str(books.id)})

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Novel"]

    def test_search_is_case_insensitive_on_name_and_description(self, test_client, make_product):
        make_product(name="Wireless Gaming Mouse")
        make_product(name="Yoga Mat", description="Non-slip, works WIRELESSly with your feet")
        make_product(name="Novel")

        response = test_client.get("/api/products", params={"search": "wireless"})

        assert sorted(p["name"] for p in response.json()) == ["Wireless Gaming Mouse", "Yoga Mat"]

    def test_featured_wins_over_other_filters(self, test_client, make_product):
        make_product(name="Star", is_featured=True)
        make_product(name="Plain")

        response = test_client.get("/api/products", params={"featured": "true", "search": "Plain"})

        assert [p["name"] for p in response.json()] == ["Star"]

    def test_get_one(self, test_client, make_product):
        product = make_product(name="Headphones", price="199.99")

        response = test_client.get(f"/api/products/{product.id}")

        assert response.status_code == 200
        assert Decimal(response.json()["price"]) == Decimal("199.99")

    def test_get_inactive_is_404(self, test_client, make_product):
        product = make_product(is_active=False)

        response = test_client.get(f"/api/products/{product.id}")

        assert response.status_code == 404

    def test_create(self, test_client, make_category):
        category = make_category()

        response = test_client.post(
            "/api/products",
            json={
                "name": "Smart Watch",
                "price": "299.99",
                "image_url": "https://img.example.org/watch.jpg",
                "category_id": str(category.id),
                "stock": 10,
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["price"]) == Decimal("299.99")
        assert data["is_active"] is True
        assert test_client.get(f"/api/products/{data['id']}").status_code == 200

    def test_create_with_unknown_category_is_400(self, test_client):
        response = test_client.post(
            "/api/products",
            json={
                "name": "Smart Watch",
                "price": "299.99",
                "image_url": "https://img.example.org/watch.jpg",
                "category_id": str(uuid.uuid4()),
            },
        )

        assert response.status_code == 400

    def test_create_with_negative_price_is_400(self, test_client):
        response = test_client.post(
            "/api/products",
            json={"name": "Bad", "price": "-1", "image_url": "x.jpg"},
        )

        assert response.status_code == 400
