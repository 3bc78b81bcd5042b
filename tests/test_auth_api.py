"""
Component tests for registration, login and the current-user endpoint.
"""

REGISTER = {
    "email": "Shopper@Mail.com",
    "password": "s3cret-pass",
    "first_name": "Sam",
    "last_name": "Shopper",
}


def register(client, **overrides):
    return client.post("/api/register", json={**REGISTER, **overrides})


class TestRegister:
    def test_register_returns_user_and_token(self, test_client):
        response = register(test_client)

        assert response.status_code == 201
        data = response.json()
        assert data["user"]["email"] == "shopper@mail.com"
        assert data["user"]["first_name"] == "Sam"
        assert data["access_token"]
        assert data["token_type"] == "bearer"

    def test_password_is_never_returned(self, test_client):
        data = register(test_client).json()

        assert "password" not in data["user"]

    def test_duplicate_email_is_400(self, test_client):
        register(test_client)

        response = register(test_client, email="shopper@mail.com")

        assert response.status_code == 400
        assert response.json()["detail"] == "User already exists with this email"

    def test_invalid_email_is_400(self, test_client):
        response = register(test_client, email="not-an-email")

        assert response.status_code == 400


class TestLogin:
    def test_login_with_correct_password(self, test_client):
        register(test_client)

        response = test_client.post(
            "/api/login", json={"email": "shopper@mail.com", "password": "s3cret-pass"}
        )

        assert response.status_code == 200
        assert response.json()["user"]["last_name"] == "Shopper"

    def test_wrong_password_is_401(self, test_client):
        register(test_client)

        response = test_client.post(
            "/api/login", json={"email": "shopper@mail.com", "password": "wrong-pass"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    def test_unknown_email_is_401(self, test_client):
        response = test_client.post(
            "/api/login", json={"email": "ghost@mail.com", "password": "whatever"}
        )

        assert response.status_code == 401


class TestCurrentUser:
    def test_requires_token(self, test_client):
        response = test_client.get("/api/user")

        assert response.status_code == 401

    def test_bad_token_is_401(self, test_client):
        response = test_client.get("/api/user", headers={"Authorization": "Bearer nonsense"})

        assert response.status_code == 401

    def test_token_from_login_works(self, test_client):
        token = register(test_client).json()["access_token"]

        response = test_client.get("/api/user", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["email"] == "shopper@mail.com"


class TestLogout:
    def test_logout_starts_a_new_cart_session(self, test_client, make_product):
        product = make_product()
        test_client.post("/api/cart", json={"product_id": str(product.id)})

        response = test_client.post("/api/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out successfully"}
        assert test_client.get("/api/cart").json() == []
