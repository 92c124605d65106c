"""Tests for product API endpoints."""

import pytest
from fastapi.testclient import TestClient


def create_product(client: TestClient, name: str = "Widget", price: float = 9.99) -> dict:
    """Create a product through the API."""
    response = client.post("/products", json={"name": name, "price": price})
    assert response.status_code == 201
    return response.json()


class TestCreateProduct:
    """Tests for POST /products endpoint."""

    def test_create_success(self, client: TestClient) -> None:
        """Should create an available product."""
        response = client.post("/products", json={"name": "Widget", "price": 9.99})
        assert response.status_code == 201

        data = response.json()
        assert isinstance(data["id"], int)
        assert data["name"] == "Widget"
        assert data["price"] == pytest.approx(9.99)
        assert data["available"] is True
        assert "created_at" in data
        assert "updated_at" in data

    def test_create_missing_price(self, client: TestClient) -> None:
        """Should reject payloads without a price."""
        response = client.post("/products", json={"name": "Widget"})
        assert response.status_code == 400

        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert data["status"] == 400
        assert any(d["field"].endswith("price") for d in data["details"])

    @pytest.mark.parametrize("price", ["Infinity", "-Infinity", "NaN"])
    def test_create_non_finite_price(self, client: TestClient, price: str) -> None:
        """Should reject prices that cannot be stored as numbers."""
        response = client.post(
            "/products",
            content=f'{{"name": "Widget", "price": {price}}}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400

        data = response.json()
        assert data["error_code"] == "VALIDATION_ERROR"
        assert any(d["field"].endswith("price") for d in data["details"])

        # Nothing was stored
        assert client.get("/products").status_code == 404


class TestListProducts:
    """Tests for GET /products endpoint."""

    def test_list_empty_catalog(self, client: TestClient) -> None:
        """Page 1 of an empty catalog does not exist."""
        response = client.get("/products")
        assert response.status_code == 404

        data = response.json()
        assert data["message"] == "Page number 1 does not exist."
        assert data["status"] == 404
        assert data["error_code"] == "NOT_FOUND"

    def test_list_pagination(self, client: TestClient) -> None:
        """Should slice products and report metadata."""
        for i in range(5):
            create_product(client, name=f"Product {i}")

        response = client.get("/products?page=3&limit=2")
        assert response.status_code == 200

        data = response.json()
        assert len(data["data"]) == 1
        assert data["data"][0]["name"] == "Product 4"
        assert data["metadata"] == {"total": 5, "page": 3, "last_page": 3}

    def test_list_default_limit(self, client: TestClient) -> None:
        """Should use the configured default page size."""
        for i in range(12):
            create_product(client, name=f"Product {i}")

        response = client.get("/products")
        assert response.status_code == 200

        data = response.json()
        assert len(data["data"]) == 10
        assert data["metadata"]["last_page"] == 2

    def test_list_page_out_of_range(self, client: TestClient) -> None:
        """Pages past the last page fail with 404."""
        create_product(client)

        response = client.get("/products?page=2&limit=10")
        assert response.status_code == 404
        assert response.json()["message"] == "Page number 2 does not exist."

    @pytest.mark.parametrize("query", ["page=0", "limit=0", "page=-1", "page=abc"])
    def test_list_invalid_pagination(self, client: TestClient, query: str) -> None:
        """Non-positive or non-numeric pagination is a bad request."""
        response = client.get(f"/products?{query}")
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"


class TestGetProduct:
    """Tests for GET /products/{id} endpoint."""

    def test_get_success(self, client: TestClient) -> None:
        """Should return the created product."""
        created = create_product(client)

        response = client.get(f"/products/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_not_found(self, client: TestClient) -> None:
        """Should return 404 for unknown ids."""
        response = client.get("/products/999")
        assert response.status_code == 404

        data = response.json()
        assert data["message"] == "Product with the id 999 does not exist"
        assert data["details"] == [{"product_id": 999}]


class TestUpdateProduct:
    """Tests for PATCH /products/{id} endpoint."""

    def test_update_success(self, client: TestClient) -> None:
        """Should apply only the provided fields."""
        created = create_product(client)

        response = client.patch(f"/products/{created['id']}", json={"price": 12.5})
        assert response.status_code == 200

        data = response.json()
        assert data["id"] == created["id"]
        assert data["name"] == "Widget"
        assert data["price"] == pytest.approx(12.5)

    def test_update_ignores_body_id(self, client: TestClient) -> None:
        """An id in the body never changes the product id."""
        created = create_product(client)

        response = client.patch(
            f"/products/{created['id']}",
            json={"id": 777, "name": "Gadget"},
        )
        assert response.status_code == 200
        assert response.json()["id"] == created["id"]
        assert client.get("/products/777").status_code == 404

    def test_update_without_data(self, client: TestClient) -> None:
        """Should return 400 when neither name nor price is given."""
        created = create_product(client)

        response = client.patch(f"/products/{created['id']}", json={})
        assert response.status_code == 400

        data = response.json()
        assert data["message"] == "no valid data received"
        assert data["error_code"] == "BAD_REQUEST"

    @pytest.mark.parametrize("price", ["Infinity", "NaN"])
    def test_update_non_finite_price(self, client: TestClient, price: str) -> None:
        """Should reject non-finite prices and keep the stored one."""
        created = create_product(client)

        response = client.patch(
            f"/products/{created['id']}",
            content=f'{{"price": {price}}}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

        stored = client.get(f"/products/{created['id']}").json()
        assert stored["price"] == pytest.approx(9.99)

    def test_update_empty_name(self, client: TestClient) -> None:
        """Should reject renaming a product to an empty name."""
        created = create_product(client)

        response = client.patch(
            f"/products/{created['id']}",
            json={"name": "", "price": 5},
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

        stored = client.get(f"/products/{created['id']}").json()
        assert stored["name"] == "Widget"

    def test_update_not_found(self, client: TestClient) -> None:
        """Should return 404 for unknown ids."""
        response = client.patch("/products/999", json={"name": "Gadget"})
        assert response.status_code == 404


class TestRemoveProduct:
    """Tests for DELETE /products/{id} endpoint."""

    def test_remove_success(self, client: TestClient) -> None:
        """Should mark the product unavailable."""
        created = create_product(client)

        response = client.delete(f"/products/{created['id']}")
        assert response.status_code == 200
        assert response.json()["available"] is False

        response = client.get(f"/products/{created['id']}")
        assert response.status_code == 404
        assert response.json()["message"] == (
            f"Product with the id {created['id']} does not exist"
        )

    def test_remove_twice(self, client: TestClient) -> None:
        """A second removal returns 404."""
        created = create_product(client)

        assert client.delete(f"/products/{created['id']}").status_code == 200
        assert client.delete(f"/products/{created['id']}").status_code == 404


class TestValidateProducts:
    """Tests for POST /products/validate endpoint."""

    def test_validate_success(self, client: TestClient) -> None:
        """Should return each existing product once."""
        first = create_product(client, name="First")
        second = create_product(client, name="Second")

        response = client.post(
            "/products/validate",
            json={"ids": [first["id"], first["id"], second["id"]]},
        )
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [first["id"], second["id"]]

    def test_validate_includes_removed(self, client: TestClient) -> None:
        """Removed products still count as existing."""
        created = create_product(client)
        client.delete(f"/products/{created['id']}")

        response = client.post("/products/validate", json={"ids": [created["id"]]})
        assert response.status_code == 200
        assert response.json()[0]["available"] is False

    def test_validate_missing(self, client: TestClient) -> None:
        """Should return 404 when any id is unknown."""
        created = create_product(client)

        response = client.post(
            "/products/validate",
            json={"ids": [created["id"], created["id"] + 1]},
        )
        assert response.status_code == 404

        data = response.json()
        assert data["message"] == "Some products where not found"
        assert data["details"] == [{"missing_ids": [created["id"] + 1]}]
