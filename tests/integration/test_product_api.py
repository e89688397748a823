"""Integration tests for Product API endpoints.

Covers:
- GET/POST /api/products and PUT/DELETE /api/products/{id}.
- Validation (400) and not-found (404) mapping.
- Store failures answered with a generic 500.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from bson import ObjectId
from pymongo.errors import AutoReconnect

pytestmark = pytest.mark.integration

LIST_URL = "/api/products"
REPOSITORY = "modules.products.repositories.mongo_repository.ProductMongoRepository"


def _detail_url(product_id) -> str:
    return f"/api/products/{product_id}"


@pytest.fixture()
def sample_product(store):
    """A persisted product document; returns its id."""
    result = store.products.insert_one({"name": "Widget Alpha", "description": "A fine widget"})
    return str(result.inserted_id)


# ===========================================================================
# LIST
# ===========================================================================


class TestProductList:
    def test_list_empty(self, api_client):
        response = api_client.get(LIST_URL)
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_products(self, api_client, sample_product):
        response = api_client.get(LIST_URL)
        assert response.status_code == 200
        assert response.json() == [
            {"id": sample_product, "name": "Widget Alpha", "description": "A fine widget"}
        ]

    def test_list_returns_every_product(self, api_client, store):
        store.products.insert_many(
            [{"name": f"P{i}", "description": "d"} for i in range(25)]
        )
        response = api_client.get(LIST_URL)
        assert len(response.json()) == 25

    def test_store_failure_returns_500(self, api_client):
        with patch(f"{REPOSITORY}.list", side_effect=AutoReconnect("down")):
            response = api_client.get(LIST_URL)
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch products"}


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, auth_client, store):
        response = auth_client.post(
            LIST_URL, {"name": "Pen", "description": "Blue ink pen"}, format="json"
        )
        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Product added successfully"
        assert data["product"]["name"] == "Pen"
        assert data["product"]["description"] == "Blue ink pen"
        assert ObjectId.is_valid(data["product"]["id"])
        assert store.products.count_documents({"_id": ObjectId(data["product"]["id"])}) == 1

    def test_created_product_is_listed(self, auth_client, api_client):
        created = auth_client.post(
            LIST_URL, {"name": "Pen", "description": "Blue ink pen"}, format="json"
        ).json()["product"]
        assert api_client.get(LIST_URL).json() == [created]

    def test_extra_fields_are_ignored(self, auth_client, store):
        response = auth_client.post(
            LIST_URL,
            {"name": "Pen", "description": "Blue", "price": 3, "_id": "x"},
            format="json",
        )
        assert response.status_code == 201
        stored = store.products.find_one()
        assert set(stored) == {"_id", "name", "description"}

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Pen"},
            {"description": "Blue ink pen"},
            {"name": "", "description": "Blue ink pen"},
            {},
        ],
    )
    def test_missing_fields_returns_400(self, auth_client, store, payload):
        response = auth_client.post(LIST_URL, payload, format="json")
        assert response.status_code == 400
        assert response.json() == {"error": "Product name and description are required"}
        assert store.products.count_documents({}) == 0

    def test_store_failure_returns_500(self, auth_client):
        with patch(f"{REPOSITORY}.save", side_effect=AutoReconnect("down")):
            response = auth_client.post(
                LIST_URL, {"name": "Pen", "description": "Blue"}, format="json"
            )
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to insert product"}


# ===========================================================================
# UPDATE
# ===========================================================================


class TestProductUpdate:
    def test_update_success(self, auth_client, store, sample_product):
        response = auth_client.put(
            _detail_url(sample_product),
            {"name": "Widget Beta", "description": "An even finer widget"},
            format="json",
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Product updated successfully"
        assert data["product"] == {
            "id": sample_product,
            "name": "Widget Beta",
            "description": "An even finer widget",
        }
        stored = store.products.find_one({"_id": ObjectId(sample_product)})
        assert stored["name"] == "Widget Beta"

    def test_update_not_found(self, auth_client):
        response = auth_client.put(
            _detail_url(ObjectId()), {"name": "X", "description": "Y"}, format="json"
        )
        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_update_malformed_id_is_not_found(self, auth_client):
        response = auth_client.put(
            _detail_url("not-an-id"), {"name": "X", "description": "Y"}, format="json"
        )
        assert response.status_code == 404

    def test_update_missing_fields_returns_400(self, auth_client, store, sample_product):
        response = auth_client.put(
            _detail_url(sample_product), {"name": "Only name"}, format="json"
        )
        assert response.status_code == 400
        assert store.products.find_one()["name"] == "Widget Alpha"

    def test_store_failure_returns_500(self, auth_client, sample_product):
        with patch(f"{REPOSITORY}.update_fields", side_effect=AutoReconnect("down")):
            response = auth_client.put(
                _detail_url(sample_product), {"name": "X", "description": "Y"}, format="json"
            )
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to update product"}


# ===========================================================================
# DELETE
# ===========================================================================


class TestProductDelete:
    def test_delete_success(self, auth_client, store, sample_product):
        response = auth_client.delete(_detail_url(sample_product))
        assert response.status_code == 200
        assert response.json() == {"message": "Product deleted successfully"}
        assert store.products.count_documents({}) == 0

    def test_delete_not_found(self, auth_client):
        response = auth_client.delete(_detail_url(ObjectId()))
        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}

    def test_delete_twice(self, auth_client, sample_product):
        assert auth_client.delete(_detail_url(sample_product)).status_code == 200
        assert auth_client.delete(_detail_url(sample_product)).status_code == 404

    def test_store_failure_returns_500(self, auth_client, sample_product):
        with patch(f"{REPOSITORY}.delete", side_effect=AutoReconnect("down")):
            response = auth_client.delete(_detail_url(sample_product))
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to delete product"}
