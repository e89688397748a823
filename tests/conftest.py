import pytest
from rest_framework.test import APIClient

from modules.core.store import get_store
from modules.sellers.models import Seller
from modules.sellers.tokens import issue_token


@pytest.fixture(autouse=True)
def store():
    """The app's (in-memory) document store, emptied around every test."""
    store = get_store()
    store.sellers.delete_many({})
    store.products.delete_many({})
    yield store
    store.sellers.delete_many({})
    store.products.delete_many({})


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def seller_token():
    """A valid bearer token for a (not persisted) seller."""
    return issue_token(Seller(id="65f000000000000000000001", username="tester", password="x"))


@pytest.fixture()
def auth_client(seller_token):
    """APIClient sending a valid ``Authorization: Bearer`` header."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {seller_token}")
    return client
