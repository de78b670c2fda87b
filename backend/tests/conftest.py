import pytest
from fastapi.testclient import TestClient

from item_api.main import create_app
from item_api.storage import ItemStore


@pytest.fixture
def store():
    return ItemStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture
def widget(client):
    response = client.post("/api/items", json={"name": "Widget", "price": 9.99})
    assert response.status_code == 201
    return response.json()
