# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.database import ProductStore
from product_api.main import create_app

API_KEY = "test-key"


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY)


@pytest.fixture
def store():
    return ProductStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app, headers={"x-api-key": API_KEY})


@pytest.fixture
def anon_client(app):
    return TestClient(app)
