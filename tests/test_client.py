# tests/test_client.py
import httpx
import pytest
from fastapi.testclient import TestClient

from sdk.product_client import ProductClient


@pytest.fixture
def sdk(app, settings):
    return ProductClient(base_url="http://testserver", api_key=settings.api_key, session=TestClient(app))


def test_sdk_crud_roundtrip(sdk):
    assert sdk.welcome().startswith("Welcome to the Product API!")
    assert len(sdk.list_products()) == 3

    created = sdk.create_product("Toaster", "Two-slot toaster", 30, "kitchen", in_stock=False)
    assert created["inStock"] is False
    assert sdk.get_product(created["id"]) == created

    updated = sdk.update_product(created["id"], {
        "name": "Toaster XL", "description": "Four-slot toaster", "price": 45, "category": "kitchen", "inStock": True,
    })
    assert updated["id"] == created["id"]
    assert updated["name"] == "Toaster XL"

    assert sdk.stats() == {"electronics": 2, "kitchen": 2}
    assert sdk.delete_product(created["id"])["name"] == "Toaster XL"
    assert [p["id"] for p in sdk.list_products()] == ["1", "2", "3"]


def test_sdk_filter_passes_only_given_params(sdk):
    page = sdk.filter_products(category="electronics", page=2, limit=1)
    assert page["total"] == 2
    assert [p["name"] for p in page["data"]] == ["Smartphone"]

    assert sdk.filter_products(search="coffee")["data"][0]["id"] == "3"


def test_sdk_raises_on_error_status(sdk):
    with pytest.raises(httpx.HTTPStatusError) as exc:
        sdk.get_product("missing")
    assert exc.value.response.status_code == 404


def test_sdk_sends_api_key(app):
    c = ProductClient(base_url="http://testserver", api_key="wrong", session=TestClient(app))
    with pytest.raises(httpx.HTTPStatusError) as exc:
        c.list_products()
    assert exc.value.response.status_code == 401
