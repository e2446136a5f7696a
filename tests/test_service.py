# tests/test_service.py
import pytest

from product_api.config import Settings
from product_api.database import ProductStore
from product_api.service import paginate, parse_int


@pytest.mark.parametrize("raw,expected", [
    (None, 7),
    ("", 7),
    ("abc", 7),
    ("0", 7),
    ("3", 3),
    (" 4", 4),
    ("12abc", 12),
    ("-2", -2),
])
def test_parse_int(raw, expected):
    assert parse_int(raw, 7) == expected


def test_paginate_slices_by_page():
    items = list(range(5))
    assert paginate(items, 1, 2) == [0, 1]
    assert paginate(items, 2, 2) == [2, 3]
    assert paginate(items, 3, 2) == [4]
    assert paginate(items, 4, 2) == []


def test_store_seed_is_fresh_per_instance():
    a, b = ProductStore(), ProductStore()
    a.get("1")["name"] = "changed"
    assert b.get("1")["name"] == "Laptop"


def test_store_rejects_duplicate_ids():
    store = ProductStore()
    with pytest.raises(KeyError):
        store.add({"id": "1"})


def test_store_remove_keeps_order():
    store = ProductStore()
    assert store.remove("1")["name"] == "Laptop"
    assert store.remove("1") is None
    assert [p["id"] for p in store.all()] == ["2", "3"]


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("API_KEY", "s3cret")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example")
    s = Settings.from_env()
    assert s.port == 8080
    assert s.api_key == "s3cret"
    assert s.cors_origins == ["http://a.example", "http://b.example"]


def test_settings_defaults(monkeypatch):
    for var in ("PORT", "API_KEY", "HOST"):
        monkeypatch.delenv(var, raising=False)
    s = Settings.from_env()
    assert s.port == 3000
    assert s.api_key == "12345"
