# tests/test_filter_stats.py
from fastapi.testclient import TestClient

from product_api.database import ProductStore
from product_api.main import create_app


def _client_with(settings, products):
    store = ProductStore(seed=False)
    for i, p in enumerate(products):
        store.add({"id": f"p{i}", "description": "d", "price": i, "inStock": True, **p})
    return TestClient(create_app(settings=settings, store=store), headers={"x-api-key": settings.api_key})


def test_filter_without_params_returns_everything(client):
    body = client.get("/api/products/filter").json()
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["limit"] == 3
    assert [p["id"] for p in body["data"]] == ["1", "2", "3"]


def test_filter_category_is_case_insensitive_exact(client):
    body = client.get("/api/products/filter", params={"category": "ELECTRONICS"}).json()
    assert body["total"] == 2
    assert {p["name"] for p in body["data"]} == {"Laptop", "Smartphone"}

    body = client.get("/api/products/filter", params={"category": "electro"}).json()
    assert body["total"] == 0
    assert body["data"] == []


def test_search_is_case_insensitive_substring(client):
    body = client.get("/api/products/filter", params={"search": "PHONE"}).json()
    assert [p["name"] for p in body["data"]] == ["Smartphone"]


def test_category_and_search_intersect(settings):
    c = _client_with(settings, [
        {"name": "Blue Mug", "category": "kitchen"},
        {"name": "Blue Lamp", "category": "home"},
        {"name": "Red Mug", "category": "Kitchen"},
    ])
    body = c.get("/api/products/filter", params={"category": "kitchen", "search": "blue"}).json()
    assert body["total"] == 1
    assert body["data"][0]["name"] == "Blue Mug"


def test_pagination_second_page(settings):
    c = _client_with(settings, [{"name": f"Item {i}", "category": "misc"} for i in range(5)])
    body = c.get("/api/products/filter", params={"category": "misc", "limit": 2, "page": 2}).json()
    assert body["total"] == 5
    assert body["page"] == 2
    assert body["limit"] == 2
    assert [p["id"] for p in body["data"]] == ["p2", "p3"]

    last = c.get("/api/products/filter", params={"limit": 2, "page": 3}).json()
    assert [p["id"] for p in last["data"]] == ["p4"]


def test_pagination_falls_back_to_defaults(client):
    body = client.get("/api/products/filter", params={"page": "abc", "limit": "xyz"}).json()
    assert body["page"] == 1
    assert body["limit"] == 3
    assert len(body["data"]) == 3

    body = client.get("/api/products/filter", params={"page": 0, "limit": 0}).json()
    assert body["page"] == 1
    assert body["limit"] == 3


def test_pagination_parses_leading_digits(client):
    body = client.get("/api/products/filter", params={"page": "2abc", "limit": "1x"}).json()
    assert body["page"] == 2
    assert body["limit"] == 1
    assert [p["id"] for p in body["data"]] == ["2"]


def test_page_past_the_end_is_empty(client):
    body = client.get("/api/products/filter", params={"page": 5, "limit": 2}).json()
    assert body["total"] == 3
    assert body["data"] == []


def test_stats_counts_per_category(client):
    r = client.get("/api/products/stats")
    assert r.status_code == 200
    assert r.json() == {"electronics": 2, "kitchen": 1}


def test_stats_follow_mutations(client):
    client.delete("/api/products/3")
    client.post("/api/products", json={
        "name": "Chair", "description": "Oak chair", "price": 80, "category": "furniture", "inStock": True,
    })
    assert client.get("/api/products/stats").json() == {"electronics": 2, "furniture": 1}


def test_stats_on_empty_store(settings):
    assert _client_with(settings, []).get("/api/products/stats").json() == {}
