# tests/test_products_v2.py
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from products_api.idgen import CounterIdGenerator
from products_api.main import app
from products_api.routes import get_service
from products_api.service import VersionedProductService

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

client = TestClient(app)


def _parse(ts: str) -> datetime:
    return datetime.fromisoformat(ts.replace("Z", "+00:00"))


@pytest.fixture
def frozen_service():
    service = VersionedProductService(CounterIdGenerator(1000), clock=lambda: NOW)
    app.dependency_overrides[get_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


def test_list_products_v2_envelope(frozen_service):
    r = client.get("/api/v2/products")
    assert r.status_code == 200
    body = r.json()
    assert body["version"] == "2.0"
    assert body["total"] == len(body["data"]) == 3
    assert [p["id"] for p in body["data"]] == [1, 2, 3]

    laptop, mouse, keyboard = body["data"]
    assert laptop["category"] == "Electronics"
    assert laptop["inStock"] is True
    assert keyboard["inStock"] is False
    assert mouse["category"] == "Accessories"
    assert _parse(laptop["createdAt"]) == NOW - timedelta(days=30)
    assert _parse(mouse["createdAt"]) == NOW - timedelta(days=15)
    assert _parse(keyboard["createdAt"]) == NOW - timedelta(days=7)


def test_get_product_v2_details(frozen_service):
    r = client.get("/api/v2.0/products/3")
    assert r.status_code == 200
    p = r.json()
    assert p["name"] == "Enhanced Product 3"
    assert p["price"] == 299.97
    assert p["category"] == "Sample Category"
    assert p["inStock"] is False
    assert p["description"] == "This is an enhanced description for product 3"
    assert p["tags"] == ["electronics", "featured"]
    assert _parse(p["createdAt"]) == NOW - timedelta(days=3)


def test_get_product_v2_even_id_in_stock():
    r = client.get("/api/v2/products/4")
    assert r.status_code == 200
    assert r.json()["inStock"] is True


@pytest.mark.parametrize("product_id", [0, -1, -100])
def test_get_product_v2_rejects_non_positive_id(product_id):
    r = client.get(f"/api/v2/products/{product_id}")
    assert r.status_code == 400
    assert r.text == "Invalid product ID"


def test_create_product_v2(frozen_service):
    r = client.post("/api/v2/products", json={"name": "Gaming Mouse", "price": 89.99, "category": "Gaming"})
    assert r.status_code == 201
    p = r.json()
    assert p == {
        "id": 1000,
        "name": "Gaming Mouse",
        "price": 89.99,
        "category": "Gaming",
        "inStock": True,
        "createdAt": p["createdAt"],
    }
    assert _parse(p["createdAt"]) == NOW
    assert r.headers["location"] == "/api/v2/products/1000"


def test_create_product_default_id_strategy_avoids_seed_ids():
    r = client.post("/api/v2/products", json={"name": "Gaming Mouse", "price": 89.99, "category": "Gaming"})
    assert r.status_code == 201
    assert r.json()["id"] not in {1, 2, 3}
    assert r.json()["inStock"] is True


@pytest.mark.parametrize("payload", [
    {"name": "", "price": 10},
    {"name": "   ", "price": 10},
    {"price": 10},
    {"name": "", "price": 0},
])
def test_create_product_requires_name(payload):
    r = client.post("/api/v2/products", json=payload)
    assert r.status_code == 400
    assert r.text == "Product name is required"


@pytest.mark.parametrize("payload", [
    {"name": "Widget", "price": 0},
    {"name": "Widget", "price": -5.5},
    {"name": "Widget"},
])
def test_create_product_requires_positive_price(payload):
    r = client.post("/api/v2/products", json=payload)
    assert r.status_code == 400
    assert r.text == "Price must be greater than 0"


def test_created_product_is_not_persisted(frozen_service):
    created = client.post("/api/v2/products", json={"name": "Gaming Mouse", "price": 89.99}).json()
    fetched = client.get(f"/api/v2/products/{created['id']}").json()
    assert fetched["name"] == f"Enhanced Product {created['id']}"
    assert client.get("/api/v2/products").json()["total"] == 3


@pytest.mark.parametrize("product_id", [1_000_000, 999_999_999, 2**31 - 1])
def test_get_product_v2_huge_id_clamps_created_at(frozen_service, product_id):
    r = client.get(f"/api/v2/products/{product_id}")
    assert r.status_code == 200
    assert r.json()["id"] == product_id
    assert _parse(r.json()["createdAt"]) == datetime.min.replace(tzinfo=timezone.utc)


def test_get_product_id_beyond_32_bits_rejected_by_router():
    r = client.get("/api/v2/products/10000000000")
    assert r.status_code == 422
