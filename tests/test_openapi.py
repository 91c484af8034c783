# tests/test_openapi.py
from fastapi.testclient import TestClient

from products_api.main import app

client = TestClient(app)


def _operations():
    return client.get("/openapi.json").json()["paths"]


def test_each_version_documented_separately():
    paths = _operations()
    assert set(paths) == {
        "/api/v1/products", "/api/v1/products/{product_id}",
        "/api/v2/products", "/api/v2/products/{product_id}",
    }

    v1_list = paths["/api/v1/products"]["get"]
    assert v1_list["summary"] == "Get all products (v1)"
    assert v1_list["description"] == "Returns a simple list of products in version 1 format"
    assert v1_list["tags"] == ["Products v1"]

    v2_list = paths["/api/v2/products"]["get"]
    assert v2_list["summary"] == "Get all products (v2)"
    assert v2_list["tags"] == ["Products v2"]

    assert paths["/api/v1/products/{product_id}"]["get"]["summary"] == "Get product by ID (v1)"
    assert paths["/api/v2/products/{product_id}"]["get"]["summary"] == "Get product by ID (v2)"


def test_create_only_documented_under_v2():
    paths = _operations()
    assert "post" not in paths["/api/v1/products"]
    create = paths["/api/v2/products"]["post"]
    assert create["summary"] == "Create product (v2)"
    assert create["description"] == "Creates a new product with enhanced validation (v2 only)"
    assert "201" in create["responses"]
