# tests/test_versioning.py
import pytest
from fastapi.testclient import TestClient

from products_api.exceptions import UnsupportedApiVersionError, UnsupportedOperationError
from products_api.main import app
from products_api.versioning import (
    ApiVersion, allowed_collection_methods, ensure_supported, parse_api_version,
)

client = TestClient(app)


@pytest.mark.parametrize("raw, expected", [
    ("1", ApiVersion.V1),
    ("1.0", ApiVersion.V1),
    ("2", ApiVersion.V2),
    ("2.0", ApiVersion.V2),
    ("02.00", ApiVersion.V2),
])
def test_parse_api_version(raw, expected):
    assert parse_api_version(raw) is expected


@pytest.mark.parametrize("raw", ["3", "1.1", "2.5", "v2", "abc", "1.0.0", "-1", " 2", "2 ", " "])
def test_parse_api_version_rejects_unknown(raw):
    with pytest.raises(UnsupportedApiVersionError) as exc:
        parse_api_version(raw)
    assert raw in exc.value.message


def test_missing_version_uses_default():
    assert parse_api_version(None, default=ApiVersion.V2) is ApiVersion.V2
    assert parse_api_version("", default=ApiVersion.V1) is ApiVersion.V1
    with pytest.raises(UnsupportedApiVersionError):
        parse_api_version(None)


def test_create_only_exists_in_v2():
    assert allowed_collection_methods(ApiVersion.V1) == ["GET"]
    assert allowed_collection_methods(ApiVersion.V2) == ["GET", "POST"]
    ensure_supported("create_product", ApiVersion.V2)
    with pytest.raises(UnsupportedOperationError) as exc:
        ensure_supported("create_product", ApiVersion.V1)
    assert exc.value.allowed_methods == ["GET"]


@pytest.mark.parametrize("path", [
    "/api/v3/products", "/api/v1.5/products/1", "/api/vx/products", "/api/v%202/products",
])
def test_unsupported_version_is_bad_request(path):
    r = client.get(path)
    assert r.status_code == 400
    assert "is not supported" in r.text


def test_unsupported_version_on_create_is_bad_request():
    r = client.post("/api/v3/products", json={"name": "x", "price": 1})
    assert r.status_code == 400
