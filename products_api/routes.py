# products_api/routes.py
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, Path, Request, Response

from .config import get_settings
from .core import CreateProductRequest
from .idgen import make_id_generator
from .models import ProductDetailV2, ProductListEnvelope, ProductV1, ProductV2
from .service import VersionedProductService
from .versioning import OPERATION_VERSIONS, ApiVersion, ensure_supported, parse_api_version

# largest id the route accepts (32-bit signed)
MAX_PRODUCT_ID = 2**31 - 1

PLAIN_TEXT_ERROR = {"description": "Plain-text reason", "content": {"text/plain": {}}}

# (operation, version) -> (summary, description, response model)
OPERATION_DOCS: Dict[Tuple[str, ApiVersion], Tuple[str, str, Any]] = {
    ("list_products", ApiVersion.V1): (
        "Get all products (v1)",
        "Returns a simple list of products in version 1 format",
        List[ProductV1],
    ),
    ("get_product_by_id", ApiVersion.V1): (
        "Get product by ID (v1)",
        "Returns a single product by ID in version 1 format",
        ProductV1,
    ),
    ("list_products", ApiVersion.V2): (
        "Get all products (v2)",
        "Returns enhanced product list with additional fields in version 2 format",
        ProductListEnvelope,
    ),
    ("get_product_by_id", ApiVersion.V2): (
        "Get product by ID (v2)",
        "Returns enhanced product details in version 2 format",
        ProductDetailV2,
    ),
    ("create_product", ApiVersion.V2): (
        "Create product (v2)",
        "Creates a new product with enhanced validation (v2 only)",
        ProductV2,
    ),
}

ERROR_RESPONSES: Dict[str, Dict[Any, Any]] = {
    "list_products": {},
    "get_product_by_id": {400: PLAIN_TEXT_ERROR},
    "create_product": {400: PLAIN_TEXT_ERROR, 405: PLAIN_TEXT_ERROR},
}


# ---------------------------
# Dependencies
# ---------------------------
@lru_cache
def get_service() -> VersionedProductService:
    return VersionedProductService(make_id_generator(get_settings()))


def requested_version(request: Request) -> ApiVersion:
    default = ApiVersion(get_settings().default_api_version)
    return parse_api_version(request.path_params.get("version"), default=default)


def _fixed_version(version: ApiVersion) -> Callable[[], ApiVersion]:
    def dependency() -> ApiVersion:
        return version
    return dependency


def _route_options(operation: str, version: Optional[ApiVersion]) -> Dict[str, Any]:
    if version is None or version not in OPERATION_VERSIONS[operation]:
        return {"name": operation, "include_in_schema": False, "response_model": None}

    summary, description, model = OPERATION_DOCS[(operation, version)]
    return {
        "name": f"{operation}_v{version.major}",
        "operation_id": f"{operation}_v{version.major}",
        "summary": summary,
        "description": description,
        "tags": [f"Products v{version.major}"],
        "response_model": model,
        "responses": ERROR_RESPONSES[operation],
    }


# ---------------------------
# Product endpoints
# ---------------------------
def build_router(version: Optional[ApiVersion] = None) -> APIRouter:
    """
    Product routes for one API version, or for whatever version the
    ``{version}`` path segment names (default version when there is none).

    Only operations the version maps show up in the OpenAPI document; the
    others are still routed so they answer 405 instead of falling through.
    """
    version_dep = requested_version if version is None else _fixed_version(version)

    def creatable_version(api_version: ApiVersion = Depends(version_dep)) -> ApiVersion:
        # runs before the body is validated
        ensure_supported("create_product", api_version)
        return api_version

    async def list_products(
        api_version: ApiVersion = Depends(version_dep),
        service: VersionedProductService = Depends(get_service),
    ):
        return service.list_products(api_version)

    async def get_product_by_id(
        product_id: int = Path(..., le=MAX_PRODUCT_ID),
        api_version: ApiVersion = Depends(version_dep),
        service: VersionedProductService = Depends(get_service),
    ):
        return service.get_product_by_id(api_version, product_id)

    async def create_product(
        payload: CreateProductRequest,
        response: Response,
        api_version: ApiVersion = Depends(creatable_version),
        service: VersionedProductService = Depends(get_service),
    ):
        product = service.create_product(api_version, payload)
        response.headers["Location"] = f"/api/v{api_version.major}/products/{product.id}"
        return product

    router = APIRouter()
    router.add_api_route("/products", list_products, methods=["GET"],
                         **_route_options("list_products", version))
    router.add_api_route("/products/{product_id}", get_product_by_id, methods=["GET"],
                         **_route_options("get_product_by_id", version))
    router.add_api_route("/products", create_product, methods=["POST"], status_code=201,
                         **_route_options("create_product", version))
    return router
