# products_api/service.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, List, Optional, Union

from .core import CreateProductRequest, _seed_to_v1, _seed_to_v2, _synthesize_v1, _synthesize_v2
from .exceptions import ValidationError
from .idgen import IdGenerator
from .logger import logger
from .models import ProductDetailV2, ProductListEnvelope, ProductV1, ProductV2
from .seed_data import SEED_PRODUCTS
from .versioning import ApiVersion, ensure_supported

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class VersionedProductService:
    """
    Builds the Products resource in the shape a given API version expects.

    The service keeps no state between calls: reads rebuild the seed data
    every time and created products are returned once and forgotten. The
    only inputs besides the arguments are the clock (for ``createdAt``) and
    the id generator (for created products).
    """

    def __init__(self, id_generator: IdGenerator, clock: Optional[Clock] = None):
        self._next_id = id_generator
        self._now = clock or utc_now

    def list_products(self, version: ApiVersion) -> Union[List[ProductV1], ProductListEnvelope]:
        ensure_supported("list_products", version)
        logger.debug("listing products (v%s)", version.value)
        if version is ApiVersion.V1:
            return [_seed_to_v1(p) for p in SEED_PRODUCTS]

        now = self._now()
        return ProductListEnvelope.wrap([_seed_to_v2(p, now) for p in SEED_PRODUCTS])

    def get_product_by_id(self, version: ApiVersion, product_id: int) -> Union[ProductV1, ProductDetailV2]:
        ensure_supported("get_product_by_id", version)
        if product_id <= 0:
            raise ValidationError("Invalid product ID")

        logger.debug("synthesizing product %s (v%s)", product_id, version.value)
        if version is ApiVersion.V1:
            return _synthesize_v1(product_id)
        return _synthesize_v2(product_id, self._now())

    def create_product(self, version: ApiVersion, request: CreateProductRequest) -> ProductV2:
        ensure_supported("create_product", version)

        if not request.name or not request.name.strip():
            raise ValidationError("Product name is required")
        price = request.price if request.price is not None else Decimal(0)
        if price <= 0:
            raise ValidationError("Price must be greater than 0")

        product = ProductV2(
            id=self._next_id(),
            name=request.name,
            price=price,
            category=request.category,
            in_stock=True,
            created_at=self._now(),
        )
        # not stored anywhere: a later get_product_by_id synthesizes its own record
        logger.info("created product %s (%r)", product.id, product.name)
        return product
