# products_api/core.py
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from .models import ProductDetailV2, ProductV1, ProductV2
from .seed_data import DETAIL_CATEGORY, DETAIL_TAGS, UNIT_PRICE, SeedProduct


class CreateProductRequest(BaseModel):
    # Everything optional here so a missing field reaches the service rules
    # ("Product name is required" / "Price must be greater than 0") instead of a 422.
    name: Optional[str] = None
    price: Optional[Decimal] = None
    category: Optional[str] = None


# ---------------------------
# Builders
# ---------------------------
EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def _days_before(now: datetime, days: int) -> datetime:
    # very large ids would fall before year 1
    try:
        return now - timedelta(days=days)
    except OverflowError:
        return EARLIEST


def _seed_to_v1(p: SeedProduct) -> ProductV1:
    return ProductV1(id=p.id, name=p.name, price=p.price)


def _seed_to_v2(p: SeedProduct, now: datetime) -> ProductV2:
    return ProductV2(
        id=p.id,
        name=p.name,
        price=p.price,
        category=p.category,
        in_stock=p.in_stock,
        created_at=_days_before(now, p.age_days),
    )


def _synthesize_v1(product_id: int) -> ProductV1:
    return ProductV1(id=product_id, name=f"Product {product_id}", price=UNIT_PRICE * product_id)


def _synthesize_v2(product_id: int, now: datetime) -> ProductDetailV2:
    return ProductDetailV2(
        id=product_id,
        name=f"Enhanced Product {product_id}",
        price=UNIT_PRICE * product_id,
        category=DETAIL_CATEGORY,
        in_stock=product_id % 2 == 0,
        created_at=_days_before(now, product_id),
        description=f"This is an enhanced description for product {product_id}",
        tags=list(DETAIL_TAGS),
    )
