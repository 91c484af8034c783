# products_api/seed_data.py
from decimal import Decimal
from typing import List, NamedTuple

# Fixed catalog every list call is rebuilt from. Nothing here is ever mutated.


class SeedProduct(NamedTuple):
    id: int
    name: str
    price: Decimal
    category: str
    in_stock: bool
    age_days: int


SEED_PRODUCTS: List[SeedProduct] = [
    SeedProduct(1, "Laptop", Decimal("999.99"), "Electronics", True, 30),
    SeedProduct(2, "Mouse", Decimal("29.99"), "Accessories", True, 15),
    SeedProduct(3, "Keyboard", Decimal("79.99"), "Accessories", False, 7),
]

MAX_SEED_ID = max(p.id for p in SEED_PRODUCTS)

# Synthesized detail records (get-by-id)
UNIT_PRICE = Decimal("99.99")
DETAIL_CATEGORY = "Sample Category"
DETAIL_TAGS = ("electronics", "featured")
