# products_api/models.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel

# Decimal in memory, JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductV1(_ApiModel):
    id: int
    name: str
    price: Money


class ProductV2(_ApiModel):
    id: int
    name: str
    price: Money
    category: Optional[str] = None
    in_stock: bool
    created_at: datetime


class ProductDetailV2(ProductV2):
    description: str
    tags: List[str]


class ProductListEnvelope(_ApiModel):
    data: List[ProductV2]
    total: int
    version: Literal["2.0"] = "2.0"

    @model_validator(mode="after")
    def total_matches_data(self) -> "ProductListEnvelope":
        if self.total != len(self.data):
            raise ValueError(f"total ({self.total}) must equal the number of items ({len(self.data)})")
        return self

    @classmethod
    def wrap(cls, products: List[ProductV2]) -> "ProductListEnvelope":
        return cls(data=products, total=len(products))
