"""Pydantic schemas for products and the response envelope."""

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

CENT = Decimal("0.01")


def _to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT)


# Two-decimal money, sent over the wire as a JSON number
Money = Annotated[
    Decimal,
    AfterValidator(_to_cents),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    color: str
    size: str
    price: Money
    sale_price: Money | None = None
    stock_quantity: int = Field(ge=0)
    image: str
    is_featured: bool


class FeaturedProductsResponse(BaseModel):
    success: Literal[True] = True
    data: list[ProductOut] = Field(default_factory=list)


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    data: list[ProductOut] = Field(default_factory=list)
    error: ErrorDetail
