"""Tests for the featured products endpoint."""

from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from app.api.deps import get_product_repository
from app.core.errors import StoreError
from app.repositories.product_repository import ProductRepository, SqlAlchemyProductRepository
from app.schemas.product import FeaturedProductsResponse

PRODUCT_FIELDS = {
    "id", "name", "description", "color", "size", "price",
    "sale_price", "stock_quantity", "image", "is_featured",
}


@pytest.mark.asyncio
async def test_featured_returns_only_the_featured_product(client, add_product):
    add_product(name="Modern Edge", price=Decimal("45.00"))
    featured = add_product(
        name="Classic Frame",
        price=Decimal("120.00"),
        sale_price=None,
        is_featured=True,
    )
    add_product(name="Vintage Touch", price=Decimal("80.50"), sale_price=Decimal("60.00"))

    response = await client.get("/api/products/featured")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert len(body["data"]) == 1
    item = body["data"][0]
    assert set(item) == PRODUCT_FIELDS
    assert item["id"] == featured.id
    assert item["name"] == "Classic Frame"
    assert item["price"] == 120.00
    assert item["sale_price"] is None
    assert item["is_featured"] is True


@pytest.mark.asyncio
async def test_no_featured_products_returns_empty_list(client, add_product):
    add_product(is_featured=False)

    response = await client.get("/api/products/featured")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


@pytest.mark.asyncio
async def test_response_round_trips_every_field(client, add_product):
    add_product(
        name="Coastal Breeze",
        description="Whitewashed driftwood finish.",
        color="White",
        size="11x14",
        price=Decimal("199.99"),
        sale_price=Decimal("139.99"),
        stock_quantity=0,
        image="https://placehold.co/640x480/ffffff/png?text=Coastal+Breeze",
        is_featured=True,
    )

    response = await client.get("/api/products/featured")
    parsed = FeaturedProductsResponse.model_validate_json(response.text)

    (product,) = parsed.data
    assert product.name == "Coastal Breeze"
    assert product.description == "Whitewashed driftwood finish."
    assert product.color == "White"
    assert product.size == "11x14"
    assert product.price == Decimal("199.99")
    assert product.sale_price == Decimal("139.99")
    assert product.stock_quantity == 0
    assert product.image.endswith("text=Coastal+Breeze")
    assert product.is_featured is True
    assert FeaturedProductsResponse.model_validate_json(parsed.model_dump_json()) == parsed


@pytest.mark.asyncio
async def test_store_failure_is_distinct_from_empty_success(app, client, tmp_path):
    broken = create_engine(f"sqlite:///{tmp_path / 'missing' / 'catalog.db'}")

    session = Session(broken)
    app.dependency_overrides[get_product_repository] = lambda: SqlAlchemyProductRepository(session)
    try:
        response = await client.get("/api/products/featured")
    finally:
        app.dependency_overrides.pop(get_product_repository, None)
        session.close()
        broken.dispose()

    assert response.status_code == 503
    body = response.json()
    assert body["success"] is False
    assert body["data"] == []
    assert body["error"]["code"] == "store_unavailable"


@pytest.mark.asyncio
async def test_store_error_from_injected_repository(app, client):
    class _Down(ProductRepository):
        def find_featured(self):
            raise StoreError("connection reset")

    app.dependency_overrides[get_product_repository] = lambda: _Down()
    try:
        response = await client.get("/api/products/featured")
    finally:
        app.dependency_overrides.pop(get_product_repository, None)

    assert response.status_code == 503
    body = response.json()
    assert body["success"] is False
    assert body["data"] == []
    assert body["error"]["code"] == "store_unavailable"


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
