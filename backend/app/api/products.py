"""Catalog query endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from app.api.deps import RepositoryDependency
from app.schemas.product import ErrorResponse, FeaturedProductsResponse
from app.services.catalog import CatalogQueryService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get(
    "/featured",
    response_model=FeaturedProductsResponse,
    summary="List featured products",
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse}},
)
def featured(repository: RepositoryDependency) -> FeaturedProductsResponse:
    return CatalogQueryService(repository).get_featured_products()
