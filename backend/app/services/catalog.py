import logging

from app.repositories.product_repository import ProductRepository
from app.schemas.product import FeaturedProductsResponse, ProductOut

logger = logging.getLogger(__name__)


class CatalogQueryService:
    """Read-only queries over the product catalog."""

    def __init__(self, repository: ProductRepository) -> None:
        self.repository = repository

    def get_featured_products(self) -> FeaturedProductsResponse:
        # StoreError propagates unchanged; an empty list is a valid answer
        products = self.repository.find_featured()
        logger.info("Loaded %d featured products", len(products))
        return FeaturedProductsResponse(
            data=[ProductOut.model_validate(p) for p in products]
        )
