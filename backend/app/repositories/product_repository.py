"""Product store access.

The catalog only needs one query: every product flagged as featured.
``ProductRepository`` is the seam the service depends on, so the store can
be a SQL database in production and a plain dict in tests.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import StoreError
from app.models.product import Product

logger = logging.getLogger(__name__)


class ProductRepository(ABC):

    @abstractmethod
    def find_featured(self) -> list[Product]:
        """Return every featured product, ordered by id."""


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_featured(self) -> list[Product]:
        stmt = (
            select(Product)
            .where(Product.is_featured.is_(True))
            .order_by(Product.id.asc())
        )
        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as exc:
            logger.warning("Featured products query failed: %s", exc)
            raise StoreError("Product store is unavailable") from exc


class InMemoryProductRepository(ProductRepository):
    """Dict-backed store keyed by product id."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._products: dict[int, Product] = {}
        for product in products:
            self.add(product)

    def add(self, product: Product) -> Product:
        if product.id is None:
            product.id = max(self._products, default=0) + 1
        self._products[product.id] = product
        return product

    def find_featured(self) -> list[Product]:
        return [
            self._products[pid]
            for pid in sorted(self._products)
            if self._products[pid].is_featured
        ]
