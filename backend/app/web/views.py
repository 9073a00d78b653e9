"""Page-level views.

A view names the template it renders and, optionally, a loader that builds
extra template context from the product store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import status

from app.core.errors import StoreError
from app.repositories.product_repository import ProductRepository
from app.services.catalog import CatalogQueryService

logger = logging.getLogger(__name__)

ContextLoader = Callable[[ProductRepository], dict]


def load_featured(repository: ProductRepository) -> dict:
    try:
        result = CatalogQueryService(repository).get_featured_products()
    except StoreError:
        logger.exception("Products page rendered without featured products")
        return {"products": [], "load_error": "Unable to load featured products."}
    return {"products": result.data, "load_error": None}


@dataclass(frozen=True)
class View:
    name: str
    title: str
    template: str
    status_code: int = status.HTTP_200_OK
    loader: ContextLoader | None = None

    def context(self, repository: ProductRepository) -> dict:
        if self.loader is None:
            return {}
        return self.loader(repository)


HOME = View("home", "Home", "home.html")
ABOUT = View("about", "About", "about.html")
PRODUCTS = View("products", "Products", "products.html", loader=load_featured)
NOT_FOUND = View("not_found", "Not Found", "not_found.html", status_code=status.HTTP_404_NOT_FOUND)
