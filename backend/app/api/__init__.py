"""API route registration."""

from fastapi import FastAPI

from app.api import pages, products


def include_routes(app: FastAPI) -> None:
    """Attach routers; the page catch-all must come last."""

    app.include_router(products.router)
    app.include_router(pages.router)
