"""Catalog error kinds and their HTTP translation."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.schemas.product import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for failures raised by the catalog."""

    code = "catalog_error"


class StoreError(CatalogError):
    """The product store could not be reached or the query failed."""

    code = "store_unavailable"


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Product store failure on %s %s: %s", request.method, request.url.path, exc)
    body = ErrorResponse(error=ErrorDetail(code=exc.code, message=str(exc)))
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)
