import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import include_routes
from app.core.config import settings
from app.core.db import Base, engine
from app.core.errors import register_error_handlers
from app.core.logging import configure_logging
from app.web.navigation import NavigationController, build_route_table

# Import models so Base.metadata knows them
import app.models  # noqa

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Create tables (no migrations)
    Base.metadata.create_all(bind=engine)
    logger.info("Catalog ready (database=%s)", engine.url.render_as_string(hide_password=True))
    yield


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=600,
    )

    app.state.navigation = NavigationController(
        build_route_table(),
        base_path=settings.BASE_PATH,
    )

    register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    include_routes(app)
    return app


app = create_app()
