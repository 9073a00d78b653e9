"""Pytest configuration and fixtures for the catalog backend."""

from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.db import Base, get_db
from app.main import create_app
from app.models.product import Product


@pytest.fixture()
def engine():
    """In-memory SQLite shared across threads for a single test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine):
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def app(engine):
    app = create_app()
    Session = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    def _get_test_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture()
async def client(app):
    """Return an HTTPX async client pointing at the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client


@pytest.fixture()
def add_product(db_session):
    """Insert a product with sensible defaults and return it."""

    def _add(**overrides) -> Product:
        attrs = {
            "name": "Modern Edge",
            "description": "Slim black frame.",
            "color": "Black",
            "size": "8x10",
            "price": Decimal("45.00"),
            "sale_price": None,
            "stock_quantity": 10,
            "image": "https://placehold.co/640x480/000000/png?text=Modern+Edge",
            "is_featured": False,
        }
        attrs.update(overrides)
        product = Product(**attrs)
        db_session.add(product)
        db_session.commit()
        return product

    return _add
