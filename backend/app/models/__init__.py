# Import models so Base.metadata knows them
from app.models.product import Product  # noqa: F401
