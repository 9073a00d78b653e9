import argparse
import logging
import random

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import Base, SessionLocal
from app.core.logging import configure_logging
from app.factories import make_products

# Import models so Base.metadata knows them
import app.models  # noqa

logger = logging.getLogger(__name__)


def reset_db(db: Session):
    # Drops & recreates all tables (no migrations)
    bind = db.get_bind()
    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)


def seed_products(db: Session, count: int = 24, rng: random.Random | None = None) -> int:
    products = make_products(count, rng)
    db.add_all(products)
    db.flush()
    featured = sum(1 for p in products if p.is_featured)
    logger.info("Seeded %d products (%d featured)", len(products), featured)
    return featured


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Reset and seed the product catalog.")
    parser.add_argument("--count", type=int, default=24, help="number of products to create")
    parser.add_argument("--seed", type=int, default=None, help="random seed for repeatable data")
    args = parser.parse_args(argv)

    configure_logging(settings.LOG_LEVEL)
    rng = random.Random(args.seed)

    db = SessionLocal()
    try:
        reset_db(db)
        featured = seed_products(db, args.count, rng)
        db.commit()

        print("Seed complete.")
        print(f"- {args.count} products, {featured} featured")
        print("Try: GET /api/products/featured")
    finally:
        db.close()


if __name__ == "__main__":
    main()
