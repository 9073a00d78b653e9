from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.repositories.product_repository import ProductRepository, SqlAlchemyProductRepository


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    return SqlAlchemyProductRepository(db)


RepositoryDependency = Annotated[ProductRepository, Depends(get_product_repository)]
