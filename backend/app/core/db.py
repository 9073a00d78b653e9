from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.core.config import settings


class Base(DeclarativeBase):
    pass


def make_engine(url: str, echo: bool = False):
    connect_args = {}
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args, pool_pre_ping=True)


engine = make_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
