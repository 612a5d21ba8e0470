# liftlog/db.py
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from liftlog.settings import get_settings


def make_engine(url: str) -> Engine:
    # SQLite connections are handed across threads by the ASGI server
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


settings = get_settings()
if not settings.DATABASE_URL:
    settings.DATA_DIR.mkdir(parents=True, exist_ok=True)

engine = make_engine(settings.database_url)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


class Base(DeclarativeBase):
    """Declarative base for the session store tables."""


def get_db() -> Iterator[Session]:
    """One ORM session per request, closed when the response is done."""
    with SessionLocal() as db:
        yield db
