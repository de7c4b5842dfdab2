"""Generate database sessions"""

from typing import Callable, Generator

from sqlalchemy import StaticPool, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.kv_store import SQLKeyValueStore
from src.db.schema import Base

StoreProvider = Callable[[], Generator[SQLKeyValueStore, None, None]]


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine and ensure all tables exist."""
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        # a single shared connection, otherwise every session sees its own empty database
        engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, echo=echo, pool_pre_ping=True)
    Base.metadata.create_all(bind=engine)
    return engine


def sql_store_provider(session_factory: sessionmaker[Session]) -> StoreProvider:
    """One session (wrapped in a store) per request, closed when the request is done."""

    def get_store() -> Generator[SQLKeyValueStore, None, None]:
        db = session_factory()
        try:
            yield SQLKeyValueStore(db)
        finally:
            db.close()

    return get_store
