"""
Jotter database connection
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from .utils.settings import (
    JOTTER_DB_URI,
    JOTTER_DB_POOL_RECYCLE_SECONDS,
    JOTTER_DB_STATEMENT_TIMEOUT_MILLIS,
    JOTTER_DB_POOL_SIZE,
    JOTTER_DB_MAX_OVERFLOW,
)


def create_jotter_engine(
    url: Optional[str],
    pool_size: int,
    max_overflow: int,
    statement_timeout: int,
    pool_recycle: int = JOTTER_DB_POOL_RECYCLE_SECONDS,
) -> Engine:
    if url is not None and url.startswith("sqlite"):
        # Local development and tests: single shared connection, no server-side options
        return create_engine(
            url=url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    # Pooling: https://docs.sqlalchemy.org/en/20/core/pooling.html#sqlalchemy.pool.QueuePool
    # Statement timeout: https://stackoverflow.com/a/44936982
    return create_engine(
        url=url,
        pool_size=pool_size,
        pool_recycle=pool_recycle,
        max_overflow=max_overflow,
        connect_args={"options": f"-c statement_timeout={statement_timeout}"},
    )


engine = create_jotter_engine(
    url=JOTTER_DB_URI,
    pool_size=JOTTER_DB_POOL_SIZE,
    max_overflow=JOTTER_DB_MAX_OVERFLOW,
    statement_timeout=JOTTER_DB_STATEMENT_TIMEOUT_MILLIS,
    pool_recycle=JOTTER_DB_POOL_RECYCLE_SECONDS,
)
# Committed instances keep their loaded state, created entries are returned without a reload
SessionLocal = sessionmaker(bind=engine, expire_on_commit=False)


def yield_connection_from_env() -> Iterator[Session]:
    """
    Yields a database connection (created using environment variables). As per FastAPI docs:
    https://fastapi.tiangolo.com/tutorial/sql-databases/#create-a-dependency
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


yield_connection_from_env_ctx = contextmanager(yield_connection_from_env)
