"""
SQLAlchemy engine/session setup and a FastAPI dependency to get a DB session.
"""

import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .config import settings

logger = logging.getLogger(__name__)


def make_engine(url: str, **kwargs) -> Engine:
    """
    Build an engine for `url`. SQLite connections get foreign keys switched on
    and may be shared across the FastAPI threadpool.
    """
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    eng = create_engine(url, future=True, **kwargs)

    if is_sqlite:
        @event.listens_for(eng, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return eng


# Create a DB engine from config (SQLite by default for easy local dev)
engine = make_engine(settings.database_url)

# Session factory (autoflush False avoids surprising implicit writes)
SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    future=True,
)

# Declarative Base for models to inherit from
class Base(DeclarativeBase):
    pass


def init_schema(bind: Engine = engine) -> None:
    """Create any missing tables. Existing tables are left as they are."""
    from . import models  # noqa: F401  (registers tables on Base.metadata)
    Base.metadata.create_all(bind=bind)


def check_connection(bind: Engine = engine) -> None:
    """Round-trip a trivial query; raises if the store is unreachable."""
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Store reachable at %s", bind.url.render_as_string(hide_password=True))


def get_db():
    """
    FastAPI dependency that yields a SQLAlchemy session.
    Ensures the session is closed after the request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
