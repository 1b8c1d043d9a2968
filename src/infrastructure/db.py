"""SQLAlchemy engine for the hosted Postgres database holding asset rows.

The engine is created on first use from ``SUPABASE_DB_URL`` and shared by
every repository in the process.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


POOL_SIZE = 5
MAX_OVERFLOW = 5


def _get_env_var(name: str) -> str:
    """Return a required setting, loading ``.env`` first.

    Args:
        name: Environment variable to read.

    Returns:
        str: Its non-empty value.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Open a pooled engine that checks connections before handing them out.

    Args:
        db_url: SQLAlchemy URL, e.g. ``postgresql+psycopg2://...``.

    Returns:
        Engine: Engine on a small ``QueuePool``.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=POOL_SIZE,
        max_overflow=MAX_OVERFLOW,
        pool_pre_ping=True,
        future=True,
    )


_supabase_engine: Optional[Engine] = None


def get_supabase_engine() -> Engine:
    """Return the process-wide engine, creating it on first call."""
    global _supabase_engine
    if _supabase_engine is None:
        _supabase_engine = _create_engine(_get_env_var("SUPABASE_DB_URL"))
    return _supabase_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Expose the shared asset-store engine through ``DatabaseEnginePort``."""

    def get_supabase_engine(self) -> Engine:
        return get_supabase_engine()


__all__ = [
    "get_supabase_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
