"""Database ports for the wealth dashboard.

This module defines the application-layer protocol for reaching the hosted
Postgres database that stores asset rows. Infrastructure implementations
provide the concrete engine.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine behind the asset store."""

    def get_supabase_engine(self) -> Engine:
        """Get the engine for the hosted asset database.

        Returns:
            Engine: SQLAlchemy engine connected to the Supabase Postgres.
        """


__all__ = ["DatabaseEnginePort"]
