"""Database infrastructure for the budget tracker.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine holding entries and settings. It belongs to the infrastructure layer
because it deals with an external system (SQLite or any SQLAlchemy URL).
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from mealcoins.application.ports.database import DatabaseEnginePort
from mealcoins.infrastructure.settings import MealCoinsSettings


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: SQLite engines keep SQLAlchemy's default pool; server
        databases get a small connection pool with health checks.
    """
    if db_url.startswith("sqlite"):
        return create_engine(db_url, future=True)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the tracker database.

    Returns:
        Engine: Lazily initialized engine built from MEALCOINS_DB_URL.
    """
    global _engine
    if _engine is None:
        _engine = _create_engine(MealCoinsSettings.from_env().db_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details (environment variables, pooling)
    behind the port. An explicit engine can be injected, which tests use to
    run against in-memory SQLite.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine

    def get_engine(self) -> Engine:
        """Get the engine for the tracker database.

        Returns:
            Engine: Injected engine, or the process-wide one.
        """
        if self._engine is not None:
            return self._engine
        return get_engine()


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter"]
