"""Database ports for the budget tracker.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine that stores entries and settings."""

    def get_engine(self) -> Engine:
        """Get the engine for the tracker database.

        Returns:
            Engine: SQLAlchemy engine connected to the tracker storage.
        """


__all__ = ["DatabaseEnginePort"]
