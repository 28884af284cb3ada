"""SQLAlchemy-backed repository for the settings record."""

import json

from sqlalchemy import text

from mealcoins.application.ports.database import DatabaseEnginePort
from mealcoins.application.ports.settings_repository import (
    SettingsRepositoryPort,
)
from mealcoins.domain.models import AppSettings
from mealcoins.infrastructure.json_codec import (
    settings_from_dict,
    settings_to_dict,
)
from mealcoins.infrastructure.logging.logger import get_app_logger

SETTINGS_ROW_ID = 1

CREATE_SETTINGS_SQL = """
CREATE TABLE IF NOT EXISTS app_settings (
    id INTEGER PRIMARY KEY,
    payload TEXT NOT NULL
)
"""

SELECT_SETTINGS_SQL = text(
    """
    SELECT payload
    FROM app_settings
    WHERE id = :id
    """
)

DELETE_SETTINGS_SQL = text("DELETE FROM app_settings WHERE id = :id")

INSERT_SETTINGS_SQL = text(
    """
    INSERT INTO app_settings (id, payload)
    VALUES (:id, :payload)
    """
)


class SqlAlchemySettingsRepository(SettingsRepositoryPort):
    """Repository storing settings as a single JSON row."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the tracker engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def prepare(self) -> None:
        """Ensure the settings table exists."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_SETTINGS_SQL)

    def load_settings(self) -> AppSettings | None:
        """Return stored settings.

        Returns:
            AppSettings | None: Stored settings, or None when absent or
            unreadable (the problem is logged).
        """
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_SETTINGS_SQL,
                {"id": SETTINGS_ROW_ID},
            ).first()
        if row is None:
            return None
        try:
            return settings_from_dict(json.loads(row.payload))
        except (ValueError, KeyError, TypeError) as exc:
            self._logger.error(f"Stored settings could not be decoded: {exc}")
            return None

    def save_settings(self, settings: AppSettings) -> None:
        payload = json.dumps(settings_to_dict(settings), sort_keys=True)
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_SETTINGS_SQL, {"id": SETTINGS_ROW_ID})
            conn.execute(
                INSERT_SETTINGS_SQL,
                {"id": SETTINGS_ROW_ID, "payload": payload},
            )


__all__ = [
    "SqlAlchemySettingsRepository",
    "CREATE_SETTINGS_SQL",
    "SELECT_SETTINGS_SQL",
    "INSERT_SETTINGS_SQL",
    "DELETE_SETTINGS_SQL",
]
