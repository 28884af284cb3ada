"""SQLAlchemy-backed repository for spending entries."""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import text

from mealcoins.application.ports.database import DatabaseEnginePort
from mealcoins.application.ports.entries_repository import (
    EntriesRepositoryPort,
)
from mealcoins.domain.models import ColorTag, Currency, IconTag, SpendingEntry

CREATE_ENTRIES_SQL = """
CREATE TABLE IF NOT EXISTS spending_entries (
    id TEXT PRIMARY KEY,
    recorded_at TEXT NOT NULL,
    recorded_at_utc TEXT NOT NULL,
    coins INTEGER NOT NULL,
    note TEXT,
    price TEXT,
    currency TEXT,
    preset_id TEXT,
    color TEXT NOT NULL,
    icon TEXT NOT NULL
)
"""

SELECT_ENTRIES_SQL = text(
    """
    SELECT id, recorded_at, coins, note, price, currency,
           preset_id, color, icon
    FROM spending_entries
    ORDER BY recorded_at_utc, id
    """
)

INSERT_ENTRY_SQL = text(
    """
    INSERT INTO spending_entries (
        id,
        recorded_at,
        recorded_at_utc,
        coins,
        note,
        price,
        currency,
        preset_id,
        color,
        icon
    )
    VALUES (
        :id,
        :recorded_at,
        :recorded_at_utc,
        :coins,
        :note,
        :price,
        :currency,
        :preset_id,
        :color,
        :icon
    )
    """
)

DELETE_ENTRIES_SQL = "DELETE FROM spending_entries"


class SqlAlchemyEntriesRepository(EntriesRepositoryPort):
    """Repository storing one row per entry."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the tracker engine.
        """
        self._db_port = db_port

    def prepare(self) -> None:
        """Ensure the entries table exists."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_ENTRIES_SQL)

    def load_entries(self) -> list[SpendingEntry]:
        """Return stored entries ordered by their UTC instant."""
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_ENTRIES_SQL).all()
        return [
            SpendingEntry.create(
                entry_id=row.id,
                timestamp=datetime.fromisoformat(row.recorded_at),
                coins=row.coins,
                note=row.note,
                price=Decimal(row.price) if row.price is not None else None,
                currency=Currency(row.currency) if row.currency else None,
                preset_id=row.preset_id,
                color=ColorTag(row.color),
                icon=IconTag(row.icon),
            )
            for row in rows
        ]

    def save_entries(self, entries: list[SpendingEntry]) -> None:
        """Replace stored entries within one transaction.

        Args:
            entries: Full list of entries to keep.
        """
        payload = [self._to_row(entry) for entry in entries]
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(DELETE_ENTRIES_SQL)
            if payload:
                conn.execute(INSERT_ENTRY_SQL, payload)

    @staticmethod
    def _to_row(entry: SpendingEntry) -> dict[str, object]:
        timestamp = entry.timestamp
        utc_instant = (
            timestamp.astimezone(timezone.utc)
            if timestamp.tzinfo is not None
            else timestamp
        )
        return {
            "id": entry.id,
            "recorded_at": timestamp.isoformat(),
            "recorded_at_utc": utc_instant.replace(tzinfo=None).isoformat(
                timespec="microseconds"
            ),
            "coins": entry.coins,
            "note": entry.note,
            "price": str(entry.price.amount) if entry.price else None,
            "currency": entry.price.currency.value if entry.price else None,
            "preset_id": entry.preset_id,
            "color": entry.color.value,
            "icon": entry.icon.value,
        }


__all__ = [
    "SqlAlchemyEntriesRepository",
    "CREATE_ENTRIES_SQL",
    "SELECT_ENTRIES_SQL",
    "INSERT_ENTRY_SQL",
    "DELETE_ENTRIES_SQL",
]
