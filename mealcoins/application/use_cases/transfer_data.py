"""Use case for exporting, importing and wiping tracker data."""

from dataclasses import dataclass
from pathlib import Path

from mealcoins.application.ports.snapshot_codec import (
    SCHEMA_VERSION,
    DataSnapshot,
    SnapshotCodecPort,
)
from mealcoins.application.store import BudgetStore
from mealcoins.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

EXPORT_FILE_PREFIX = "MealCoins_Export_"


@dataclass(frozen=True)
class ImportResult:
    """Outcome of an import.

    Attributes:
        entries_count: Number of entries now in the store.
        schema_version: Schema version found in the payload.
    """

    entries_count: int
    schema_version: int


class TransferDataUseCase:
    """Move full snapshots of the store in and out."""

    def __init__(
        self,
        store: BudgetStore,
        codec: SnapshotCodecPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Store whose state is exported or replaced.
            codec: Port serializing snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        self._store = store
        self._codec = codec
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def export_payload(self) -> str:
        """Serialize the current settings and entries."""
        snapshot = DataSnapshot(
            schema_version=SCHEMA_VERSION,
            settings=self._store.settings,
            entries=self._store.entries,
            exported_at=self._store.calendar.now(),
        )
        return self._codec.encode(snapshot)

    def export_to_directory(self, directory: Path) -> Path:
        """Write an export file into a directory and return its path."""
        directory.mkdir(parents=True, exist_ok=True)
        stamp = (
            self._store.calendar.now()
            .replace(microsecond=0)
            .isoformat()
            .replace(":", "-")
        )
        path = directory / f"{EXPORT_FILE_PREFIX}{stamp}.json"
        path.write_text(self.export_payload(), encoding="utf-8")
        self._usage_logger.info(
            f"Exported {len(self._store.entries)} entries to {path}"
        )
        return path

    def import_payload(self, payload: str) -> ImportResult:
        """Replace the store state with a serialized snapshot.

        Snapshots written by a newer schema are accepted as far as their
        known fields go.

        Raises:
            DataImportError: If the payload cannot be decoded.
        """
        snapshot = self._codec.decode(payload)
        if snapshot.schema_version > SCHEMA_VERSION:
            self._logger.warning(
                f"Importing newer schema v{snapshot.schema_version} "
                f"(supported v{SCHEMA_VERSION})"
            )
        self._store.replace_state(snapshot.settings, list(snapshot.entries))
        count = len(self._store.entries)
        self._usage_logger.info(f"Imported {count} entries")
        return ImportResult(
            entries_count=count,
            schema_version=snapshot.schema_version,
        )

    def import_file(self, path: Path) -> ImportResult:
        return self.import_payload(path.read_text(encoding="utf-8"))

    def wipe(self) -> None:
        """Reset settings and delete all entries."""
        self._store.wipe()
        self._usage_logger.warning("All data wiped")


__all__ = ["EXPORT_FILE_PREFIX", "ImportResult", "TransferDataUseCase"]
