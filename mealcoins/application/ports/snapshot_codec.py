"""Port for encoding full tracker snapshots used by export and import."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from mealcoins.domain.models import AppSettings, SpendingEntry

SCHEMA_VERSION = 1


class DataImportError(ValueError):
    """Raised when an import payload cannot be decoded."""


@dataclass(frozen=True)
class DataSnapshot:
    """Settings and entries captured at a point in time.

    Attributes:
        schema_version: Version of the payload layout.
        settings: Captured settings.
        entries: Captured entries, oldest first.
        exported_at: Instant the snapshot was taken.
    """

    schema_version: int
    settings: AppSettings
    entries: tuple[SpendingEntry, ...]
    exported_at: datetime


class SnapshotCodecPort(Protocol):
    """Port converting snapshots to and from a text payload."""

    def encode(self, snapshot: DataSnapshot) -> str:
        """Serialize a snapshot."""

    def decode(self, payload: str) -> DataSnapshot:
        """Deserialize a snapshot, raising DataImportError when malformed."""


__all__ = [
    "SCHEMA_VERSION",
    "DataImportError",
    "DataSnapshot",
    "SnapshotCodecPort",
]
