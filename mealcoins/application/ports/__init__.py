"""Application ports package."""

from .database import DatabaseEnginePort
from .entries_repository import EntriesRepositoryPort
from .settings_repository import SettingsRepositoryPort
from .snapshot_codec import (
    SCHEMA_VERSION,
    DataImportError,
    DataSnapshot,
    SnapshotCodecPort,
)

__all__ = [
    "DatabaseEnginePort",
    "EntriesRepositoryPort",
    "SettingsRepositoryPort",
    "SCHEMA_VERSION",
    "DataImportError",
    "DataSnapshot",
    "SnapshotCodecPort",
]
