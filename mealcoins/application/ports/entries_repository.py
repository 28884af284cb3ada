"""Port for persisting spending entries."""

from typing import Protocol

from mealcoins.domain.models import SpendingEntry


class EntriesRepositoryPort(Protocol):
    """Port exposing read and write access to spending entries."""

    def load_entries(self) -> list[SpendingEntry]:
        """Return all stored entries, oldest first."""

    def save_entries(self, entries: list[SpendingEntry]) -> None:
        """Replace the stored entries with the provided ones."""


__all__ = ["EntriesRepositoryPort"]
