"""Port for persisting user settings."""

from typing import Protocol

from mealcoins.domain.models import AppSettings


class SettingsRepositoryPort(Protocol):
    """Port exposing read and write access to the settings record."""

    def load_settings(self) -> AppSettings | None:
        """Return the stored settings, or None when nothing is stored."""

    def save_settings(self, settings: AppSettings) -> None:
        """Store the provided settings, replacing the previous ones."""


__all__ = ["SettingsRepositoryPort"]
