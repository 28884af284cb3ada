"""Shared fixtures: a frozen calendar and in-memory repositories."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from mealcoins.application.store import BudgetStore
from mealcoins.domain.services.dates import CalendarContext, FixedClock

NOW = datetime(2024, 3, 6, 12, 0, tzinfo=timezone.utc)


class InMemoryEntriesRepository:
    """Entries repository keeping rows in a list."""

    def __init__(self, entries=None) -> None:
        self.entries = list(entries or [])
        self.save_calls = 0

    def load_entries(self):
        return list(self.entries)

    def save_entries(self, entries) -> None:
        self.entries = list(entries)
        self.save_calls += 1


class InMemorySettingsRepository:
    """Settings repository keeping a single value."""

    def __init__(self, settings=None) -> None:
        self.settings = settings
        self.save_calls = 0

    def load_settings(self):
        return self.settings

    def save_settings(self, settings) -> None:
        self.settings = settings
        self.save_calls += 1


@pytest.fixture
def calendar() -> CalendarContext:
    """UTC calendar frozen at Wednesday 2024-03-06 12:00."""
    return CalendarContext(clock=FixedClock(NOW))


@pytest.fixture
def make_store(calendar):
    """Factory building a loaded store over in-memory repositories."""

    def _make(entries=None, settings=None) -> BudgetStore:
        store = BudgetStore(
            entries_repository=InMemoryEntriesRepository(entries),
            settings_repository=InMemorySettingsRepository(settings),
            calendar=calendar,
            logger=MagicMock(),
        )
        store.load()
        return store

    return _make
