"""Store owning the canonical settings and entries.

The store is the only writer of tracker state. Each mutation replaces the
in-memory snapshot, persists the changed collection through its repository
and then notifies subscribers so derived views can be recomputed. Entries
are kept sorted by timestamp after every mutation.
"""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable

from mealcoins.application.ports.entries_repository import (
    EntriesRepositoryPort,
)
from mealcoins.application.ports.settings_repository import (
    SettingsRepositoryPort,
)
from mealcoins.domain.models import (
    AppSettings,
    CoinPlan,
    ColorTag,
    Currency,
    DaySummary,
    IconTag,
    Preset,
    SpendingEntry,
)
from mealcoins.domain.services import coins
from mealcoins.domain.services.dates import CalendarContext
from mealcoins.infrastructure.logging.logger import get_app_logger


class StoreChange(str, Enum):
    """Part of the store state that changed."""

    SETTINGS = "settings"
    ENTRIES = "entries"


Subscriber = Callable[[StoreChange], None]


class BudgetStore:
    """Stateful shell around the pure aggregation engine."""

    def __init__(
        self,
        entries_repository: EntriesRepositoryPort,
        settings_repository: SettingsRepositoryPort,
        calendar: CalendarContext,
        logger=None,
    ) -> None:
        """Initialize an empty store.

        Args:
            entries_repository: Port persisting entries.
            settings_repository: Port persisting settings.
            calendar: Calendar used for day boundaries and "now".
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._entries_repository = entries_repository
        self._settings_repository = settings_repository
        self._calendar = calendar
        self._logger = logger or get_app_logger()
        self._settings = AppSettings()
        self._entries: tuple[SpendingEntry, ...] = ()
        self._subscribers: list[Subscriber] = []

    # State

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def entries(self) -> tuple[SpendingEntry, ...]:
        """Immutable snapshot of all entries, oldest first."""
        return self._entries

    @property
    def calendar(self) -> CalendarContext:
        return self._calendar

    @property
    def plan_coins(self) -> int:
        return self._settings.plan.daily_coins

    def load(self) -> None:
        """Load state from the repositories, defaulting missing parts."""
        stored_settings = self._settings_repository.load_settings()
        self._settings = stored_settings or AppSettings()
        self._entries = self._sorted(self._entries_repository.load_entries())
        self._logger.info(
            f"Loaded {len(self._entries)} entries "
            f"(plan={self.plan_coins} coins/day)"
        )
        self._notify(StoreChange.SETTINGS)
        self._notify(StoreChange.ENTRIES)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a change callback.

        Args:
            callback: Called with the StoreChange after each mutation.

        Returns:
            Callable[[], None]: Function removing the subscription.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    # Settings

    def update_plan(self, plan: CoinPlan) -> None:
        self._set_settings(replace(self._settings, plan=plan))

    def update_currency(self, currency: Currency) -> None:
        self._set_settings(replace(self._settings, currency=currency))

    def set_haptics_enabled(self, enabled: bool) -> None:
        self._set_settings(replace(self._settings, haptics_enabled=enabled))

    def set_show_money(self, enabled: bool) -> None:
        self._set_settings(replace(self._settings, show_money=enabled))

    def replace_presets(self, presets: list[Preset]) -> None:
        self._set_settings(replace(self._settings, presets=tuple(presets)))

    def add_preset(self, preset: Preset) -> None:
        self.replace_presets([*self._settings.presets, preset])

    def update_preset(self, preset: Preset) -> bool:
        """Replace the preset with the same id; unknown ids are ignored."""
        if self._settings.find_preset(preset.id) is None:
            return False
        self.replace_presets(
            [
                preset if current.id == preset.id else current
                for current in self._settings.presets
            ]
        )
        return True

    def delete_preset(self, preset_id: str) -> None:
        self.replace_presets(
            [
                preset
                for preset in self._settings.presets
                if preset.id != preset_id
            ]
        )

    # Entries

    def add_entry(
        self,
        coins: int,
        *,
        timestamp: datetime | None = None,
        note: str | None = None,
        price: Decimal | None = None,
        currency: Currency | None = None,
        preset_id: str | None = None,
        color: ColorTag = ColorTag.TEAL,
        icon: IconTag = IconTag.CUSTOM,
    ) -> SpendingEntry:
        """Create an entry, store it and return it.

        Args:
            coins: Coin amount, clamped to zero or more.
            timestamp: Moment of spending, defaults to the calendar's now.
            note: Optional note.
            price: Optional money amount.
            currency: Currency of the price, defaulted when omitted.
            preset_id: Optional preset the entry originates from.
            color: Color tag.
            icon: Icon tag.

        Returns:
            SpendingEntry: The stored entry.
        """
        moment = timestamp if timestamp is not None else self._calendar.now()
        entry = SpendingEntry.create(
            timestamp=self._calendar.localize(moment),
            coins=coins,
            note=note,
            price=price,
            currency=currency,
            preset_id=preset_id,
            color=color,
            icon=icon,
        )
        self._set_entries([*self._entries, entry])
        return entry

    def quick_add(
        self,
        preset_id: str,
        *,
        note: str | None = None,
        coins: int | None = None,
        price: Decimal | None = None,
        timestamp: datetime | None = None,
    ) -> SpendingEntry | None:
        """Add an entry from a preset, or return None for unknown presets."""
        preset = self._settings.find_preset(preset_id)
        if preset is None:
            self._logger.warning(f"Unknown preset id for quick add: {preset_id}")
            return None
        return self.add_entry(
            preset.coins if coins is None else coins,
            timestamp=timestamp,
            note=note,
            price=price,
            currency=self._settings.currency,
            preset_id=preset.id,
            color=preset.color,
            icon=preset.icon,
        )

    def update_entry(self, updated: SpendingEntry) -> bool:
        """Replace the entry with the same id; unknown ids are ignored."""
        if not any(entry.id == updated.id for entry in self._entries):
            return False
        self._set_entries(
            [
                updated if entry.id == updated.id else entry
                for entry in self._entries
            ]
        )
        return True

    def delete_entry(self, entry_id: str) -> bool:
        remaining = [entry for entry in self._entries if entry.id != entry_id]
        if len(remaining) == len(self._entries):
            return False
        self._set_entries(remaining)
        return True

    def delete_entries_for_day(self, day: datetime) -> int:
        """Delete every entry of a calendar day and return how many went."""
        key = self._calendar.start_of_day(day)
        remaining = [
            entry
            for entry in self._entries
            if self._calendar.day_key(entry.timestamp) != key
        ]
        removed = len(self._entries) - len(remaining)
        if removed:
            self._set_entries(remaining)
        return removed

    def find_entry(self, entry_id: str) -> SpendingEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    # Queries

    def entries_for_day(self, day: datetime) -> list[SpendingEntry]:
        return coins.entries_for_day(
            self._entries,
            day,
            calendar=self._calendar,
        )

    def entries_in_range(
        self,
        start: datetime,
        end: datetime,
    ) -> list[SpendingEntry]:
        return coins.entries_in_range(
            self._entries,
            start,
            end,
            calendar=self._calendar,
        )

    def day_summary(self, day: datetime) -> DaySummary:
        return coins.day_summary(
            day,
            self._entries,
            self.plan_coins,
            calendar=self._calendar,
        )

    def summaries(self, start: datetime, end: datetime) -> list[DaySummary]:
        return coins.summaries(
            start,
            end,
            self._entries,
            self.plan_coins,
            calendar=self._calendar,
        )

    # Bulk state

    def replace_state(
        self,
        settings: AppSettings,
        entries: list[SpendingEntry],
    ) -> None:
        """Replace settings and entries at once, as an import does."""
        self._set_settings(settings)
        self._set_entries(entries)

    def wipe(self) -> None:
        """Reset settings to defaults and drop every entry."""
        self.replace_state(AppSettings(), [])
        self._logger.warning("All tracker data wiped")

    # Internals

    def _set_settings(self, settings: AppSettings) -> None:
        self._settings = settings
        self._settings_repository.save_settings(settings)
        self._notify(StoreChange.SETTINGS)

    def _set_entries(self, entries: list[SpendingEntry]) -> None:
        self._entries = self._sorted(entries)
        self._entries_repository.save_entries(list(self._entries))
        self._notify(StoreChange.ENTRIES)

    def _sorted(self, entries) -> tuple[SpendingEntry, ...]:
        return tuple(
            sorted(
                entries,
                key=lambda entry: self._calendar.localize(entry.timestamp),
            )
        )

    def _notify(self, change: StoreChange) -> None:
        for callback in list(self._subscribers):
            callback(change)


__all__ = ["BudgetStore", "StoreChange", "Subscriber"]
