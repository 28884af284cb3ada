"""Use case grouping the entry mutations offered to the user."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from mealcoins.application.store import BudgetStore
from mealcoins.domain.models import ColorTag, Currency, IconTag, SpendingEntry
from mealcoins.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)

QUICK_COINS_COLOR = ColorTag.TEAL
QUICK_COINS_ICON = IconTag.CUSTOM


class ManageEntriesUseCase:
    """Add, edit and remove spending entries through the store."""

    def __init__(
        self,
        store: BudgetStore,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Store owning the entries.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording user actions.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def add_entry(
        self,
        coins: int,
        *,
        note: str | None = None,
        price: Decimal | None = None,
        currency: Currency | None = None,
        color: ColorTag = ColorTag.TEAL,
        icon: IconTag = IconTag.CUSTOM,
        timestamp: datetime | None = None,
    ) -> SpendingEntry:
        """Add a fully described entry."""
        entry = self._store.add_entry(
            coins,
            timestamp=timestamp,
            note=note,
            price=price,
            currency=currency,
            color=color,
            icon=icon,
        )
        self._usage_logger.info(
            f"Entry added: id={entry.id}, coins={entry.coins}, "
            f"price={entry.formatted_price}"
        )
        return entry

    def quick_add_preset(
        self,
        preset_id: str,
        *,
        note: str | None = None,
        price: Decimal | None = None,
    ) -> SpendingEntry | None:
        """Add an entry from a preset, priced in the settings currency."""
        entry = self._store.quick_add(preset_id, note=note, price=price)
        if entry is not None:
            self._usage_logger.info(
                f"Preset entry added: preset={preset_id}, coins={entry.coins}"
            )
        return entry

    def quick_add_coins(
        self,
        coins: int,
        *,
        note: str | None = None,
    ) -> SpendingEntry:
        """Add a bare coin amount with the quick-add tags."""
        entry = self._store.add_entry(
            coins,
            note=note,
            color=QUICK_COINS_COLOR,
            icon=QUICK_COINS_ICON,
        )
        self._usage_logger.info(f"Quick coins added: coins={entry.coins}")
        return entry

    def update_entry(self, entry: SpendingEntry) -> bool:
        updated = self._store.update_entry(entry)
        if not updated:
            self._logger.warning(f"Cannot update unknown entry {entry.id}")
        return updated

    def update_note(self, entry_id: str, note: str | None) -> bool:
        """Replace the note of an entry.

        Returns:
            bool: False when the entry does not exist.
        """
        entry = self._store.find_entry(entry_id)
        if entry is None:
            self._logger.warning(f"Cannot update note of unknown entry {entry_id}")
            return False
        return self._store.update_entry(replace(entry, note=note))

    def delete_entry(self, entry_id: str) -> bool:
        deleted = self._store.delete_entry(entry_id)
        if deleted:
            self._usage_logger.info(f"Entry deleted: id={entry_id}")
        return deleted

    def undo_last(self, day: datetime | None = None) -> SpendingEntry | None:
        """Delete the latest entry of a day (today by default).

        Returns:
            SpendingEntry | None: The removed entry, None if the day is empty.
        """
        reference = day or self._store.calendar.now()
        day_entries = self._store.entries_for_day(reference)
        if not day_entries:
            return None
        last = day_entries[-1]
        self._store.delete_entry(last.id)
        self._usage_logger.info(f"Last entry undone: id={last.id}")
        return last

    def delete_day(self, day: datetime) -> int:
        removed = self._store.delete_entries_for_day(day)
        self._usage_logger.info(
            f"Deleted {removed} entries for "
            f"{self._store.calendar.start_of_day(day).date()}"
        )
        return removed


__all__ = ["ManageEntriesUseCase", "QUICK_COINS_COLOR", "QUICK_COINS_ICON"]
