"""Composition root for wiring infrastructure adapters."""

from mealcoins.application.ports.database import DatabaseEnginePort
from mealcoins.application.store import BudgetStore
from mealcoins.application.use_cases.get_history_report import (
    GetHistoryReportUseCase,
)
from mealcoins.application.use_cases.get_today_overview import (
    GetTodayOverviewUseCase,
)
from mealcoins.application.use_cases.manage_entries import (
    ManageEntriesUseCase,
)
from mealcoins.application.use_cases.manage_settings import (
    ManageSettingsUseCase,
)
from mealcoins.application.use_cases.transfer_data import TransferDataUseCase
from mealcoins.domain.services.dates import CalendarContext, Clock, SystemClock
from mealcoins.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from mealcoins.infrastructure.entries_repository import (
    SqlAlchemyEntriesRepository,
)
from mealcoins.infrastructure.json_codec import JsonSnapshotCodec
from mealcoins.infrastructure.logging.logger import get_app_logger
from mealcoins.infrastructure.settings import MealCoinsSettings
from mealcoins.infrastructure.settings_repository import (
    SqlAlchemySettingsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_calendar(
    settings: MealCoinsSettings | None = None,
    clock: Clock | None = None,
) -> CalendarContext:
    """Return the calendar configured for the user's timezone."""
    resolved = settings or MealCoinsSettings.from_env()
    return CalendarContext(
        timezone=resolved.zone(),
        first_weekday=resolved.first_weekday,
        clock=clock or SystemClock(),
    )


def build_store(
    db_port: DatabaseEnginePort | None = None,
    settings: MealCoinsSettings | None = None,
    clock: Clock | None = None,
) -> BudgetStore:
    """Return a loaded store backed by the configured database."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or MealCoinsSettings.from_env()
    entries_repository = SqlAlchemyEntriesRepository(resolved_db)
    settings_repository = SqlAlchemySettingsRepository(resolved_db)
    entries_repository.prepare()
    settings_repository.prepare()
    store = BudgetStore(
        entries_repository=entries_repository,
        settings_repository=settings_repository,
        calendar=build_calendar(resolved_settings, clock),
        logger=get_app_logger(),
    )
    store.load()
    return store


def build_today_overview(store: BudgetStore) -> GetTodayOverviewUseCase:
    return GetTodayOverviewUseCase(store)


def build_history_report(
    store: BudgetStore,
    settings: MealCoinsSettings | None = None,
) -> GetHistoryReportUseCase:
    resolved = settings or MealCoinsSettings.from_env()
    return GetHistoryReportUseCase(
        store,
        max_days_range=resolved.max_days_range,
        streak_lookback_days=resolved.streak_lookback_days,
    )


def build_manage_entries(store: BudgetStore) -> ManageEntriesUseCase:
    return ManageEntriesUseCase(store)


def build_manage_settings(store: BudgetStore) -> ManageSettingsUseCase:
    return ManageSettingsUseCase(store)


def build_transfer_data(store: BudgetStore) -> TransferDataUseCase:
    return TransferDataUseCase(store, codec=JsonSnapshotCodec())


__all__ = [
    "build_database_adapter",
    "build_calendar",
    "build_store",
    "build_today_overview",
    "build_history_report",
    "build_manage_entries",
    "build_manage_settings",
    "build_transfer_data",
]
