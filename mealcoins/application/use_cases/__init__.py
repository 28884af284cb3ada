"""Application use cases package."""

from .get_history_report import (
    GetHistoryReportUseCase,
    HistoryReport,
    RangeKind,
)
from .get_today_overview import GetTodayOverviewUseCase, TodayOverview
from .manage_entries import ManageEntriesUseCase
from .manage_settings import ManageSettingsUseCase
from .transfer_data import ImportResult, TransferDataUseCase

__all__ = [
    "GetHistoryReportUseCase",
    "HistoryReport",
    "RangeKind",
    "GetTodayOverviewUseCase",
    "TodayOverview",
    "ManageEntriesUseCase",
    "ManageSettingsUseCase",
    "ImportResult",
    "TransferDataUseCase",
]
