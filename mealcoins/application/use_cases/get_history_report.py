"""Use case to compute trend statistics over a week, month or custom range."""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

from mealcoins.application.store import BudgetStore
from mealcoins.domain.models import (
    Currency,
    DaySummary,
    MovingAveragePoint,
    SpendingEntry,
)
from mealcoins.domain.services import coins
from mealcoins.infrastructure.logging.logger import get_app_logger

DEFAULT_MAX_DAYS_RANGE = 10


class RangeKind(str, Enum):
    """How the history range is chosen."""

    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"


@dataclass(frozen=True)
class HistoryReport:
    """Aggregates over a date range.

    Attributes:
        kind: How the range was chosen.
        start: Start of the requested range.
        end: End of the requested range.
        summaries: One summary per computed day, after range clamping.
        total_coins: Coins spent over the computed days.
        average_per_day: Total divided by the number of computed days.
        moving_average: Trailing averages, or raw totals for a window of 1.
        current_streak: Under-limit streak ending at the last computed day.
        max_streak: Longest under-limit run inside the computed days.
        money_by_currency: Money spent per currency over the computed days.
        selected_day: Day whose entries are listed, kept inside the range.
        day_entries: Entries of the selected day.
        plan_coins: Daily budget used for the report.
    """

    kind: RangeKind
    start: datetime
    end: datetime
    summaries: list[DaySummary]
    total_coins: int
    average_per_day: float
    moving_average: list[MovingAveragePoint]
    current_streak: int
    max_streak: int
    money_by_currency: dict[Currency, Decimal]
    selected_day: datetime
    day_entries: list[SpendingEntry]
    plan_coins: int


class GetHistoryReportUseCase:
    """Build history reports and page through them."""

    def __init__(
        self,
        store: BudgetStore,
        max_days_range: int = DEFAULT_MAX_DAYS_RANGE,
        streak_lookback_days: int = coins.DEFAULT_STREAK_LOOKBACK_DAYS,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Store holding the entries and the plan.
            max_days_range: Most days computed for one report.
            streak_lookback_days: Cap on the backward streak walk.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._max_days_range = max(1, max_days_range)
        self._streak_lookback_days = streak_lookback_days
        self._logger = logger or get_app_logger()

    def execute(
        self,
        kind: RangeKind = RangeKind.WEEK,
        reference: datetime | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
        selected_day: datetime | None = None,
    ) -> HistoryReport:
        """Return the report for a range.

        Args:
            kind: Week or month around ``reference``, or a custom range.
            reference: Instant the week or month is taken around; now by
                default. Also the default for missing custom bounds.
            start: First day of a custom range.
            end: Last day of a custom range; bounds may come in any order.
            selected_day: Day whose entries are listed.

        Returns:
            HistoryReport: Aggregates for the range.
        """
        calendar = self._store.calendar
        anchor = reference or calendar.now()
        range_start, range_end = self._resolve_range(kind, anchor, start, end)
        return self._build(kind, range_start, range_end, selected_day or anchor)

    def step(self, report: HistoryReport, direction: int) -> HistoryReport:
        """Move the report's range backward (negative) or forward."""
        if direction == 0:
            return report
        calendar = self._store.calendar
        if report.kind is RangeKind.WEEK:
            start = calendar.add_days(report.start, 7 * direction)
            end = calendar.add_days(report.end, 7 * direction)
        elif report.kind is RangeKind.MONTH:
            start = calendar.add_months(report.start, direction)
            end = calendar.end_of_month(start)
        else:
            days = calendar.day_count(report.start, report.end)
            start = calendar.add_days(report.start, days * direction)
            end = calendar.add_days(report.end, days * direction)
        return self._build(report.kind, start, end, report.selected_day)

    def refresh(self, report: HistoryReport) -> HistoryReport:
        """Recompute a report after the store changed."""
        return self._build(
            report.kind,
            report.start,
            report.end,
            report.selected_day,
        )

    def select_day(self, report: HistoryReport, day: datetime) -> HistoryReport:
        """Return the report with another day's entries listed."""
        safe_start, safe_end = self._store.calendar.clamped_range(
            report.start,
            report.end,
            self._max_days_range,
        )
        selected = self._snap(day, safe_start, safe_end)
        return replace(
            report,
            selected_day=selected,
            day_entries=self._store.entries_for_day(selected),
        )

    def _resolve_range(
        self,
        kind: RangeKind,
        anchor: datetime,
        start: datetime | None,
        end: datetime | None,
    ) -> tuple[datetime, datetime]:
        calendar = self._store.calendar
        if kind is RangeKind.WEEK:
            return calendar.start_of_week(anchor), calendar.end_of_week(anchor)
        if kind is RangeKind.MONTH:
            return (
                calendar.start_of_month(anchor),
                calendar.end_of_month(anchor),
            )
        first = calendar.localize(start or anchor)
        last = calendar.localize(end or anchor)
        return (
            calendar.start_of_day(min(first, last)),
            calendar.end_of_day(max(first, last)),
        )

    def _build(
        self,
        kind: RangeKind,
        start: datetime,
        end: datetime,
        selected_day: datetime,
    ) -> HistoryReport:
        calendar = self._store.calendar
        entries = self._store.entries
        plan_coins = self._store.plan_coins
        safe_start, safe_end = calendar.clamped_range(
            start,
            end,
            self._max_days_range,
        )

        day_summaries = coins.summaries(
            safe_start,
            safe_end,
            entries,
            plan_coins,
            calendar=calendar,
        )
        total = sum(summary.total_coins for summary in day_summaries)
        average = total / len(day_summaries) if day_summaries else 0.0

        window = self._window_for(
            kind,
            calendar.day_count(start, end),
            len(day_summaries),
        )
        if window > 1:
            trend = coins.moving_average(day_summaries, window)
        else:
            trend = [
                MovingAveragePoint(
                    date=summary.date,
                    value=float(summary.total_coins),
                )
                for summary in day_summaries
            ]

        current_streak = coins.current_under_limit_streak(
            safe_end,
            entries,
            plan_coins,
            calendar=calendar,
            max_lookback_days=self._streak_lookback_days,
        )
        max_streak = coins.max_under_limit_streak(
            safe_start,
            safe_end,
            entries,
            plan_coins,
            calendar=calendar,
        )
        money = coins.money_by_currency(
            safe_start,
            safe_end,
            entries,
            calendar=calendar,
        )
        selected = self._snap(selected_day, safe_start, safe_end)

        self._logger.info(
            f"History {kind.value} {safe_start.date()}..{safe_end.date()}: "
            f"total={total}, streak={current_streak}/{max_streak}"
        )
        return HistoryReport(
            kind=kind,
            start=start,
            end=end,
            summaries=day_summaries,
            total_coins=total,
            average_per_day=average,
            moving_average=trend,
            current_streak=current_streak,
            max_streak=max_streak,
            money_by_currency=money,
            selected_day=selected,
            day_entries=self._store.entries_for_day(selected),
            plan_coins=plan_coins,
        )

    def _snap(
        self,
        day: datetime,
        start: datetime,
        end: datetime,
    ) -> datetime:
        calendar = self._store.calendar
        key = calendar.start_of_day(day)
        first = calendar.start_of_day(start)
        last = calendar.start_of_day(end)
        if key < first:
            return first
        if key > last:
            return last
        return key

    @staticmethod
    def _window_for(kind: RangeKind, days_count: int, available: int) -> int:
        if kind is RangeKind.WEEK:
            suggested = 7
        elif kind is RangeKind.MONTH:
            suggested = 5
        else:
            suggested = max(3, min(10, days_count // 3))
        return max(1, min(suggested, available))


__all__ = [
    "DEFAULT_MAX_DAYS_RANGE",
    "GetHistoryReportUseCase",
    "HistoryReport",
    "RangeKind",
]
