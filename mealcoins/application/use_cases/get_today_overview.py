"""Use case to compute the state of a single day for the today view."""

from dataclasses import dataclass
from datetime import datetime

from mealcoins.application.store import BudgetStore
from mealcoins.domain.models import DayForecast, DaySummary, SpendingEntry
from mealcoins.domain.services.forecast import day_burn_forecast
from mealcoins.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class TodayOverview:
    """Summary, entries and forecast for one day.

    Attributes:
        day: Local midnight of the day.
        entries: The day's entries, oldest first.
        summary: Day totals against the plan.
        forecast: Projected end-of-day spending and its indicator.
    """

    day: datetime
    entries: list[SpendingEntry]
    summary: DaySummary
    forecast: DayForecast

    @property
    def fill_ratio(self) -> float:
        return self.summary.fill_ratio


class GetTodayOverviewUseCase:
    """Compute the overview of the current (or a chosen) day."""

    def __init__(self, store: BudgetStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Store holding the entries and the plan.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, reference_day: datetime | None = None) -> TodayOverview:
        """Return the overview of the reference day.

        The forecast extrapolates from the current time when the reference
        day is today. Other days are complete, so their forecast is the
        amount actually spent.

        Args:
            reference_day: Any instant of the day, defaults to now.

        Returns:
            TodayOverview: Entries, summary and forecast for the day.
        """
        calendar = self._store.calendar
        now = calendar.now()
        day = calendar.start_of_day(reference_day or now)
        entries = self._store.entries_for_day(day)
        summary = self._store.day_summary(day)

        if calendar.is_same_day(day, now):
            forecast = day_burn_forecast(
                now,
                entries,
                summary.plan_coins,
                calendar=calendar,
            )
        else:
            forecast = DayForecast(
                expected_at_end=float(summary.total_coins),
                fill_ratio=summary.fill_ratio,
                indicator=summary.indicator,
            )

        self._logger.info(
            f"Today overview for {day.date()}: total={summary.total_coins}, "
            f"plan={summary.plan_coins}, "
            f"forecast={forecast.expected_at_end:.1f} "
            f"({forecast.indicator.value})"
        )
        return TodayOverview(
            day=day,
            entries=entries,
            summary=summary,
            forecast=forecast,
        )


__all__ = ["GetTodayOverviewUseCase", "TodayOverview"]
