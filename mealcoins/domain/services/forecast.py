"""Same-day spending forecast."""

from collections.abc import Iterable
from datetime import datetime

from mealcoins.domain.models import (
    DayForecast,
    SpendingEntry,
    fill_ratio_for,
    indicator_for,
)
from mealcoins.domain.services.coins import total_coins
from mealcoins.domain.services.dates import CalendarContext

EARLY_DAY_GUARD_SECONDS = 60.0


def day_burn_forecast(
    now: datetime,
    today_entries: Iterable[SpendingEntry],
    plan_coins: int,
    *,
    calendar: CalendarContext,
) -> DayForecast:
    """Project the coins spent by the end of the current day.

    The spending rate since local midnight is extrapolated over the real
    length of the day. During the first minute, or when the day length is
    not positive, the forecast is the amount already spent.

    The indicator is classified from the unclamped expected/plan ratio, so a
    projection above the plan reads as over while the fill ratio stays
    capped at 1.

    Args:
        now: Reference instant.
        today_entries: Entries of the reference day.
        plan_coins: Daily budget used for the fill ratio and indicator.
        calendar: Calendar defining midnight and day length.

    Returns:
        DayForecast: Expected end-of-day coins, fill ratio and indicator.
    """
    start = calendar.start_of_day(now)
    elapsed = calendar.seconds_between(start, now)
    full_day = calendar.day_span_seconds(now)
    spent = float(total_coins(today_entries))

    if elapsed <= EARLY_DAY_GUARD_SECONDS or full_day <= 0:
        expected = spent
    else:
        expected = max(0.0, spent / elapsed * full_day)

    return DayForecast(
        expected_at_end=expected,
        fill_ratio=fill_ratio_for(expected, plan_coins),
        indicator=indicator_for(expected, plan_coins),
    )


__all__ = ["EARLY_DAY_GUARD_SECONDS", "day_burn_forecast"]
