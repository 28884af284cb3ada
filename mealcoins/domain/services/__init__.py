"""Domain services package."""

from .coins import (
    DEFAULT_STREAK_LOOKBACK_DAYS,
    average_coins,
    average_cost_per_coin,
    current_under_limit_streak,
    day_summary,
    entries_for_day,
    entries_in_range,
    group_by_day,
    max_under_limit_streak,
    money_by_currency,
    moving_average,
    summaries,
    total_coins,
    total_money,
)
from .dates import CalendarContext, Clock, DaysRange, FixedClock, SystemClock
from .forecast import EARLY_DAY_GUARD_SECONDS, day_burn_forecast

__all__ = [
    "DEFAULT_STREAK_LOOKBACK_DAYS",
    "average_coins",
    "average_cost_per_coin",
    "current_under_limit_streak",
    "day_summary",
    "entries_for_day",
    "entries_in_range",
    "group_by_day",
    "max_under_limit_streak",
    "money_by_currency",
    "moving_average",
    "summaries",
    "total_coins",
    "total_money",
    "CalendarContext",
    "Clock",
    "DaysRange",
    "FixedClock",
    "SystemClock",
    "EARLY_DAY_GUARD_SECONDS",
    "day_burn_forecast",
]
