"""Domain package for budget rules and core models."""

from .models import (
    AppSettings,
    CoinPlan,
    ColorTag,
    Currency,
    DayForecast,
    DaySummary,
    IconTag,
    Indicator,
    MovingAveragePoint,
    PlanKind,
    Preset,
    Price,
    SpendingEntry,
)
from .services import CalendarContext, day_burn_forecast

__all__ = [
    "AppSettings",
    "CoinPlan",
    "ColorTag",
    "Currency",
    "DayForecast",
    "DaySummary",
    "IconTag",
    "Indicator",
    "MovingAveragePoint",
    "PlanKind",
    "Preset",
    "Price",
    "SpendingEntry",
    "CalendarContext",
    "day_burn_forecast",
]
