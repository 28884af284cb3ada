"""Domain models package."""

from .entries import (
    DEFAULT_PRICE_CURRENCY,
    ColorTag,
    Currency,
    IconTag,
    Preset,
    Price,
    SpendingEntry,
    build_price,
)
from .plan import AppSettings, CoinPlan, PlanKind, recommended_presets
from .summaries import (
    DayForecast,
    DaySummary,
    Indicator,
    MovingAveragePoint,
    fill_ratio_for,
    indicator_for,
)

__all__ = [
    "DEFAULT_PRICE_CURRENCY",
    "ColorTag",
    "Currency",
    "IconTag",
    "Preset",
    "Price",
    "SpendingEntry",
    "build_price",
    "AppSettings",
    "CoinPlan",
    "PlanKind",
    "recommended_presets",
    "DayForecast",
    "DaySummary",
    "Indicator",
    "MovingAveragePoint",
    "fill_ratio_for",
    "indicator_for",
]
