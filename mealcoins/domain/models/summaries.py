"""Derived values produced by the aggregation and forecast engines."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

WARNING_THRESHOLD = 0.80
OVER_THRESHOLD = 1.00


class Indicator(str, Enum):
    """Three-level status derived from a fill ratio."""

    OK = "ok"
    WARNING = "warning"
    OVER = "over"

    @classmethod
    def from_fill_ratio(cls, fill_ratio: float) -> "Indicator":
        if fill_ratio < WARNING_THRESHOLD:
            return cls.OK
        if fill_ratio <= OVER_THRESHOLD:
            return cls.WARNING
        return cls.OVER


def fill_ratio_for(total: float, plan_coins: int) -> float:
    """Return ``total / plan_coins`` clamped to [0, 1], or 0 without a plan."""
    if plan_coins <= 0:
        return 0.0
    return max(0.0, min(1.0, total / plan_coins))


def indicator_for(total: float, plan_coins: int) -> Indicator:
    """Classify a total against the plan.

    The ratio is taken before clamping so spending above the plan reads as
    ``over``. Without a positive plan the ratio is 0.
    """
    if plan_coins <= 0:
        return Indicator.from_fill_ratio(0.0)
    return Indicator.from_fill_ratio(total / plan_coins)


@dataclass(frozen=True)
class DaySummary:
    """Coins spent on one calendar day against the plan.

    Attributes:
        date: Local midnight of the day.
        total_coins: Sum of the day's entry coins.
        entries_count: Number of entries on the day.
        plan_coins: Daily budget at computation time.
    """

    date: datetime
    total_coins: int
    entries_count: int
    plan_coins: int

    @property
    def remaining_coins(self) -> int:
        return max(0, self.plan_coins - self.total_coins)

    @property
    def overspent_coins(self) -> int:
        return max(0, self.total_coins - self.plan_coins)

    @property
    def fill_ratio(self) -> float:
        return fill_ratio_for(self.total_coins, self.plan_coins)

    @property
    def indicator(self) -> Indicator:
        return indicator_for(self.total_coins, self.plan_coins)

    @property
    def is_under_limit(self) -> bool:
        return self.total_coins <= self.plan_coins


@dataclass(frozen=True)
class MovingAveragePoint:
    """Trailing average paired with the last day of its window."""

    date: datetime
    value: float


@dataclass(frozen=True)
class DayForecast:
    """Linear end-of-day projection for the current day."""

    expected_at_end: float
    fill_ratio: float
    indicator: Indicator


__all__ = [
    "WARNING_THRESHOLD",
    "OVER_THRESHOLD",
    "Indicator",
    "fill_ratio_for",
    "indicator_for",
    "DaySummary",
    "MovingAveragePoint",
    "DayForecast",
]
