"""Domain services aggregating spending entries into day-level statistics.

All functions are pure: they read the entries and the calendar they are
given and never mutate either. Divisions are guarded so every function is
total over its inputs.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal

from mealcoins.domain.models import (
    Currency,
    DaySummary,
    MovingAveragePoint,
    SpendingEntry,
)
from mealcoins.domain.services.dates import CalendarContext

DEFAULT_STREAK_LOOKBACK_DAYS = 3650


def total_coins(entries: Iterable[SpendingEntry]) -> int:
    """Sum entry coins, counting negative amounts as zero."""
    return sum(max(0, entry.coins) for entry in entries)


def total_money(
    entries: Iterable[SpendingEntry],
    currency: Currency | None = None,
) -> Decimal:
    """Sum entry prices.

    Without a currency filter every priced entry is summed whatever its
    currency, which mixes currencies. Filter first when the currency
    matters.

    Args:
        entries: Entries to sum.
        currency: Optional currency filter.

    Returns:
        Decimal: Sum of matching prices.
    """
    total = Decimal("0")
    for entry in entries:
        if entry.price is None:
            continue
        if currency is not None and entry.price.currency != currency:
            continue
        total += entry.price.amount
    return total


def group_by_day(
    entries: Iterable[SpendingEntry],
    *,
    calendar: CalendarContext,
) -> dict[datetime, list[SpendingEntry]]:
    """Group entries by the local midnight of their timestamp."""
    grouped: dict[datetime, list[SpendingEntry]] = {}
    for entry in entries:
        grouped.setdefault(calendar.day_key(entry.timestamp), []).append(entry)
    return grouped


def entries_for_day(
    entries: Iterable[SpendingEntry],
    day: datetime,
    *,
    calendar: CalendarContext,
) -> list[SpendingEntry]:
    """Return the entries of one calendar day, oldest first."""
    key = calendar.start_of_day(day)
    selected = [
        entry
        for entry in entries
        if calendar.day_key(entry.timestamp) == key
    ]
    return _sorted_by_time(selected, calendar)


def entries_in_range(
    entries: Iterable[SpendingEntry],
    start: datetime,
    end: datetime,
    *,
    calendar: CalendarContext,
) -> list[SpendingEntry]:
    """Return entries whose local day lies between the days of the bounds."""
    first = calendar.start_of_day(start)
    last = calendar.start_of_day(end)
    selected = [
        entry
        for entry in entries
        if first <= calendar.day_key(entry.timestamp) <= last
    ]
    return _sorted_by_time(selected, calendar)


def day_summary(
    day: datetime,
    entries: Iterable[SpendingEntry],
    plan_coins: int,
    *,
    calendar: CalendarContext,
) -> DaySummary:
    """Summarize the coins spent on the calendar day containing ``day``.

    Args:
        day: Any instant of the day to summarize.
        entries: All known entries; only the day's entries are counted.
        plan_coins: Daily budget copied into the summary.
        calendar: Calendar defining the day boundaries.

    Returns:
        DaySummary: Totals for the day, zero when it has no entries.
    """
    key = calendar.start_of_day(day)
    day_entries = [
        entry
        for entry in entries
        if calendar.day_key(entry.timestamp) == key
    ]
    return DaySummary(
        date=key,
        total_coins=total_coins(day_entries),
        entries_count=len(day_entries),
        plan_coins=plan_coins,
    )


def summaries(
    start: datetime,
    end: datetime,
    entries: Iterable[SpendingEntry],
    plan_coins: int,
    *,
    calendar: CalendarContext,
) -> list[DaySummary]:
    """Summarize every day from ``start`` to ``end`` inclusive.

    The entries are grouped once, then each day of the range gets a
    summary, including days without entries. A range whose start falls
    after its end yields no summaries; callers order the bounds first.

    Returns:
        list[DaySummary]: One summary per day, ascending by date.
    """
    grouped = group_by_day(entries, calendar=calendar)
    result = []
    for day in calendar.days_range(start, end):
        day_entries = grouped.get(day, [])
        result.append(
            DaySummary(
                date=day,
                total_coins=total_coins(day_entries),
                entries_count=len(day_entries),
                plan_coins=plan_coins,
            )
        )
    return result


def average_coins(
    start: datetime,
    end: datetime,
    entries: Iterable[SpendingEntry],
    *,
    calendar: CalendarContext,
) -> float:
    """Average coins per day over an inclusive range of at least one day."""
    days = calendar.day_count(start, end)
    in_range = entries_in_range(entries, start, end, calendar=calendar)
    return total_coins(in_range) / days


def moving_average(
    day_summaries: Sequence[DaySummary],
    window: int,
) -> list[MovingAveragePoint]:
    """Compute a trailing moving average of daily totals.

    A point is emitted only once a full window is available, so the
    result has ``len(day_summaries) - window + 1`` points and each point
    carries the date of the last day in its window.

    Args:
        day_summaries: Consecutive day summaries in ascending order.
        window: Number of days per average.

    Returns:
        list[MovingAveragePoint]: Averages, empty for a window below 1 or
        longer than the input.
    """
    if window <= 0 or not day_summaries:
        return []
    points = []
    running = 0
    for index, summary in enumerate(day_summaries):
        running += summary.total_coins
        if index >= window:
            running -= day_summaries[index - window].total_coins
        if index + 1 >= window:
            points.append(
                MovingAveragePoint(date=summary.date, value=running / window)
            )
    return points


def current_under_limit_streak(
    today: datetime,
    entries: Iterable[SpendingEntry],
    plan_coins: int,
    *,
    calendar: CalendarContext,
    max_lookback_days: int = DEFAULT_STREAK_LOOKBACK_DAYS,
) -> int:
    """Count consecutive days ending at ``today`` spent within the plan.

    Days without entries count as spent within any non-negative plan. The
    walk back stops at the first day over the plan, at the day of the
    earliest entry, or after ``max_lookback_days`` days.

    Returns:
        int: Length of the streak, 0 when ``today`` itself is over plan.
    """
    today_key = calendar.start_of_day(today)
    totals = _totals_by_day(entries, calendar)
    earliest = min((day for day in totals if day <= today_key), default=today_key)

    streak = 0
    cursor: datetime | None = today_key
    while cursor is not None and streak < max_lookback_days:
        if totals.get(cursor, 0) > plan_coins:
            break
        streak += 1
        if cursor <= earliest:
            break
        cursor = calendar.previous_day_start(cursor)
    return streak


def max_under_limit_streak(
    start: datetime,
    end: datetime,
    entries: Iterable[SpendingEntry],
    plan_coins: int,
    *,
    calendar: CalendarContext,
) -> int:
    """Return the longest run of days within the plan inside the range."""
    longest = 0
    current = 0
    for summary in summaries(start, end, entries, plan_coins, calendar=calendar):
        if summary.total_coins <= plan_coins:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def money_by_currency(
    start: datetime,
    end: datetime,
    entries: Iterable[SpendingEntry],
    *,
    calendar: CalendarContext,
) -> dict[Currency, Decimal]:
    """Sum priced entries of the range per currency."""
    totals: dict[Currency, Decimal] = {}
    for entry in entries_in_range(entries, start, end, calendar=calendar):
        if entry.price is None:
            continue
        currency = entry.price.currency
        totals[currency] = totals.get(currency, Decimal("0")) + entry.price.amount
    return totals


def average_cost_per_coin(
    start: datetime,
    end: datetime,
    entries: Iterable[SpendingEntry],
    *,
    calendar: CalendarContext,
) -> Decimal:
    """Average money paid per coin over priced entries of the range.

    Prices are summed regardless of currency.

    Returns:
        Decimal: Money per coin, 0 when the priced entries hold no coins.
    """
    coins = 0
    money = Decimal("0")
    for entry in entries_in_range(entries, start, end, calendar=calendar):
        if entry.price is None:
            continue
        coins += max(0, entry.coins)
        money += entry.price.amount
    if coins <= 0:
        return Decimal("0")
    return money / Decimal(coins)


def _totals_by_day(
    entries: Iterable[SpendingEntry],
    calendar: CalendarContext,
) -> dict[datetime, int]:
    return {
        day: total_coins(day_entries)
        for day, day_entries in group_by_day(entries, calendar=calendar).items()
    }


def _sorted_by_time(
    entries: list[SpendingEntry],
    calendar: CalendarContext,
) -> list[SpendingEntry]:
    return sorted(entries, key=lambda entry: calendar.localize(entry.timestamp))


__all__ = [
    "DEFAULT_STREAK_LOOKBACK_DAYS",
    "total_coins",
    "total_money",
    "group_by_day",
    "entries_for_day",
    "entries_in_range",
    "day_summary",
    "summaries",
    "average_coins",
    "moving_average",
    "current_under_limit_streak",
    "max_under_limit_streak",
    "money_by_currency",
    "average_cost_per_coin",
]
