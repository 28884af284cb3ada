"""Tests for the GetHistoryReportUseCase."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from mealcoins.application.use_cases.get_history_report import (
    GetHistoryReportUseCase,
    RangeKind,
)
from mealcoins.domain.models import Currency


def _day(day: int, hour: int = 0) -> datetime:
    return datetime(2024, 3, day, hour, tzinfo=timezone.utc)


def _seeded_store(make_store):
    store = make_store()
    store.add_entry(60, timestamp=_day(4, 9))
    store.add_entry(
        90,
        timestamp=_day(5, 13),
        price=Decimal("12.50"),
        currency=Currency.USD,
    )
    store.add_entry(
        140,
        timestamp=_day(6, 8),
        price=Decimal("3000"),
        currency=Currency.AMD,
    )
    return store


def _use_case(store, **kwargs) -> GetHistoryReportUseCase:
    return GetHistoryReportUseCase(store, logger=MagicMock(), **kwargs)


def test_week_report_aggregates_the_current_week(make_store) -> None:
    """The default report covers Monday to Sunday around now."""
    store = _seeded_store(make_store)

    report = _use_case(store).execute()

    assert report.kind is RangeKind.WEEK
    assert report.start == _day(4)
    assert [item.date for item in report.summaries] == [
        _day(day) for day in range(4, 11)
    ]
    assert report.total_coins == 290
    assert report.average_per_day == pytest.approx(290 / 7)
    assert len(report.moving_average) == 1
    assert report.moving_average[0].value == pytest.approx(290 / 7)
    assert report.current_streak == 4
    assert report.max_streak == 4
    assert report.money_by_currency == {
        Currency.USD: Decimal("12.50"),
        Currency.AMD: Decimal("3000"),
    }
    assert report.selected_day == _day(6)
    assert [entry.coins for entry in report.day_entries] == [140]
    assert report.plan_coins == 100


def test_month_report_is_clamped_to_max_days(make_store) -> None:
    """Only the first days of a month are computed when the cap is low."""
    store = _seeded_store(make_store)

    report = _use_case(store, max_days_range=10).execute(kind=RangeKind.MONTH)

    assert report.start == _day(1)
    assert report.end == datetime(2024, 3, 31, 23, 59, 59, tzinfo=timezone.utc)
    assert len(report.summaries) == 10
    assert len(report.moving_average) == 6


def test_custom_range_accepts_reversed_bounds(make_store) -> None:
    """Custom bounds are ordered and the window adapts to the length."""
    store = _seeded_store(make_store)

    report = _use_case(store).execute(
        kind=RangeKind.CUSTOM,
        start=_day(6),
        end=_day(4),
    )

    assert [item.total_coins for item in report.summaries] == [60, 90, 140]
    assert len(report.moving_average) == 1
    assert report.moving_average[0].value == pytest.approx(290 / 3)
    assert report.current_streak == 0
    assert report.max_streak == 2


def test_single_day_range_uses_raw_totals(make_store) -> None:
    """A one-day range reports the day total as its trend point."""
    store = _seeded_store(make_store)

    report = _use_case(store).execute(
        kind=RangeKind.CUSTOM,
        start=_day(5),
        end=_day(5),
    )

    assert [point.value for point in report.moving_average] == [90.0]
    assert report.average_per_day == 90.0


def test_step_moves_week_and_snaps_selection(make_store) -> None:
    """Stepping back a week keeps the selected day inside the range."""
    store = _seeded_store(make_store)
    use_case = _use_case(store)
    report = use_case.execute()

    previous = use_case.step(report, -1)

    assert previous.start == datetime(2024, 2, 26, tzinfo=timezone.utc)
    assert previous.summaries[-1].date == _day(3)
    assert previous.total_coins == 0
    assert previous.selected_day == _day(3)
    assert use_case.step(report, 0) is report


def test_step_moves_month_to_its_full_length(make_store) -> None:
    """Stepping a month lands on the next month's boundaries."""
    store = _seeded_store(make_store)
    use_case = _use_case(store)

    following = use_case.step(use_case.execute(kind=RangeKind.MONTH), 1)

    assert following.start == datetime(2024, 4, 1, tzinfo=timezone.utc)
    assert following.end == datetime(
        2024,
        4,
        30,
        23,
        59,
        59,
        tzinfo=timezone.utc,
    )


def test_select_day_and_refresh(make_store) -> None:
    """Selections snap to the range; refresh picks up new entries."""
    store = _seeded_store(make_store)
    use_case = _use_case(store)
    report = use_case.execute()

    selected = use_case.select_day(report, _day(20))
    assert selected.selected_day == _day(10)
    assert selected.day_entries == []

    store.add_entry(15, timestamp=_day(7, 10))
    refreshed = use_case.refresh(report)
    assert refreshed.total_coins == 305
