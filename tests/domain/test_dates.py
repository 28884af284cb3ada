"""Tests for the calendar helpers."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from mealcoins.domain.services.dates import CalendarContext, FixedClock

UTC = timezone.utc
BERLIN = ZoneInfo("Europe/Berlin")


def _utc(year, month, day, hour=0, minute=0, second=0) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=UTC)


def test_now_and_today_follow_the_clock() -> None:
    """now/today_start/today_end should be derived from the injected clock."""
    calendar = CalendarContext(clock=FixedClock(_utc(2024, 3, 6, 15, 30)))

    assert calendar.now() == _utc(2024, 3, 6, 15, 30)
    assert calendar.today_start() == _utc(2024, 3, 6)
    assert calendar.today_end() == _utc(2024, 3, 6, 23, 59, 59)
    assert calendar.seconds_until_day_end() == 8 * 3600 + 29 * 60 + 59


def test_day_boundaries_use_the_calendar_timezone() -> None:
    """A UTC instant late in the evening belongs to the next Berlin day."""
    calendar = CalendarContext(timezone=BERLIN)
    moment = _utc(2024, 1, 15, 23, 30)

    start = calendar.start_of_day(moment)

    assert start == datetime(2024, 1, 16, tzinfo=BERLIN)
    assert calendar.day_key(moment) == start
    assert calendar.is_same_day(moment, datetime(2024, 1, 16, 8, tzinfo=BERLIN))


def test_naive_timestamps_are_read_as_local_wall_time() -> None:
    """Naive values should be localized, not converted."""
    calendar = CalendarContext(timezone=BERLIN)

    localized = calendar.localize(datetime(2024, 1, 16, 8, 0))

    assert localized.tzinfo is BERLIN
    assert localized.hour == 8


def test_day_span_covers_clock_changes() -> None:
    """Daylight saving days are 23 or 25 hours long."""
    calendar = CalendarContext(timezone=BERLIN)

    spring = calendar.day_span_seconds(datetime(2024, 3, 31, 12, tzinfo=BERLIN))
    autumn = calendar.day_span_seconds(datetime(2024, 10, 27, 12, tzinfo=BERLIN))
    regular = calendar.day_span_seconds(datetime(2024, 6, 1, 12, tzinfo=BERLIN))

    assert spring == 82800
    assert autumn == 90000
    assert regular == 86400


def test_week_boundaries_follow_first_weekday() -> None:
    """Weeks start on the configured weekday."""
    wednesday = _utc(2024, 3, 6, 10)
    monday_first = CalendarContext(first_weekday=0)
    sunday_first = CalendarContext(first_weekday=6)

    assert monday_first.start_of_week(wednesday) == _utc(2024, 3, 4)
    assert monday_first.end_of_week(wednesday) == _utc(2024, 3, 10, 23, 59, 59)
    assert sunday_first.start_of_week(wednesday) == _utc(2024, 3, 3)
    assert sunday_first.end_of_week(wednesday) == _utc(2024, 3, 9, 23, 59, 59)


def test_month_boundaries_and_leap_year() -> None:
    """Month end should land on the last second of the last day."""
    calendar = CalendarContext()
    moment = _utc(2024, 2, 10, 9)

    assert calendar.start_of_month(moment) == _utc(2024, 2, 1)
    assert calendar.end_of_month(moment) == _utc(2024, 2, 29, 23, 59, 59)


def test_weekend_detection() -> None:
    """Saturday and Sunday are weekend days."""
    calendar = CalendarContext()

    assert calendar.is_weekend(_utc(2024, 3, 9)) is True
    assert calendar.is_weekend(_utc(2024, 3, 10)) is True
    assert calendar.is_weekend(_utc(2024, 3, 11)) is False


def test_add_days_and_months() -> None:
    """Shifting keeps the wall time and clamps month days."""
    calendar = CalendarContext()

    assert calendar.add_days(_utc(2024, 2, 28, 8), 2) == _utc(2024, 3, 1, 8)
    assert calendar.add_months(_utc(2024, 1, 31), 1) == _utc(2024, 2, 29)
    assert calendar.add_months(_utc(2024, 3, 15), -3) == _utc(2023, 12, 15)


def test_day_count_is_inclusive_and_at_least_one() -> None:
    """Counting should include both ends and never go below one."""
    calendar = CalendarContext()

    assert calendar.day_count(_utc(2024, 3, 1), _utc(2024, 3, 5, 23)) == 5
    assert calendar.day_count(_utc(2024, 3, 5), _utc(2024, 3, 1)) == 1


def test_days_range_is_restartable_and_ordered() -> None:
    """Iterating twice should produce the same ascending day starts."""
    calendar = CalendarContext()
    days = calendar.days_range(_utc(2024, 2, 28, 18), _utc(2024, 3, 1, 6))

    first_pass = list(days)
    second_pass = list(days)

    assert first_pass == [
        _utc(2024, 2, 28),
        _utc(2024, 2, 29),
        _utc(2024, 3, 1),
    ]
    assert second_pass == first_pass
    assert len(days) == 3


def test_days_range_is_empty_when_reversed() -> None:
    """A start after the end yields no days."""
    calendar = CalendarContext()
    days = calendar.days_range(_utc(2024, 3, 5), _utc(2024, 3, 1))

    assert list(days) == []
    assert len(days) == 0


def test_clamped_range_orders_and_trims() -> None:
    """Ranges are ordered and cut to the maximum number of days."""
    calendar = CalendarContext()

    start, end = calendar.clamped_range(_utc(2024, 1, 31), _utc(2024, 1, 1), 10)

    assert start == _utc(2024, 1, 1)
    assert end == _utc(2024, 1, 10)


def test_make_date_rejects_invalid_dates() -> None:
    """Impossible dates should return None."""
    calendar = CalendarContext()

    assert calendar.make_date(2024, 2, 29) == _utc(2024, 2, 29)
    assert calendar.make_date(2023, 2, 29) is None


def test_overflow_falls_back_without_raising() -> None:
    """Boundaries at the end of the calendar return their input."""
    calendar = CalendarContext()
    last_day = datetime.combine(date.max, datetime.min.time(), tzinfo=UTC)
    first_day = datetime.combine(date.min, datetime.min.time(), tzinfo=UTC)

    assert calendar.next_day_start(last_day) is None
    assert calendar.previous_day_start(first_day) is None
    assert calendar.end_of_day(last_day) == last_day
    assert calendar.add_days(last_day, 1) == last_day
    assert calendar.day_span_seconds(last_day) == 0.0
    assert list(calendar.days_range(last_day - timedelta(days=1), last_day)) == [
        last_day - timedelta(days=1),
        last_day,
    ]


def test_seconds_between_ignores_wall_clock_shifts() -> None:
    """Elapsed time across a clock change is measured in real seconds."""
    start = datetime(2024, 3, 31, 0, 0, tzinfo=BERLIN)
    end = datetime(2024, 3, 31, 4, 0, tzinfo=BERLIN)

    assert CalendarContext.seconds_between(start, end) == 3 * 3600


def test_localize_overflow_keeps_the_instant() -> None:
    """Instants that cannot be shifted into the zone are returned as given."""
    tokyo = CalendarContext(timezone=ZoneInfo("Asia/Tokyo"))
    moment = datetime(9999, 12, 31, 20, tzinfo=UTC)

    assert tokyo.localize(moment) is moment


def test_days_range_at_the_end_of_the_calendar_in_an_eastern_zone() -> None:
    """Iterating up to date.max east of UTC stops instead of raising."""
    tokyo_zone = ZoneInfo("Asia/Tokyo")
    tokyo = CalendarContext(timezone=tokyo_zone)
    end = datetime(9999, 12, 31, 20, tzinfo=UTC)

    days = list(tokyo.days_range(end - timedelta(days=1), end))

    assert days == [datetime(9999, 12, 31, tzinfo=tokyo_zone)]


def test_seconds_between_near_date_max_in_a_western_zone() -> None:
    """Elapsed seconds are still measured when UTC would overflow."""
    new_york = ZoneInfo("America/New_York")
    start = datetime(9999, 12, 31, 22, tzinfo=new_york)
    end = datetime(9999, 12, 31, 23, tzinfo=new_york)

    assert CalendarContext.seconds_between(start, end) == 3600.0
