"""Calendar helpers for day, week and month boundaries.

Every boundary is computed in the timezone of an explicit
:class:`CalendarContext`; nothing reads the process-wide local time unless
a context is built for it. Calendar overflow (dates past ``date.max`` or
before ``date.min``) never raises: boundary helpers return their input
unchanged and iteration simply stops.
"""

from calendar import monthrange
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Protocol


class Clock(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime:
        """Return the current timezone-aware instant."""


class SystemClock:
    """Clock reading the system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


@dataclass(frozen=True)
class FixedClock:
    """Clock frozen at a given instant, for deterministic runs."""

    instant: datetime

    def now(self) -> datetime:
        return self.instant


@dataclass(frozen=True)
class CalendarContext:
    """Timezone, week convention and clock used by date computations.

    Attributes:
        timezone: Zone defining local midnight.
        first_weekday: First day of the week, 0 (Monday) to 6 (Sunday).
        clock: Source of the current instant.
    """

    timezone: tzinfo = timezone.utc
    first_weekday: int = 0
    clock: Clock = field(default_factory=SystemClock)

    # Now / today

    def now(self) -> datetime:
        return self.localize(self.clock.now())

    def today_start(self) -> datetime:
        return self.start_of_day(self.now())

    def today_end(self) -> datetime:
        return self.end_of_day(self.now())

    def seconds_until_day_end(self) -> float:
        now = self.now()
        return self.seconds_between(now, self.end_of_day(now))

    # Normalization

    def localize(self, moment: datetime) -> datetime:
        """Express a timestamp in this calendar's timezone.

        Naive timestamps are read as local wall time of the calendar. An
        instant that cannot be expressed in the zone is returned unchanged.
        """
        if moment.tzinfo is None:
            return moment.replace(tzinfo=self.timezone)
        try:
            return moment.astimezone(self.timezone)
        except OverflowError:
            return moment

    def day_key(self, moment: datetime) -> datetime:
        return self.start_of_day(moment)

    def is_same_day(self, first: datetime, second: datetime) -> bool:
        return self.start_of_day(first) == self.start_of_day(second)

    def is_weekend(self, moment: datetime) -> bool:
        return self.localize(moment).weekday() >= 5

    # Day boundaries

    def start_of_day(self, moment: datetime) -> datetime:
        return self._midnight(self.localize(moment).date())

    def end_of_day(self, moment: datetime) -> datetime:
        """Return the last second of the moment's calendar day."""
        next_start = self.next_day_start(moment)
        if next_start is None:
            return moment
        return next_start - timedelta(seconds=1)

    def next_day_start(self, moment: datetime) -> datetime | None:
        shifted = _shift_date(self.localize(moment).date(), 1)
        return self._midnight(shifted) if shifted is not None else None

    def previous_day_start(self, moment: datetime) -> datetime | None:
        shifted = _shift_date(self.localize(moment).date(), -1)
        return self._midnight(shifted) if shifted is not None else None

    def day_span_seconds(self, moment: datetime) -> float:
        """Return the real length of the moment's day in seconds.

        The span runs from local midnight to the next local midnight, so
        days with a clock change are shorter or longer than 86400 seconds.
        Returns 0 when the next day cannot be represented.
        """
        next_start = self.next_day_start(moment)
        if next_start is None:
            return 0.0
        return self.seconds_between(self.start_of_day(moment), next_start)

    # Week boundaries

    def start_of_week(self, moment: datetime) -> datetime:
        local_day = self.localize(moment).date()
        offset = (local_day.weekday() - self.first_weekday) % 7
        shifted = _shift_date(local_day, -offset)
        if shifted is None:
            return self.start_of_day(moment)
        return self._midnight(shifted)

    def end_of_week(self, moment: datetime) -> datetime:
        start = self.start_of_week(moment)
        return self.end_of_day(self.add_days(start, 6))

    # Month boundaries

    def start_of_month(self, moment: datetime) -> datetime:
        return self._midnight(self.localize(moment).date().replace(day=1))

    def end_of_month(self, moment: datetime) -> datetime:
        local_day = self.localize(moment).date()
        last_day = monthrange(local_day.year, local_day.month)[1]
        return self.end_of_day(self._midnight(local_day.replace(day=last_day)))

    # Arithmetic

    def add_days(self, moment: datetime, days: int) -> datetime:
        """Shift by whole calendar days, keeping the local wall time."""
        local = self.localize(moment)
        shifted = _shift_date(local.date(), days)
        if shifted is None:
            return moment
        return datetime.combine(shifted, local.timetz())

    def add_months(self, moment: datetime, months: int) -> datetime:
        """Shift by calendar months, clamping the day to the month length."""
        local = self.localize(moment)
        month_index = local.year * 12 + (local.month - 1) + months
        year, month = divmod(month_index, 12)
        month += 1
        try:
            last_day = monthrange(year, month)[1]
            shifted = local.date().replace(
                year=year,
                month=month,
                day=min(local.day, last_day),
            )
        except (ValueError, OverflowError):
            return moment
        return datetime.combine(shifted, local.timetz())

    def day_count(self, start: datetime, end: datetime) -> int:
        """Return the inclusive number of days from start to end, at least 1."""
        first = self.localize(start).date()
        last = self.localize(end).date()
        return max(1, (last - first).days + 1)

    def days_range(self, start: datetime, end: datetime) -> "DaysRange":
        return DaysRange(calendar=self, start=start, end=end)

    def clamped_range(
        self,
        start: datetime,
        end: datetime,
        max_days: int,
    ) -> tuple[datetime, datetime]:
        """Order a range and trim it to at most ``max_days`` days.

        Args:
            start: One bound of the range.
            end: The other bound of the range.
            max_days: Largest number of days kept, counted from the start.

        Returns:
            tuple[datetime, datetime]: Day starts of the first and last day.
        """
        first = min(self.start_of_day(start), self.start_of_day(end))
        last = max(self.start_of_day(start), self.start_of_day(end))
        limit = max(1, max_days)
        if self.day_count(first, last) > limit:
            last = self.add_days(first, limit - 1)
        return first, last

    def make_date(self, year: int, month: int, day: int) -> datetime | None:
        try:
            return self._midnight(date(year, month, day))
        except ValueError:
            return None

    @staticmethod
    def seconds_between(start: datetime, end: datetime) -> float:
        """Return elapsed real seconds, ignoring wall-clock shifts."""
        try:
            return (
                end.astimezone(timezone.utc) - start.astimezone(timezone.utc)
            ).total_seconds()
        except OverflowError:
            return (end - start).total_seconds()

    def _midnight(self, day: date) -> datetime:
        return datetime.combine(day, time.min, tzinfo=self.timezone)


@dataclass(frozen=True)
class DaysRange:
    """Inclusive ascending sequence of day starts between two timestamps.

    The sequence can be iterated any number of times. It is empty when the
    start falls after the end and stops early if the calendar cannot
    advance past a day.
    """

    calendar: CalendarContext
    start: datetime
    end: datetime

    def __iter__(self) -> Iterator[datetime]:
        cursor: datetime | None = self.calendar.start_of_day(self.start)
        last = self.calendar.start_of_day(self.end)
        while cursor is not None and cursor <= last:
            yield cursor
            cursor = self.calendar.next_day_start(cursor)

    def __len__(self) -> int:
        first = self.calendar.start_of_day(self.start)
        last = self.calendar.start_of_day(self.end)
        if first > last:
            return 0
        return self.calendar.day_count(first, last)


def _shift_date(day: date, days: int) -> date | None:
    try:
        return day + timedelta(days=days)
    except OverflowError:
        return None


__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "CalendarContext",
    "DaysRange",
]
