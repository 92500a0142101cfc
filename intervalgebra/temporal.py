"""Datetime intervals for calendar periods.

Period arithmetic goes through python-dateutil's ``relativedelta`` so that
"one month" means a calendar month rather than a fixed number of seconds.
"""

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from intervalgebra.errors import EmptyIntervalError
from intervalgebra.interval import (
    BoundedInterval,
    EmptyInterval,
    Interval,
    natural_ordered,
)
from intervalgebra.policy import EndpointPolicy


def _require_aware(value: datetime, edge: str) -> datetime:
    if not isinstance(value, datetime):
        raise TypeError(
            f"Interval {edge} must be a datetime.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
    if value.tzinfo is None:
        raise TypeError(
            f"Interval {edge} must be a timezone-aware datetime.\n"
            f"Got naive datetime: {value!r}\n"
            f"Hint: Add timezone info:\n"
            f"  from zoneinfo import ZoneInfo\n"
            f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
            f"# or 'US/Pacific', etc."
        )
    return value


def spanning(
    start: datetime,
    duration: timedelta | relativedelta,
    policy: EndpointPolicy = EndpointPolicy.CLOSED_OPEN,
) -> BoundedInterval[datetime]:
    """Interval from ``start`` lasting ``duration``.

    Half-open by default, so consecutive spans tile without overlapping.
    A ``timedelta`` is elapsed time and is added in UTC, so a span crossing a
    DST change still lasts exactly that long. A ``relativedelta`` is a
    calendar step and is added in wall-clock time.

    Example:
        >>> at = datetime(2025, 1, 31, tzinfo=ZoneInfo("UTC"))
        >>> str(spanning(at, relativedelta(months=1)))
        '[2025-01-31 00:00:00+00:00, 2025-02-28 00:00:00+00:00)'
    """
    start = _require_aware(start, "start")
    if isinstance(duration, timedelta):
        end = (start.astimezone(timezone.utc) + duration).astimezone(start.tzinfo)
    else:
        end = start + duration
    return natural_ordered(start, end, policy)


def day_of(day: date, tz: str = "UTC") -> BoundedInterval[datetime]:
    """The calendar day ``[00:00, next day 00:00)`` in ``tz``."""
    zone = ZoneInfo(tz)
    start = datetime.combine(day, time.min, tzinfo=zone)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=zone)
    return natural_ordered(start, end, EndpointPolicy.CLOSED_OPEN)


def month_of(year: int, month: int, tz: str = "UTC") -> BoundedInterval[datetime]:
    """The calendar month ``[1st 00:00, 1st of next month 00:00)`` in ``tz``."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    start = datetime(year, month, 1, tzinfo=ZoneInfo(tz))
    return spanning(start, relativedelta(months=1))


def duration_of(interval: Interval[datetime]) -> timedelta:
    """Elapsed time between the interval's bounds, measured in UTC."""
    if isinstance(interval, EmptyInterval):
        raise EmptyIntervalError("duration")
    return interval.maximum.astimezone(timezone.utc) - interval.minimum.astimezone(
        timezone.utc
    )
