"""German daylight-saving time (Sommerzeit).

Summer time is from
    last Sunday of March, 2:00 (UTC+1) to
    last Sunday of October, 3:00 (UTC+2).

From winter --> summer time: 2:00 --> 3:00
From summer --> winter time: 3:00 --> 2:00

All calendar fields are read after normalizing the instant to German standard time
(UTC+1). The offset of the input is therefore irrelevant: if it is summer time in
Germany at a given instant, this is independent of the timezone the instant is given in.

The EU rule is applied to every year. It only describes German clocks from 1996 on.
Instants from 9999-12-31T23:00:00+00:00 on lie in year 10000 in UTC+1 and raise ValueError.
"""

from datetime import date, datetime
from typing import Union

import pendulum
from loguru import logger
from pendulum import Date, DateTime, Duration

from sommerzeit.utils.datetimeutil import (
    STANDARD_TIME,
    SUMMER_TIME,
    to_fixed_offset,
    to_instant,
)

DAYS_PER_WEEK = 7
SUNDAY = 7  # ISO weekday

DST_START_MONTH = 3
DST_END_MONTH = 10
# Hour in standard time (UTC+1) at which both transitions happen
TRANSITION_HOUR = 2

Instant = Union[DateTime, datetime, int, float]


def _on_or_after_last_sunday(winter_time: DateTime) -> bool:
    """Check whether `winter_time` is at or past the transition on its month's last Sunday.

    No further Sunday exists in the month once the next Sunday lies beyond the month end.
    """
    days_to_next_sunday = DAYS_PER_WEEK - winter_time.isoweekday() % DAYS_PER_WEEK
    if winter_time.day + days_to_next_sunday <= winter_time.days_in_month:
        # Last sunday still ahead
        return False
    if winter_time.isoweekday() == SUNDAY:
        # Is the last sunday
        return winter_time.hour >= TRANSITION_HOUR
    return True


def is_german_dst(instant: Instant) -> bool:
    """Return whether daylight-saving time applies to German civil time at `instant`.

    Args:
        instant: An absolute instant. See `to_instant` for accepted types.

    Returns:
        bool: True during summer time (UTC+2), False during standard time (UTC+1).

    Raises:
        ValueError: If `instant` is not an absolute instant or lies beyond year 9999 in UTC+1.
    """
    winter_time = to_fixed_offset(instant, 1)

    month = winter_time.month
    if month < DST_START_MONTH or month > DST_END_MONTH:
        return False
    if DST_START_MONTH < month < DST_END_MONTH:
        return True

    after_transition = _on_or_after_last_sunday(winter_time)
    logger.trace(
        f"{winter_time.to_iso8601_string()} is {'at or after' if after_transition else 'before'} "
        f"the transition of month {month}"
    )
    if month == DST_START_MONTH:
        return after_transition
    return not after_transition


def last_sunday(year: int, month: int) -> Date:
    """Return the last Sunday of the given month."""
    last_day = pendulum.date(year, month, 1).end_of("month")
    return last_day.subtract(days=last_day.isoweekday() % DAYS_PER_WEEK)


def dst_transitions(year: int) -> tuple[DateTime, DateTime]:
    """Return the instants summer time starts and ends in `year`.

    Both instants are given in German standard time (UTC+1). The start is inclusive,
    the end exclusive: `is_german_dst(start)` is True, `is_german_dst(end)` is False.
    """
    start_day = last_sunday(year, DST_START_MONTH)
    end_day = last_sunday(year, DST_END_MONTH)
    start = pendulum.datetime(
        year, DST_START_MONTH, start_day.day, TRANSITION_HOUR, tz=STANDARD_TIME
    )
    end = pendulum.datetime(year, DST_END_MONTH, end_day.day, TRANSITION_HOUR, tz=STANDARD_TIME)
    return start, end


def german_utc_offset(instant: Instant) -> Duration:
    """UTC offset of German civil time at `instant`."""
    if is_german_dst(instant):
        return pendulum.duration(hours=2)
    return pendulum.duration(hours=1)


def to_german_time(instant: Instant) -> DateTime:
    """Represent `instant` in the German civil offset in effect at that instant.

    The result carries a fixed offset of UTC+1 or UTC+2, no timezone database is used.
    """
    tz = SUMMER_TIME if is_german_dst(instant) else STANDARD_TIME
    return to_instant(instant).in_timezone(tz)


def is_dst_change_day(day: Union[date, datetime]) -> bool:
    """Checks if Daylight Saving Time (DST) starts or ends on a given day.

    Only the calendar date of `day` is used, any time or offset is ignored.
    """
    if day.month not in (DST_START_MONTH, DST_END_MONTH):
        return False
    return day.day == last_sunday(day.year, day.month).day


def hours_in_day(day: Union[date, datetime]) -> int:
    """Returns the number of hours in the given German civil day.

    Args:
        day (Union[date, datetime]): The day to check. Only the calendar date is used.

    Returns:
        int: The number of hours in the day (23, 24, or 25).
    """
    if not is_dst_change_day(day):
        return 24
    if day.month == DST_START_MONTH:
        # 2:00 --> 3:00
        return 23
    # 3:00 --> 2:00
    return 25
