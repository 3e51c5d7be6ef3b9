"""Utility functions for instant conversion tasks.

Functions:
----------
- to_instant: Converts an absolute time input to a timezone-aware `pendulum.DateTime`.
- to_fixed_offset: Converts an absolute time input to a fixed UTC offset.

Strings are not accepted. An instant must carry its offset, so naive datetimes are
rejected as well.

Example usage:
--------------

    # Timestamp to instant
    >>> to_instant(1679792400)  # 2023-03-26T01:00:00+00:00

    # Normalize to German standard time
    >>> to_fixed_offset(1679792400, 1)  # 2023-03-26T02:00:00+01:00
"""

from datetime import date, datetime
from typing import Any, Union

import pendulum
from loguru import logger
from pendulum import DateTime
from pendulum.tz.timezone import FixedTimezone

SECONDS_PER_HOUR = 3600

STANDARD_TIME: FixedTimezone = pendulum.fixed_timezone(1 * SECONDS_PER_HOUR)
"""German standard time (winter time), UTC+1."""

SUMMER_TIME: FixedTimezone = pendulum.fixed_timezone(2 * SECONDS_PER_HOUR)
"""German daylight-saving time (summer time), UTC+2."""


def to_instant(value: Union[DateTime, datetime, int, float, Any]) -> DateTime:
    """Convert an absolute time input into a timezone-aware Pendulum DateTime.

    The offset of the input is preserved. Use `to_fixed_offset` to normalize.

    Args:
        value (Union[DateTime, datetime, int, float]): The instant to convert. Supported types:
            - `pendulum.DateTime`: Returned unchanged.
            - `datetime.datetime`: Must be timezone-aware.
            - `int` or `float`: A Unix timestamp, interpreted as seconds since the epoch (UTC).
              Infinite, NaN and out of range timestamps are rejected.

    Returns:
        pendulum.DateTime: A timezone-aware DateTime representing the same instant.

    Raises:
        ValueError: If `value` is naive, a plain date, a string, an unrepresentable timestamp
            or of any other type.
    """
    if isinstance(value, DateTime):
        if value.tzinfo is None:
            error_msg = f"Naive DateTime {value} is not an absolute instant."
            logger.error(error_msg)
            raise ValueError(error_msg)
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
            error_msg = f"Naive datetime {value} is not an absolute instant."
            logger.error(error_msg)
            raise ValueError(error_msg)
        return pendulum.instance(value)
    if isinstance(value, date):
        error_msg = f"Date {value} has no time of day and is not an absolute instant."
        logger.error(error_msg)
        raise ValueError(error_msg)
    # bool is an int subclass but never a timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return pendulum.from_timestamp(value, tz="UTC")
        except (OverflowError, OSError, ValueError) as e:
            error_msg = f"Timestamp {value} is not a representable instant: {e}"
            logger.error(error_msg)
            raise ValueError(error_msg) from e

    error_msg = f"Unsupported instant input type: {type(value)}"
    logger.error(error_msg)
    raise ValueError(error_msg)


def to_fixed_offset(value: Union[DateTime, datetime, int, float], hours: int) -> DateTime:
    """Represent an instant at a fixed UTC offset.

    The conversion never consults a timezone database or the local timezone.

    Args:
        value: Any input accepted by `to_instant`.
        hours (int): UTC offset in hours, between -23 and +23.

    Returns:
        pendulum.DateTime: The same instant in the fixed offset `UTC+hours`.

    Raises:
        ValueError: If the offset is out of range, `value` is no valid instant or the instant
            falls outside the years 1 to 9999 at the target offset.
    """
    if not isinstance(hours, int) or isinstance(hours, bool):
        raise ValueError(f"UTC offset must be an integer number of hours, got {hours!r}.")
    if not -23 <= hours <= 23:
        raise ValueError("UTC offset must be within the range -23 to +23 hours.")

    instant = to_instant(value)
    try:
        return instant.in_timezone(pendulum.fixed_timezone(hours * SECONDS_PER_HOUR))
    except (OverflowError, ValueError) as e:
        # Calendar fields beyond year 1..9999
        error_msg = f"Instant {instant} is not representable at UTC{hours:+d}: {e}"
        logger.error(error_msg)
        raise ValueError(error_msg) from e
