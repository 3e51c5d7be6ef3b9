"""German daylight-saving time classification."""

from sommerzeit.sommerzeit import (
    dst_transitions,
    german_utc_offset,
    hours_in_day,
    is_dst_change_day,
    is_german_dst,
    last_sunday,
    to_german_time,
)

__all__ = [
    "dst_transitions",
    "german_utc_offset",
    "hours_in_day",
    "is_dst_change_day",
    "is_german_dst",
    "last_sunday",
    "to_german_time",
]
