"""
Date/time utility functions.
"""

from .datetime_util import (
    EPOCH,
    FLOOR_UNITS,
    UTC,
    copy,
    floor,
    floor_to_day,
    floor_to_five_minutes,
    floor_to_hour,
    floor_to_minute,
    floor_to_month,
    floor_to_second,
    floor_to_year,
    now,
    parse_embedded,
    resolve_zone,
    to_timestamp,
    to_zoned_datetime,
)

__all__ = [
    'EPOCH',
    'FLOOR_UNITS',
    'UTC',
    'copy',
    'floor',
    'floor_to_day',
    'floor_to_five_minutes',
    'floor_to_hour',
    'floor_to_minute',
    'floor_to_month',
    'floor_to_second',
    'floor_to_year',
    'now',
    'parse_embedded',
    'resolve_zone',
    'to_timestamp',
    'to_zoned_datetime',
]
