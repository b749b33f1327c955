"""
Commons Util Package

Small, stateless helpers:
- HostnameParser: split an FQDN into host and domain on its first dot
- datetime_util: null-safe conversions between epoch milliseconds and
  timezone-aware datetimes, floors to calendar boundaries, and parsing of
  dates embedded in strings such as "app.2008-05-01.log"
"""

from .exceptions import InvalidFormatError
from .models import HostParts
from .parsers import DatePatternParser, HostnameParser, split_host_fqdn
from .utils import (
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
    to_timestamp,
    to_zoned_datetime,
)

__version__ = "1.0.0"

__all__ = [
    # Errors
    "InvalidFormatError",
    # Models
    "HostParts",
    # Parsers
    "DatePatternParser",
    "HostnameParser",
    "split_host_fqdn",
    # Date/time helpers
    "FLOOR_UNITS",
    "UTC",
    "copy",
    "floor",
    "floor_to_day",
    "floor_to_five_minutes",
    "floor_to_hour",
    "floor_to_minute",
    "floor_to_month",
    "floor_to_second",
    "floor_to_year",
    "now",
    "parse_embedded",
    "to_timestamp",
    "to_zoned_datetime",
]
