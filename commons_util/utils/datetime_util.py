"""
Null-safe date/time helpers.

Timestamps are integer milliseconds since the Unix epoch and are always UTC.
Zoned values are timezone-aware datetimes; UTC values carry dateutil's tz.UTC.
A naive datetime passed to any helper is interpreted as UTC.

Floor examples ("2009-06-24 13:24:51.476 -08:00"):
- floor_to_year         → 2009-01-01 00:00:00.000 -08:00
- floor_to_month        → 2009-06-01 00:00:00.000 -08:00
- floor_to_day          → 2009-06-24 00:00:00.000 -08:00
- floor_to_hour         → 2009-06-24 13:00:00.000 -08:00
- floor_to_five_minutes → 2009-06-24 13:20:00.000 -08:00
- floor_to_minute       → 2009-06-24 13:24:00.000 -08:00
- floor_to_second       → 2009-06-24 13:24:51.000 -08:00
"""

import logging
from datetime import datetime, timedelta, tzinfo
from typing import Callable, Dict, Optional, Union

from dateutil import tz

from ..exceptions import InvalidFormatError
from ..parsers import DatePatternParser

logger = logging.getLogger(__name__)

UTC = tz.UTC
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
ONE_MILLISECOND = timedelta(milliseconds=1)

Zone = Union[tzinfo, str, None]


def resolve_zone(zone: Zone) -> tzinfo:
    """
    Turn a zone argument into a tzinfo.

    Args:
        zone: tzinfo instance, IANA/offset name ('UTC', 'America/New_York'), or None for UTC

    Returns:
        tzinfo instance

    Raises:
        InvalidFormatError: If a zone name cannot be resolved
    """
    if zone is None:
        return UTC
    if isinstance(zone, tzinfo):
        return zone

    # gettz('') returns the local zone, which is never what a caller naming a zone wants
    resolved = tz.gettz(zone) if zone.strip() else None
    if resolved is None:
        raise InvalidFormatError(f"Unknown time zone: '{zone}'")
    return resolved


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


# ============================================================================
# Conversions
# ============================================================================

def to_zoned_datetime(timestamp: Optional[int]) -> Optional[datetime]:
    """
    Null-safe conversion of an epoch-millisecond timestamp into a UTC datetime.

    Args:
        timestamp: Milliseconds since the epoch (UTC)

    Returns:
        UTC datetime, or None if timestamp is None
    """
    if timestamp is None:
        return None
    return EPOCH + timedelta(milliseconds=timestamp)


def copy(value: Optional[datetime]) -> Optional[datetime]:
    """
    Null-safe copy of a datetime, fixed to UTC.

    The result is the same instant but never the same object as value.
    """
    if value is None:
        return None
    utc_value = _as_aware(value).astimezone(UTC)
    return datetime(
        utc_value.year, utc_value.month, utc_value.day,
        utc_value.hour, utc_value.minute, utc_value.second,
        utc_value.microsecond, tzinfo=UTC
    )


def to_timestamp(value: Optional[datetime]) -> Optional[int]:
    """
    Null-safe conversion of a datetime into epoch milliseconds.

    The timezone is discarded; sub-millisecond precision is truncated.
    """
    if value is None:
        return None
    return (_as_aware(value) - EPOCH) // ONE_MILLISECOND


def now() -> datetime:
    """Get the current time as a UTC datetime"""
    return datetime.now(UTC)


# ============================================================================
# Floors
# ============================================================================

def floor_to_year(value: Optional[datetime]) -> Optional[datetime]:
    """
    Null-safe floor to the first instant of the year (Jan 1), same timezone.

    Args:
        value: Datetime to round downwards

    Returns:
        New datetime, or None if value is None
    """
    if value is None:
        return None
    return value.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0, fold=0)


def floor_to_month(value: Optional[datetime]) -> Optional[datetime]:
    """Null-safe floor to the first day of the month, same timezone."""
    if value is None:
        return None
    return value.replace(day=1, hour=0, minute=0, second=0, microsecond=0, fold=0)


def floor_to_day(value: Optional[datetime]) -> Optional[datetime]:
    """Null-safe floor to midnight, same timezone."""
    if value is None:
        return None
    return value.replace(hour=0, minute=0, second=0, microsecond=0, fold=0)


def floor_to_hour(value: Optional[datetime]) -> Optional[datetime]:
    """Null-safe floor to the start of the hour, same timezone."""
    if value is None:
        return None
    return value.replace(minute=0, second=0, microsecond=0, fold=0)


def floor_to_five_minutes(value: Optional[datetime]) -> Optional[datetime]:
    """
    Null-safe floor to the last five-minute boundary, same timezone.

    13:24:51 → 13:20:00, 13:25:00 → 13:25:00
    """
    if value is None:
        return None
    minute = (value.minute // 5) * 5
    return value.replace(minute=minute, second=0, microsecond=0, fold=0)


def floor_to_minute(value: Optional[datetime]) -> Optional[datetime]:
    """Null-safe floor to the start of the minute, same timezone."""
    if value is None:
        return None
    return value.replace(second=0, microsecond=0, fold=0)


def floor_to_second(value: Optional[datetime]) -> Optional[datetime]:
    """Null-safe floor to the start of the second, same timezone."""
    if value is None:
        return None
    return value.replace(microsecond=0, fold=0)


# Coarse to fine
FLOOR_FUNCTIONS: Dict[str, Callable[[Optional[datetime]], Optional[datetime]]] = {
    "year": floor_to_year,
    "month": floor_to_month,
    "day": floor_to_day,
    "hour": floor_to_hour,
    "five_minutes": floor_to_five_minutes,
    "minute": floor_to_minute,
    "second": floor_to_second,
}

FLOOR_UNITS = tuple(FLOOR_FUNCTIONS)


def floor(value: Optional[datetime], unit: str) -> Optional[datetime]:
    """
    Floor a datetime by unit name.

    Args:
        value: Datetime to round downwards
        unit: One of FLOOR_UNITS

    Returns:
        New datetime, or None if value is None

    Raises:
        ValueError: If unit is unknown
    """
    try:
        func = FLOOR_FUNCTIONS[unit]
    except KeyError:
        raise ValueError(f"Unknown floor unit: {unit} (expected one of {', '.join(FLOOR_UNITS)})")
    return func(value)


# ============================================================================
# Embedded dates
# ============================================================================

def parse_embedded(
    text: Optional[str],
    pattern: str = DatePatternParser.DEFAULT_PATTERN,
    zone: Zone = UTC
) -> datetime:
    """
    Parse a date embedded in a string such as "app.2008-05-01.log".

    Only the date's own format needs to be known, not the surrounding text:
    "app-20090624-151112.log.gz" is parsed with 'yyyyMMdd-HHmmss'.

    Args:
        text: The string to search
        pattern: Date pattern embedded in the string (default 'yyyy-MM-dd')
        zone: Timezone the parsed date will be in (default UTC)

    Returns:
        The parsed datetime

    Raises:
        InvalidFormatError: If the pattern or zone is invalid, or text holds no embedded date
    """
    regex = DatePatternParser.to_search_regex(pattern or "")

    try:
        zone = resolve_zone(zone)
        DatePatternParser.validate(pattern)
        matched = DatePatternParser.search(text, pattern)
        if matched is not None:
            logger.debug(f"Matching date: {matched}")
            return DatePatternParser.parse(matched, pattern, zone)
    except InvalidFormatError as e:
        # Report the caller's text, not just the matched substring
        raise InvalidFormatError(str(e), text=text, regex=regex, pattern=pattern) from e

    logger.warning(f"No embedded date in '{text}' [regexPattern='{regex}', datePattern='{pattern}']")
    raise InvalidFormatError(
        f"String '{text}' did not contain an embedded date "
        f"[regexPattern='{regex}', datePattern='{pattern}']",
        text=text,
        regex=regex,
        pattern=pattern
    )
