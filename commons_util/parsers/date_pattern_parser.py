"""
Date pattern parser for locating dates embedded in arbitrary strings.

A date pattern uses Joda-style letters, for example:
- yyyy-MM-dd         → app.2008-05-01.log
- yyyyMMdd-HHmmss    → app-20090624-151112.log.gz
- yyyy-MM-dd HH:mm:ss.SSS

Supported letters:
- y, Y: year (yy is a two-digit year)
- M: month of year
- d: day of month
- D: day of year
- H: hour of day (0-23)
- k: clock hour of day (1-24)
- K: hour of half day (0-11)
- h: clock hour of half day (1-12)
- m: minute of hour
- s: second of minute
- S: fraction of second

The search expression is built by replacing every letter with a single digit
wildcard and copying everything else unchanged. When that finds nothing, a
lenient search runs in which separators are optional.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Dict, List, Optional, Tuple, Union

from ..exceptions import InvalidFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateField:
    """A run of identical pattern letters, e.g. 'yyyy' → DateField('y', 4)"""
    letter: str
    width: int


Token = Union[DateField, str]


class DatePatternParser:
    """
    Parser for Joda-style date patterns.

    All methods are classmethods; nothing is cached between calls.
    """

    DEFAULT_PATTERN = "yyyy-MM-dd"

    FIELD_NAMES: Dict[str, str] = {
        'y': 'year',
        'Y': 'year',
        'M': 'month',
        'd': 'day',
        'D': 'day_of_year',
        'H': 'hour',
        'k': 'clock_hour',
        'K': 'hour_of_halfday',
        'h': 'clock_hour_of_halfday',
        'm': 'minute',
        's': 'second',
        'S': 'fraction',
    }

    # Values used when a field is absent from the pattern
    FIELD_DEFAULTS: Dict[str, int] = {
        'year': 1970,
        'month': 1,
        'day': 1,
        'hour': 0,
        'minute': 0,
        'second': 0,
        'microsecond': 0,
    }

    # Accepted values of the hour variants and day of year
    FIELD_RANGES: Dict[str, Tuple[int, int]] = {
        'day_of_year': (1, 366),
        'clock_hour': (1, 24),
        'hour_of_halfday': (0, 11),
        'clock_hour_of_halfday': (1, 12),
    }

    # Two-digit years land in the century window starting this many years ago
    TWO_DIGIT_YEAR_WINDOW_START = 80

    QUOTE = "'"

    @classmethod
    def tokenize(cls, pattern: str) -> List[Token]:
        """
        Split a pattern into fields and literal characters.

        Args:
            pattern: Date pattern such as 'yyyy-MM-dd'

        Returns:
            List of DateField and single-character literal strings

        Raises:
            InvalidFormatError: If the pattern is empty, quoted, or uses an unsupported letter

        Examples:
            >>> DatePatternParser.tokenize('yyyy-MM')
            [DateField(letter='y', width=4), '-', DateField(letter='M', width=2)]
        """
        if not pattern:
            raise InvalidFormatError("Date pattern cannot be empty", pattern=pattern)

        tokens: List[Token] = []
        for c in pattern:
            if c == cls.QUOTE:
                raise InvalidFormatError(
                    f"Quoted literals are not supported in date pattern '{pattern}'",
                    pattern=pattern
                )

            if not c.isalpha():
                tokens.append(c)
                continue

            if c not in cls.FIELD_NAMES:
                raise InvalidFormatError(
                    f"Illegal pattern letter '{c}' in date pattern '{pattern}'",
                    pattern=pattern
                )

            last = tokens[-1] if tokens else None
            if isinstance(last, DateField) and last.letter == c:
                tokens[-1] = DateField(c, last.width + 1)
            else:
                tokens.append(DateField(c, 1))

        return tokens

    @classmethod
    def to_search_regex(cls, pattern: str) -> str:
        """
        Derive the search expression for a pattern.

        Every letter becomes '\\d'; every other character is copied unchanged.

        Args:
            pattern: Date pattern

        Returns:
            Regular expression source ('yyyy-MM' → '\\d\\d\\d\\d-\\d\\d')
        """
        return "".join(r"\d" if c.isalpha() else c for c in pattern)

    @classmethod
    def to_lenient_regex(cls, pattern: str) -> str:
        """
        Derive the lenient expression: one capture group per field, optional separators.

        Args:
            pattern: Date pattern

        Returns:
            Regular expression source
        """
        parts = []
        for token in cls.tokenize(pattern):
            if isinstance(token, DateField):
                parts.append(rf"(\d{{{token.width}}})")
            else:
                parts.append(f"(?:{re.escape(token)})?")
        return "".join(parts)

    @classmethod
    def to_parse_regex(cls, pattern: str) -> str:
        """
        Derive the expression used to read fields out of a matched string.

        Args:
            pattern: Date pattern

        Returns:
            Regular expression source with one capture group per field
        """
        parts = []
        for token in cls.tokenize(pattern):
            if isinstance(token, DateField):
                parts.append(rf"(\d{{{token.width}}})")
            else:
                parts.append(re.escape(token))
        return "".join(parts)

    @classmethod
    def validate(cls, pattern: str) -> None:
        """
        Check that a pattern can be used for both searching and parsing.

        Raises:
            InvalidFormatError: If the pattern is invalid
        """
        cls.tokenize(pattern)
        regex = cls.to_search_regex(pattern)
        try:
            re.compile(regex)
        except re.error as e:
            raise InvalidFormatError(
                f"Date pattern '{pattern}' produced an invalid search expression: {e}",
                regex=regex,
                pattern=pattern
            ) from e

    @classmethod
    def search(cls, text: Optional[str], pattern: str) -> Optional[str]:
        """
        Find the leftmost substring of text that looks like a date in pattern.

        Args:
            text: String to search (e.g. a log file name)
            pattern: Date pattern

        Returns:
            The matched substring, or None if nothing matched
        """
        if not text:
            return None

        cls.validate(pattern)

        match = re.search(cls.to_search_regex(pattern), text)
        if match:
            return match.group()

        lenient = cls.to_lenient_regex(pattern)
        match = re.search(lenient, text)
        if match:
            logger.info(f"Lenient match for pattern '{pattern}' [regex='{lenient}']: {match.group()}")
            return match.group()

        return None

    @classmethod
    def find_all(cls, text: Optional[str], pattern: str) -> List[str]:
        """
        Find every non-overlapping substring of text matching the search expression.

        Args:
            text: String to search
            pattern: Date pattern

        Returns:
            Matched substrings in order of appearance
        """
        if not text:
            return []

        cls.validate(pattern)
        return [m.group() for m in re.finditer(cls.to_search_regex(pattern), text)]

    @classmethod
    def parse(cls, value: str, pattern: str, zone: tzinfo) -> datetime:
        """
        Parse a string that holds exactly one date rendered with pattern.

        Separators must be present unless they are absent altogether
        (the form found by the lenient search).

        Args:
            value: Date string, e.g. '2008-05-01'
            pattern: Date pattern, e.g. 'yyyy-MM-dd'
            zone: Timezone the fields are expressed in

        Returns:
            Timezone-aware datetime

        Raises:
            InvalidFormatError: If value does not fit the pattern or holds out-of-range fields
        """
        fields = [t for t in cls.tokenize(pattern) if isinstance(t, DateField)]

        match = re.fullmatch(cls.to_parse_regex(pattern), value)
        if match is None:
            match = re.fullmatch(cls.to_lenient_regex(pattern), value)
        if match is None:
            raise InvalidFormatError(
                f"Invalid format: '{value}' does not match date pattern '{pattern}'",
                text=value,
                pattern=pattern
            )

        values = dict(cls.FIELD_DEFAULTS)
        day_of_year = None
        for field, digits in zip(fields, match.groups()):
            name = cls.FIELD_NAMES[field.letter]
            number = int(digits)

            if name in cls.FIELD_RANGES:
                low, high = cls.FIELD_RANGES[name]
                if not low <= number <= high:
                    raise InvalidFormatError(
                        f"Cannot parse '{value}' with date pattern '{pattern}': "
                        f"{name} {number} must be in {low}..{high}",
                        text=value,
                        pattern=pattern
                    )

            if name == 'fraction':
                values['microsecond'] = int(digits[:6].ljust(6, '0'))
            elif name == 'year' and field.width == 2:
                values['year'] = cls.expand_two_digit_year(number)
            elif name == 'day_of_year':
                day_of_year = number
            elif name == 'clock_hour':
                values['hour'] = number % 24
            elif name == 'clock_hour_of_halfday':
                values['hour'] = number % 12
            elif name == 'hour_of_halfday':
                values['hour'] = number
            else:
                values[name] = number

        try:
            if day_of_year is None:
                return datetime(tzinfo=zone, **values)

            values.update(month=1, day=1)
            result = datetime(tzinfo=zone, **values) + timedelta(days=day_of_year - 1)
            if result.year != values['year']:
                raise ValueError(f"day of year {day_of_year} is out of range for {values['year']}")
            return result
        except ValueError as e:
            raise InvalidFormatError(
                f"Cannot parse '{value}' with date pattern '{pattern}': {e}",
                text=value,
                pattern=pattern
            ) from e

    @classmethod
    def expand_two_digit_year(cls, two_digits: int, current_year: Optional[int] = None) -> int:
        """
        Expand a two-digit year into the century window around the current year.

        The window starts TWO_DIGIT_YEAR_WINDOW_START years ago and spans 100 years,
        so in 2026 '46'..'99' become 1946..1999 and '00'..'45' become 2000..2045.

        Args:
            two_digits: Year 0-99
            current_year: Reference year (default: this year)

        Returns:
            Four-digit year
        """
        if current_year is None:
            current_year = datetime.now().year
        start = current_year - cls.TWO_DIGIT_YEAR_WINDOW_START
        return start + (two_digits - start) % 100
