"""
Embedded date tests: pattern handling and parse_embedded.
"""

import logging
from datetime import datetime, timedelta

import pytest
from dateutil import tz

from commons_util.exceptions import InvalidFormatError
from commons_util.parsers import DateField, DatePatternParser
from commons_util.utils.datetime_util import UTC, parse_embedded


class TestTokenize:
    """Pattern tokenizing and validation."""

    def test_fields_and_literals(self) -> None:
        assert DatePatternParser.tokenize("yyyy-MM") == [DateField("y", 4), "-", DateField("M", 2)]

    def test_adjacent_fields(self) -> None:
        tokens = DatePatternParser.tokenize("HHmmss")
        assert tokens == [DateField("H", 2), DateField("m", 2), DateField("s", 2)]

    @pytest.mark.parametrize("pattern", ["", "yyyy-QQ-dd", "EEE yyyy", "yyyy'T'HH", "yyyy-MM-dd a"])
    def test_invalid_patterns(self, pattern: str) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            DatePatternParser.tokenize(pattern)
        assert exc_info.value.pattern == pattern

    @pytest.mark.parametrize("pattern", ["YYYY-MM-dd", "yyyyDDD", "hh:mm", "kk:mm", "KK:mm"])
    def test_extra_letters_accepted(self, pattern: str) -> None:
        DatePatternParser.validate(pattern)

    def test_invalid_regex(self) -> None:
        with pytest.raises(InvalidFormatError, match="invalid search expression") as exc_info:
            DatePatternParser.validate("yyyy(MM")
        assert exc_info.value.regex == r"\d\d\d\d(\d\d"


class TestRegexDerivation:
    """Letters become single-digit wildcards; everything else is copied."""

    def test_default_pattern(self) -> None:
        assert DatePatternParser.to_search_regex("yyyy-MM-dd") == r"\d\d\d\d-\d\d-\d\d"

    def test_separators_copied_unchanged(self) -> None:
        assert DatePatternParser.to_search_regex("yyyyMMdd-HH.mm:ss") == (
            r"\d\d\d\d\d\d\d\d-\d\d.\d\d:\d\d"
        )

    def test_lenient_regex(self) -> None:
        assert DatePatternParser.to_lenient_regex("yyyy-MM") == r"(\d{4})(?:\-)?(\d{2})"

    def test_parse_regex(self) -> None:
        assert DatePatternParser.to_parse_regex("yyyy.MM") == r"(\d{4})\.(\d{2})"


class TestSearch:
    """Locating the date inside arbitrary text."""

    def test_leftmost_match(self) -> None:
        assert DatePatternParser.search("a-2008-01-01-2009-02-02", "yyyy-MM-dd") == "2008-01-01"

    def test_lenient_fallback(self) -> None:
        matched = DatePatternParser.search("app-20090624-151112.log.gz", "yyyy-MM-dd-HHmmss")
        assert matched == "20090624-151112"

    def test_no_match(self) -> None:
        assert DatePatternParser.search("no-date-here", "yyyy-MM-dd") is None

    def test_empty_text(self) -> None:
        assert DatePatternParser.search(None, "yyyy-MM-dd") is None
        assert DatePatternParser.search("", "yyyy-MM-dd") is None

    def test_find_all(self) -> None:
        found = DatePatternParser.find_all("2008-01-01_2009-02-02.tar", "yyyy-MM-dd")
        assert found == ["2008-01-01", "2009-02-02"]

    def test_find_all_nothing(self) -> None:
        assert DatePatternParser.find_all("nothing", "yyyy-MM-dd") == []
        assert DatePatternParser.find_all(None, "yyyy-MM-dd") == []


class TestParse:
    """Reading fields out of a matched substring."""

    def test_fraction(self) -> None:
        value = DatePatternParser.parse("2009-06-24 13:24:51.476", "yyyy-MM-dd HH:mm:ss.SSS", UTC)
        assert value == datetime(2009, 6, 24, 13, 24, 51, 476000, tzinfo=UTC)

    def test_two_digit_year(self) -> None:
        assert DatePatternParser.parse("090624", "yyMMdd", UTC).year == 2009
        assert DatePatternParser.parse("990624", "yyMMdd", UTC).year == 1999
        assert DatePatternParser.parse("500101", "yyMMdd", UTC).year == 1950

    @pytest.mark.parametrize("two_digits, expected", [
        (0, 2000), (9, 2009), (45, 2045), (46, 1946), (50, 1950), (99, 1999),
    ])
    def test_two_digit_year_window(self, two_digits: int, expected: int) -> None:
        # Window for 2026 runs 1946..2045
        assert DatePatternParser.expand_two_digit_year(two_digits, current_year=2026) == expected

    def test_two_digit_year_window_moves(self) -> None:
        assert DatePatternParser.expand_two_digit_year(50, current_year=2040) == 2050
        assert DatePatternParser.expand_two_digit_year(39, current_year=2040) == 2039
        assert DatePatternParser.expand_two_digit_year(60, current_year=2040) == 1960

    def test_week_year_letter(self) -> None:
        assert DatePatternParser.parse("2009-06-24", "YYYY-MM-dd", UTC) == datetime(2009, 6, 24, tzinfo=UTC)

    def test_day_of_year(self) -> None:
        assert DatePatternParser.parse("2009175", "yyyyDDD", UTC) == datetime(2009, 6, 24, tzinfo=UTC)

    def test_day_of_year_leap(self) -> None:
        assert DatePatternParser.parse("2008366", "yyyyDDD", UTC) == datetime(2008, 12, 31, tzinfo=UTC)

    def test_day_of_year_past_end(self) -> None:
        with pytest.raises(InvalidFormatError, match="Cannot parse"):
            DatePatternParser.parse("2009366", "yyyyDDD", UTC)

    @pytest.mark.parametrize("value, pattern, hour", [
        ("03:11", "hh:mm", 3),
        ("12:11", "hh:mm", 0),
        ("24:11", "kk:mm", 0),
        ("01:11", "kk:mm", 1),
        ("11:11", "KK:mm", 11),
        ("00:11", "KK:mm", 0),
    ])
    def test_hour_letters(self, value: str, pattern: str, hour: int) -> None:
        assert DatePatternParser.parse(value, pattern, UTC) == datetime(1970, 1, 1, hour, 11, tzinfo=UTC)

    @pytest.mark.parametrize("value, pattern", [
        ("13:00", "hh:mm"),
        ("00:00", "hh:mm"),
        ("12:00", "KK:mm"),
        ("00:00", "kk:mm"),
        ("2009000", "yyyyDDD"),
    ])
    def test_hour_and_day_of_year_ranges(self, value: str, pattern: str) -> None:
        with pytest.raises(InvalidFormatError, match="must be in"):
            DatePatternParser.parse(value, pattern, UTC)

    def test_missing_fields_default(self) -> None:
        assert DatePatternParser.parse("1530", "HHmm", UTC) == datetime(1970, 1, 1, 15, 30, tzinfo=UTC)

    def test_out_of_range(self) -> None:
        with pytest.raises(InvalidFormatError, match="Cannot parse"):
            DatePatternParser.parse("2008-13-01", "yyyy-MM-dd", UTC)

    def test_wrong_separator(self) -> None:
        with pytest.raises(InvalidFormatError, match="does not match"):
            DatePatternParser.parse("2008-05-01", "yyyy.MM.dd", UTC)


class TestParseEmbedded:
    """parse_embedded end to end."""

    def test_default_pattern(self) -> None:
        assert parse_embedded("app.2008-05-01.log") == datetime(2008, 5, 1, tzinfo=UTC)

    def test_result_is_utc(self) -> None:
        assert parse_embedded("app.2008-05-01.log").utcoffset() == timedelta(0)

    def test_pattern_with_separators(self) -> None:
        value = parse_embedded("app-20090624-151112.log.gz", "yyyy-MM-dd-HHmmss", UTC)
        assert value == datetime(2009, 6, 24, 15, 11, 12, tzinfo=UTC)

    def test_lenient_default_pattern(self) -> None:
        assert parse_embedded("file-20080501") == datetime(2008, 5, 1, tzinfo=UTC)

    def test_lenient_match_logged(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="commons_util.parsers.date_pattern_parser"):
            parse_embedded("file-20080501")
        assert "Lenient match" in caplog.text

    def test_clock_hour_of_halfday(self) -> None:
        value = parse_embedded("app-20090624-031112.log", "yyyyMMdd-hhmmss")
        assert value == datetime(2009, 6, 24, 3, 11, 12, tzinfo=UTC)

    def test_compact_pattern(self) -> None:
        value = parse_embedded("app-20090624-151112.log.gz", "yyyyMMdd-HHmmss", UTC)
        assert value == datetime(2009, 6, 24, 15, 11, 12, tzinfo=UTC)

    def test_zone(self) -> None:
        value = parse_embedded("app.2008-05-01.log", zone="America/New_York")
        assert (value.year, value.month, value.day, value.hour) == (2008, 5, 1, 0)
        assert value.utcoffset() == timedelta(hours=-4)

    def test_zone_tzinfo(self) -> None:
        zone = tz.tzoffset(None, 3600)
        value = parse_embedded("app.2008-05-01.log", "yyyy-MM-dd", zone)
        assert value.tzinfo is zone

    def test_no_date(self) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_embedded("no-date-here")
        error = exc_info.value
        assert error.text == "no-date-here"
        assert error.regex == r"\d\d\d\d-\d\d-\d\d"
        assert error.pattern == "yyyy-MM-dd"
        assert "did not contain an embedded date" in str(error)

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_embedded("no-date-here")

    def test_none_text(self) -> None:
        with pytest.raises(InvalidFormatError):
            parse_embedded(None)

    def test_invalid_pattern(self) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            parse_embedded("app.2008-05-01.log", "yyyy-QQ")
        error = exc_info.value
        assert error.text == "app.2008-05-01.log"
        assert error.regex == r"\d\d\d\d-\d\d"
        assert error.pattern == "yyyy-QQ"

    def test_invalid_date_in_text(self) -> None:
        with pytest.raises(InvalidFormatError, match="Cannot parse") as exc_info:
            parse_embedded("app.2008-13-01.log")
        error = exc_info.value
        assert error.text == "app.2008-13-01.log"
        assert error.regex == r"\d\d\d\d-\d\d-\d\d"
        assert error.pattern == "yyyy-MM-dd"

    def test_unknown_zone(self) -> None:
        with pytest.raises(InvalidFormatError, match="Unknown time zone"):
            parse_embedded("app.2008-05-01.log", zone="Not/AZone")
