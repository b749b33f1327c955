"""
Command line front end for the hostname and date helpers.

Usage:
    commons-util split-host joelauer-02.c web-01.corp.local
    commons-util parse-embedded app.2008-05-01.log
    commons-util parse-embedded app-20090624-151112.log.gz --pattern yyyyMMdd-HHmmss
    commons-util floor 2009-06-24T13:24:51.476-08:00 --to five_minutes
    commons-util convert 1245849891476
    commons-util now --format json
"""

import argparse
import logging
import sys
from datetime import datetime
from typing import List, Optional

from dateutil import parser as dateutil_parser

from .config import AppConfig, DateConfig, load_environment, reload_config, setup_logging, validate_config
from .exceptions import InvalidFormatError
from .formatters import ResultFormatter
from .parsers import HostnameParser
from .utils import datetime_util

logger = logging.getLogger(__name__)


def parse_datetime_arg(value: str) -> datetime:
    """
    Read a datetime argument: epoch milliseconds or an ISO 8601 string.

    Naive ISO strings are taken as UTC.

    Raises:
        ValueError: If value is neither, or is outside the supported date range
    """
    if value.lstrip("-").isdigit():
        try:
            return datetime_util.to_zoned_datetime(int(value))
        except OverflowError as e:
            raise ValueError(f"Timestamp out of range: {value}") from e

    parsed = dateutil_parser.isoparse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime_util.UTC)
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=AppConfig.APP_NAME,
        description=AppConfig.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Split hostnames on their first dot
  commons-util split-host joelauer-02.c web-01.corp.local

  # Find the date in a log file name
  commons-util parse-embedded app.2008-05-01.log

  # Custom pattern and zone
  commons-util parse-embedded app-20090624-151112.log.gz -p yyyyMMdd-HHmmss -z America/New_York

  # Round a timestamp down to five minutes
  commons-util floor 2009-06-24T13:24:51.476-08:00 --to five_minutes
        """
    )

    parser.add_argument(
        "--format", "-f",
        choices=list(ResultFormatter.FORMATS),
        default=None,
        help=f"Output format (default: {AppConfig.DEFAULT_OUTPUT_FORMAT})"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file with defaults"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    split_parser = subparsers.add_parser("split-host", help="Split hostnames into host and domain")
    split_parser.add_argument("names", nargs="+", help="Hostnames or FQDNs")

    embedded_parser = subparsers.add_parser("parse-embedded", help="Parse a date embedded in a string")
    embedded_parser.add_argument("text", help="String holding the date (e.g. a log file name)")
    embedded_parser.add_argument(
        "--pattern", "-p",
        help="Date pattern such as yyyy-MM-dd (default: COMMONS_DATE_PATTERN or yyyy-MM-dd)"
    )
    embedded_parser.add_argument(
        "--zone", "-z",
        help="Time zone of the parsed date (default: COMMONS_DATE_ZONE or UTC)"
    )

    floor_parser = subparsers.add_parser("floor", help="Round a datetime downwards")
    floor_parser.add_argument("value", help="Epoch milliseconds or ISO 8601 datetime")
    floor_parser.add_argument(
        "--to", "-t",
        dest="unit",
        choices=list(datetime_util.FLOOR_UNITS),
        action="append",
        help="Floor unit (can be repeated, default: all units)"
    )

    convert_parser = subparsers.add_parser("convert", help="Show a datetime as UTC and as epoch milliseconds")
    convert_parser.add_argument("value", help="Epoch milliseconds or ISO 8601 datetime")

    subparsers.add_parser("now", help="Show the current UTC time")

    return parser


def run(args: argparse.Namespace) -> str:
    """
    Execute a parsed command and return its formatted output.

    Raises:
        InvalidFormatError: If a date pattern, zone, or embedded date is invalid
        ValueError: If a datetime argument cannot be read
    """
    formatter = ResultFormatter(output_format=args.format or AppConfig.DEFAULT_OUTPUT_FORMAT)

    if args.command == "split-host":
        results = {name: HostnameParser.split_fqdn(name) for name in args.names}
        return formatter.format_hosts(results)

    if args.command == "parse-embedded":
        pattern = args.pattern or DateConfig.DEFAULT_PATTERN
        zone = args.zone or DateConfig.DEFAULT_ZONE
        logger.info(f"Parsing '{args.text}' with pattern '{pattern}' in zone {zone}")
        value = datetime_util.parse_embedded(args.text, pattern, zone)
        return formatter.format_values({args.text: value})

    if args.command == "floor":
        value = parse_datetime_arg(args.value)
        units = args.unit or list(datetime_util.FLOOR_UNITS)
        return formatter.format_values({unit: datetime_util.floor(value, unit) for unit in units})

    if args.command == "convert":
        value = parse_datetime_arg(args.value)
        return formatter.format_values({
            "utc": datetime_util.copy(value),
            "timestamp": datetime_util.to_timestamp(value),
        })

    return formatter.format_values({"now": datetime_util.now()})


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.env_file:
        load_environment(args.env_file)
        reload_config()

    setup_logging(verbose=args.verbose)

    try:
        validate_config()
        output = run(args)
    except (InvalidFormatError, ValueError, OverflowError) as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


def entry_point():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    entry_point()
