"""
Result formatter - Displays split hostnames, datetimes and timestamps.

List output:
web-01.corp.local
  host:   web-01
  domain: corp.local

hour: 2009-06-24T13:00:00+00:00
timestamp: 1245849891476

JSON output:
{"web-01.corp.local": {"host": "web-01", "domain": "corp.local"}}
"""

import json
from datetime import datetime
from typing import Dict, Optional, Union

from .base_formatter import OutputFormatter, Value
from ..models import HostParts


class ResultFormatter(OutputFormatter):
    """
    Formatter for command line results.

    Design Pattern: Strategy Pattern implementation
    """

    FORMATS = ("list", "json")

    def __init__(self, output_format: str = "list"):
        """
        Initialize formatter.

        Args:
            output_format: Output format type ('list', 'json')
        """
        if output_format not in self.FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")
        self.output_format = output_format

    def format_hosts(self, results: Dict[str, HostParts]) -> str:
        if self.output_format == "json":
            return json.dumps({name: parts.to_dict() for name, parts in results.items()}, indent=2)

        if not results:
            return "No hostnames given."

        lines = []
        for name, parts in results.items():
            lines.append(name)
            lines.append(f"  host:   {self._display(parts.host)}")
            lines.append(f"  domain: {self._display(parts.domain)}")
        return "\n".join(lines)

    def format_values(self, results: Dict[str, Value]) -> str:
        if self.output_format == "json":
            return json.dumps(
                {label: self._serialize(value) for label, value in results.items()},
                indent=2
            )

        return "\n".join(
            f"{label}: {self._display(self._serialize(value))}"
            for label, value in results.items()
        )

    @staticmethod
    def _serialize(value: Value) -> Optional[Union[str, int]]:
        if isinstance(value, datetime):
            return value.isoformat()
        return value

    @staticmethod
    def _display(value) -> str:
        if value is None:
            return "(none)"
        if value == "":
            return '""'
        return str(value)
