"""
Base output formatter - Abstract base class for formatters.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional, Union

from ..models import HostParts

Value = Optional[Union[datetime, int]]


class OutputFormatter(ABC):
    """
    Abstract base class for output formatters.

    Design Pattern: Strategy Pattern
    Different formatters for different output styles (list, JSON).
    """

    @abstractmethod
    def format_hosts(self, results: Dict[str, HostParts]) -> str:
        """
        Format split hostnames.

        Args:
            results: Mapping of input hostname to its parts

        Returns:
            Formatted string for output
        """
        pass

    @abstractmethod
    def format_values(self, results: Dict[str, Value]) -> str:
        """
        Format datetime and timestamp values.

        Args:
            results: Mapping of label to datetime, epoch milliseconds, or None

        Returns:
            Formatted string for output
        """
        pass
