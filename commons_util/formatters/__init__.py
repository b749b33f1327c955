"""
Output formatters for displaying results.
"""

from .base_formatter import OutputFormatter
from .result_formatter import ResultFormatter

__all__ = ['OutputFormatter', 'ResultFormatter']
