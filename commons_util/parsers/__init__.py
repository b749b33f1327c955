"""
Parser utilities for extracting structured data from strings.
"""

from .date_pattern_parser import DateField, DatePatternParser
from .hostname_parser import HostnameParser, split_host_fqdn

__all__ = ['DateField', 'DatePatternParser', 'HostnameParser', 'split_host_fqdn']
