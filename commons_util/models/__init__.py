"""
Data models and value objects.
"""

from .host_parts import HostParts

__all__ = ['HostParts']
