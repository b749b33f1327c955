"""
Hostname parser for splitting fully-qualified domain names.

Logic:
1. Empty or missing input yields no host and no domain
2. Only the first dot splits: everything after it is the domain
3. A trailing dot (nothing after it) yields no domain

Examples:
- joelauer-02       → ('joelauer-02', None)
- joelauer-02.      → ('joelauer-02', None)
- joelauer-02.c     → ('joelauer-02', 'c')
- web-01.corp.local → ('web-01', 'corp.local')
"""

from typing import Optional

from ..models import HostParts


class HostnameParser:
    """
    Parser for splitting hostnames into host and domain parts.

    Never raises: every input, including None, produces a HostParts.
    """

    SEPARATOR = "."

    @classmethod
    def split_fqdn(cls, value: Optional[str]) -> HostParts:
        """
        Split a hostname on its first dot.

        Args:
            value: Hostname or FQDN (may be None or empty)

        Returns:
            HostParts with host and domain (either may be None)

        Examples:
            >>> HostnameParser.split_fqdn('joelauer-02.c')
            HostParts(host='joelauer-02', domain='c')
            >>> HostnameParser.split_fqdn('.')
            HostParts(host='', domain=None)
            >>> HostnameParser.split_fqdn('a.b.c')
            HostParts(host='a', domain='b.c')
        """
        if not value:
            return HostParts(None, None)

        pos = value.find(cls.SEPARATOR)
        if pos < 0:
            return HostParts(value, None)

        host = value[:pos]
        domain = value[pos + 1:]
        # Trailing dot: nothing left for the domain
        if not domain:
            domain = None

        return HostParts(host, domain)

    @classmethod
    def join_fqdn(cls, host: Optional[str], domain: Optional[str]) -> Optional[str]:
        """
        Rebuild an FQDN from its parts.

        Args:
            host: Host part
            domain: Domain part (None or empty for a bare host)

        Returns:
            'host.domain', the bare host, or None if host is None
        """
        return HostParts(host, domain).fqdn


def split_host_fqdn(value: Optional[str]) -> HostParts:
    """Shortcut for HostnameParser.split_fqdn"""
    return HostnameParser.split_fqdn(value)
