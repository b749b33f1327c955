"""
Host parts data model - Value Object pattern.
Immutable result of splitting a fully-qualified domain name.
"""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class HostParts:
    """
    Immutable (host, domain) pair.

    Attributes:
        host: Text before the first dot (may be empty, None for empty input)
        domain: Text after the first dot, None when there is nothing after it

    Unpacks like a 2-tuple:
        host, domain = HostnameParser.split_fqdn("web-01.example.com")
    """
    host: Optional[str] = None
    domain: Optional[str] = None

    def __iter__(self) -> Iterator[Optional[str]]:
        return iter((self.host, self.domain))

    @property
    def has_domain(self) -> bool:
        """True if a domain part is present"""
        return bool(self.domain)

    @property
    def fqdn(self) -> Optional[str]:
        """Rebuild 'host.domain' (or just the host when there is no domain)"""
        if self.host is None:
            return None
        if not self.domain:
            return self.host
        return f"{self.host}.{self.domain}"

    def to_dict(self) -> dict:
        """Plain dict form, used by the JSON formatter"""
        return {"host": self.host, "domain": self.domain}
