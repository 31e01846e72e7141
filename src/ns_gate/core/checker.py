"""Nameserver allow-list check."""

import functools
from dataclasses import dataclass
from typing import Optional, Protocol

from ns_gate.core.config import Settings, get_settings
from ns_gate.dns.resolver import query_ns


class NSLookup(Protocol):
    """Protocol for NS lookups."""

    async def __call__(self, domain: str) -> list[str]: ...


def normalize_domain(domain: str) -> str:
    """Return the domain in fully-qualified form for the DNS query."""
    if not domain.endswith("."):
        domain += "."

    return domain


@dataclass(frozen=True)
class NameserverChecker:
    """Decides whether a domain is delegated to an allow-listed nameserver."""

    allowed: frozenset[str]
    lookup: NSLookup

    @classmethod
    def from_settings(cls, settings: Settings) -> "NameserverChecker":
        lookup = functools.partial(
            query_ns,
            server=settings.query_resolver,
            port=settings.query_resolver_port,
            timeout=settings.dns_timeout,
        )
        return cls(allowed=settings.allowed_nameservers, lookup=lookup)

    async def is_authorized(self, domain: str) -> bool:
        """
        Query the domain's NS records and test them against the allow-list.

        Raises DNSLookupError if the query fails.
        """
        targets = await self.lookup(normalize_domain(domain))

        return any(target.lower() in self.allowed for target in targets)


_checker: Optional[NameserverChecker] = None


def get_checker() -> NameserverChecker:
    """Get or create the default checker."""
    global _checker  # pylint: disable=global-statement

    if _checker is None:
        _checker = NameserverChecker.from_settings(get_settings())

    return _checker


def set_checker(checker: Optional[NameserverChecker]) -> None:
    """Set a custom checker (useful for testing)."""
    global _checker  # pylint: disable=global-statement

    _checker = checker
