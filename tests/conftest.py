"""Pytest configuration and fixtures."""

# pylint: disable=redefined-outer-name

import os
from dataclasses import dataclass, field
from typing import Optional

import pytest

# Set test environment variables before importing application code
os.environ.setdefault("OUR_NS", "ns1.test.com,ns2.test.com")
os.environ.pop("SENTRY_DSN", None)

from ns_gate.core.config import Settings  # noqa: E402


@dataclass
class FakeNSLookup:
    """Fake NS lookup with predefined answers, recording every query."""

    answers: dict[str, list[str]] = field(default_factory=dict)
    error: Optional[Exception] = None
    calls: list[str] = field(default_factory=list)

    async def __call__(self, domain: str) -> list[str]:
        self.calls.append(domain)
        if self.error is not None:
            raise self.error
        return self.answers.get(domain, [])


@pytest.fixture
def test_settings():
    """Provide test settings with predictable values."""
    return Settings(
        our_ns="ns1.example.com, NS2.Example.COM.",
        nameservers="",
        port="9000",
        query_resolver="192.0.2.53",
        query_resolver_port=5353,
        dns_timeout=1.5,
        sentry_dsn=None,
        _env_file=None,
    )


@pytest.fixture
def fake_lookup():
    """Create a fake NS lookup."""
    return FakeNSLookup()
