"""Centralized configuration using Pydantic BaseSettings."""

import ipaddress
from functools import lru_cache
from typing import Iterable, Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ns_gate.utils.exceptions import ConfigurationError

DEFAULT_RESOLVERS = ("1.1.1.1", "8.8.8.8")


def _ensure_dot(s: str) -> str:
    """Ensure string ends with a dot (for DNS names)."""
    s = s.strip()

    if not s.endswith("."):
        s += "."

    return s


def split_and_trim(value: str) -> list[str]:
    """Split a comma-separated value, trimming entries and dropping empty ones."""
    return [part.strip() for part in value.split(",") if part.strip()]


def parse_allow_list(value: str) -> frozenset[str]:
    """Return the allow-listed nameservers as lowercase FQDNs."""
    return frozenset(_ensure_dot(ns.lower()) for ns in split_and_trim(value))


def parse_resolvers(
    value: Optional[str], fallback: Iterable[str] = DEFAULT_RESOLVERS
) -> list[str]:
    """Return the resolver list, or the fallback when nothing is configured."""
    if not value:
        return list(fallback)

    return split_and_trim(value)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Comma-separated list of nameservers we accept delegations to (required)
    our_ns: str

    # Comma-separated resolver list, logged and reported only
    nameservers: str = ""

    # HTTP listener
    host: str = "0.0.0.0"
    port: str = "9000"

    # NS query target
    query_resolver: str = "8.8.8.8"
    query_resolver_port: int = 53
    dns_timeout: float = 2.0
    dns_failure_status: int = 403

    log_level: str = "INFO"

    # Sentry configuration (optional)
    sentry_dsn: Optional[str] = None
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 1.0

    @field_validator("our_ns")
    @classmethod
    def _require_nameservers(cls, value: str) -> str:
        if not split_and_trim(value):
            raise ValueError("OUR_NS environment variable not set")

        return value

    @field_validator("query_resolver")
    @classmethod
    def _require_ip_address(cls, value: str) -> str:
        value = value.strip()
        try:
            ipaddress.ip_address(value)
        except ValueError as e:
            raise ValueError(f"QUERY_RESOLVER must be an IP address, got {value!r}") from e

        return value

    @property
    def allowed_nameservers(self) -> frozenset[str]:
        """Return the allow-list as lowercase, dot-terminated names."""
        return parse_allow_list(self.our_ns)

    @property
    def resolvers(self) -> list[str]:
        """Return configured resolvers, falling back to public ones."""
        return parse_resolvers(self.nameservers)

    @property
    def query_target(self) -> str:
        """Return the NS query resolver as host:port."""
        return f"{self.query_resolver}:{self.query_resolver_port}"


def load_settings() -> Settings:
    """Build settings, turning validation failures into ConfigurationError."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()
