"""Custom exceptions and error handling utilities."""

import logging

import dns.exception
import sentry_sdk

logger = logging.getLogger(__name__)


class NSGateError(Exception):
    """Base exception for ns-gate errors."""


class ConfigurationError(NSGateError):
    """Required configuration is missing or invalid."""


class DNSLookupError(NSGateError):
    """NS query could not be completed."""


def capture_exception(
    exception: Exception,
    context: dict,
    level: str = "error",
) -> None:
    """
    Log an exception and report it to Sentry if configured.

    Args:
        exception: The exception to capture
        context: Extras attached to the Sentry event
        level: Log level and Sentry event level ('error', 'warning', 'info')
    """
    # Imported here, config depends on this module for ConfigurationError
    from ns_gate.core.config import get_settings  # pylint: disable=import-outside-toplevel

    settings = get_settings()

    log_func = getattr(logger, level, logger.error)
    log_func("%s: %s", type(exception).__name__, exception, exc_info=True)

    if settings.sentry_dsn:
        with sentry_sdk.push_scope() as scope:
            scope.level = level
            for key, value in context.items():
                scope.set_extra(key, value)
            sentry_sdk.capture_exception(exception)


def is_expected_dns_error(exception) -> bool:
    """Check if exception is an expected DNS error (a resolver timeout)."""
    return isinstance(exception, dns.exception.Timeout)
