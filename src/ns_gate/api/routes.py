"""API routes for the ns-gate service."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ns_gate.core.checker import NameserverChecker, get_checker
from ns_gate.core.config import Settings, get_settings
from ns_gate.utils.decorators import sentry_exception_catcher
from ns_gate.utils.exceptions import (
    DNSLookupError,
    capture_exception,
    is_expected_dns_error,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@dataclass
class RouteDependencies:
    """Dependencies for route handlers."""

    settings: Settings = field(default_factory=get_settings)
    checker: NameserverChecker = field(default_factory=get_checker)


# Global dependencies instance (can be overridden for testing)
_dependencies: Optional[RouteDependencies] = None


def get_dependencies() -> RouteDependencies:
    """Get the current route dependencies."""
    global _dependencies  # pylint: disable=global-statement
    if _dependencies is None:
        _dependencies = RouteDependencies()
    return _dependencies


def set_dependencies(deps: RouteDependencies) -> None:
    """Set custom dependencies (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = deps


def reset_dependencies() -> None:
    """Reset dependencies to default (useful for testing)."""
    global _dependencies  # pylint: disable=global-statement
    _dependencies = None


@router.get("/check-host", response_class=PlainTextResponse)
@sentry_exception_catcher
async def check_host(
    domain: Optional[str] = None,
    deps: RouteDependencies = Depends(get_dependencies),
):
    """Allow a host only if its NS records point at one of our nameservers."""
    if not domain:
        return PlainTextResponse("missing domain", status_code=400)

    try:
        authorized = await deps.checker.is_authorized(domain)
    except DNSLookupError as e:
        if is_expected_dns_error(e.__cause__):
            logger.warning("%s", e)
        else:
            capture_exception(e, {"domain": domain}, level="warning")
        return PlainTextResponse(
            "dns lookup failed", status_code=deps.settings.dns_failure_status
        )

    if authorized:
        return PlainTextResponse("ok")

    return PlainTextResponse("forbidden", status_code=403)
