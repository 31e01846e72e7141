"""Health check API endpoint."""

from fastapi import APIRouter, Depends

from ns_gate.api.models import HealthResponse
from ns_gate.api.routes import RouteDependencies, get_dependencies

router = APIRouter(tags=["health"])


@router.get("/healthcheck", response_model=HealthResponse)
async def health_check(
    deps: RouteDependencies = Depends(get_dependencies),
) -> HealthResponse:
    """
    Health check endpoint (no auth required).

    Reports the loaded configuration without touching DNS.
    """
    settings = deps.settings

    return HealthResponse(
        status="ok",
        allowed_nameservers=len(deps.checker.allowed),
        resolvers=settings.resolvers,
        query_resolver=settings.query_target,
    )
