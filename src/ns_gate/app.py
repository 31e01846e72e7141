"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ns_gate.api.healthcheck import router as healthcheck_router
from ns_gate.api.routes import router
from ns_gate.core.checker import get_checker
from ns_gate.core.config import get_settings
from ns_gate.utils.decorators import init_sentry

# Configure logging for the application
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan handler."""
    # Fails here, before serving, if OUR_NS is missing
    settings = get_settings()
    logging.getLogger("ns_gate").setLevel(settings.log_level.upper())

    sentry_enabled = init_sentry()
    checker = get_checker()

    logger.info("ns-gate starting...")
    logger.info(f"Allowed nameservers: {sorted(checker.allowed)}")
    logger.info(f"Using nameservers: {settings.resolvers}")
    logger.info(f"NS queries go to {settings.query_target}")
    logger.info(f"Sentry: {'enabled' if sentry_enabled else 'disabled'}")
    logger.info(f"Ask endpoint running on {settings.host}:{settings.port}")

    yield

    logger.info("ns-gate shutting down...")


app = FastAPI(
    title="ns-gate",
    description="Allow hosts whose NS records point at our nameservers",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)
app.include_router(healthcheck_router)
