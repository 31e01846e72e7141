"""Entry point for running the application directly."""

import logging
import sys

import uvicorn

from ns_gate.core.config import get_settings
from ns_gate.utils.exceptions import ConfigurationError

logger = logging.getLogger("ns_gate")


def main():
    """Load configuration, then run the application."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.INFO)
        logger.critical("%s", e)
        sys.exit(1)

    uvicorn.run(
        "ns_gate.app:app",
        host=settings.host,
        port=int(settings.port),
        log_level="warning",
    )


if __name__ == "__main__":
    main()
