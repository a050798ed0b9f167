#!/usr/bin/env python3
"""Serve the forum API with uvicorn.

Settings come from the environment (see forum.config). Unsafe production
settings stop the process with exit status 2 before the server binds.
"""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.di.core import check_settings
from forum.util.error import ConfigurationError
from forum.util.logging import get_logger, setup_logging
from forum.util.observability import configure_logfire

logger = get_logger("forum.server")


def main() -> int:
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        check_settings(settings)
    except ConfigurationError as e:
        logger.error("Refusing to start: %s", e)
        return 2

    logger.info(
        "Serving forum API on %s:%s (%s)",
        settings.host,
        settings.port,
        settings.environment,
    )
    try:
        uvicorn.run(
            "forum.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            # Keep the handlers installed by setup_logging
            log_config=None,
            access_log=settings.debug,
            proxy_headers=True,
        )
    except Exception:
        logfire.exception("Forum API crashed", environment=settings.environment)
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
