#!/usr/bin/env python3
"""Serve the gov.br login application with uvicorn."""

import sys

import logfire
import uvicorn

from sso.config import Settings
from sso.util.logging import setup_logging
from sso.util.observability import configure_logfire

HOST = "0.0.0.0"
PORT = 8080


def main() -> int:
    """Configure logging and Logfire, then run the server.

    Logfire is configured before the app module is imported so startup
    failures (such as missing gov.br credentials) are reported.
    """
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info("Starting gov.br SSO", port=PORT, environment=settings.environment)
    try:
        uvicorn.run(
            "sso.interface.api.app:app",
            host=HOST,
            port=PORT,
            # Keep the logging configured above
            log_config=None,
            proxy_headers=True,
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
