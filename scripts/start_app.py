#!/usr/bin/env python3
"""Serve the Asklet API with uvicorn.

Runs a single worker: open notification streams are tracked in process
memory, so a second worker would not see the first one's connections.
"""

import sys

import logfire
import uvicorn

from asklet.config import Settings
from asklet.util.observability import configure_logfire

# Seconds open event streams get to finish when the server stops
STREAM_SHUTDOWN_GRACE = 5


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    logfire.info(
        "Starting Asklet API",
        port=settings.port,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "asklet.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            workers=1,
            proxy_headers=True,
            timeout_graceful_shutdown=STREAM_SHUTDOWN_GRACE,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Asklet API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
