"""Logfire setup for the API process.

Services log and open spans through the ``logfire`` module directly:

    logfire.info("Vote applied", item_id=str(item_id), action=action)

    with logfire.span("acceptance_service.toggle_accept", answer_id=str(answer_id)):
        ...

This module only wires Logfire into the process and its frameworks.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from asklet.config import ObservabilitySettings, Settings

SERVICE_NAME = "asklet-api"

# Load balancers poll this every few seconds
UNTRACED_PATHS = ["/health"]

STREAM_PATH = "/notifications/stream"


def _cloud_enabled(observability: ObservabilitySettings) -> bool:
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Telemetry goes to Logfire cloud when OBSERVABILITY__SEND_TO_LOGFIRE is
    true, or when it is unset and OBSERVABILITY__LOGFIRE_TOKEN is present.
    The console always gets output; DEBUG=true makes it verbose.
    """
    send_to_logfire = _cloud_enabled(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag request spans; stream spans stay open for the whole connection."""
    path = request.url.path
    result = {**attributes, "method": request.method, "path": path}
    if path == STREAM_PATH:
        result["live_stream"] = True
    if request.client:
        result["client_host"] = request.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests of the API, except health checks."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_PATHS,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, including retried conditional vote writes."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
