"""Logfire setup and instrumentation.

Services and routes call ``logfire`` directly; this module only decides
where telemetry goes and hooks FastAPI and SQLAlchemy into it.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import ObservabilitySettings, Settings

SERVICE_NAME = "forum-api"
SERVICE_VERSION = "0.1.0"

# Polled by load balancers; tracing them only adds noise
UNTRACED_URLS = ["/health", "/health/ready"]


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """An explicit ``send_to_logfire`` wins; otherwise send when a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    The test environment keeps the console quiet; everything else prints
    spans with their parents, verbosely when ``debug`` is on.
    """
    send = should_send_to_logfire(settings.observability)
    console: logfire.ConsoleOptions | bool = False
    if settings.environment != "test":
        console = logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=console,
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag each request span with the route's path parameters."""
    path_params = getattr(request, "path_params", None)
    if path_params:
        return {**attributes, **{f"path.{k}": v for k, v in path_params.items()}}
    return attributes


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app`` except health checks."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
