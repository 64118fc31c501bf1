"""Observability configuration using Logfire.

Services log through logfire directly:

    import logfire

    logfire.info("Comment created", comment_id=str(comment.id))

    with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
        ...
"""

from typing import Any

import httpx
import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from board.config import Settings


def configure_logfire(settings: Settings, service_name: str = "board-backend") -> None:
    """Configure Logfire for the API server or the comments client.

    Telemetry is sent to Logfire cloud when explicitly enabled, or when a
    token is configured. Otherwise output stays on the console.

    Args:
        settings: Application settings
        service_name: Name reported with every span
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs: dict[str, Any] = {
        "service_name": service_name,
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        service_name=service_name,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace incoming HTTP requests with Logfire."""

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx(client: httpx.AsyncClient) -> None:
    """Trace outbound requests made through one client."""
    logfire.instrument_httpx(client)
