"""Logfire setup and instrumentation.

Services emit events with ``logfire.info/warn/error`` and wrap store round
trips in ``logfire.span``; this module wires those into the process.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from hub.config import ObservabilitySettings, Settings

SERVICE_NAME = "hub-backend"
SERVICE_VERSION = "0.1.0"


def _ships_to_cloud(observability: ObservabilitySettings) -> bool:
    """OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise ship only with a token."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process or a script.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = _ships_to_cloud(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        persistence=settings.persistence.backend,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``."""

    def _request_attributes(request, attributes):
        client = getattr(request, "client", None)
        return {
            **attributes,
            "method": request.method,
            "path": request.url.path,
            "client_host": client.host if client else None,
        }

    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement sent to the record store.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
