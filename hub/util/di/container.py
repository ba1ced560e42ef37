"""Dependency injection container."""

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from hub.config import Settings
from hub.util.di import PROVIDERS, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the application container.

    Persistence is backed by PostgreSQL unless ``PERSISTENCE__BACKEND=memory``
    selects the process-local store. Everything else is always production.

    Args:
        settings: Settings used to pick the backend (loaded from env if omitted)

    Returns:
        Configured DI container
    """
    settings = settings or Settings()
    in_memory = settings.persistence.backend == "memory"

    provider_instances = []
    for base in PROVIDERS:
        use_mock = in_memory and getattr(base, "__mock_component__", None) == "persistence"
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    logfire.info("Container built", persistence=settings.persistence.backend)
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
