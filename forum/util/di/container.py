"""Dependency injection container."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import PROVIDERS, instantiate


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are read from the environment once, when the container first
    resolves them, and shared for the life of the process.

    Returns:
        Configured DI container with production providers
    """
    # FastapiProvider exposes the Request to REQUEST-scoped providers
    return make_async_container(*instantiate(PROVIDERS), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to a FastAPI app.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)


@asynccontextmanager
async def container_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the attached container (and with it the engine) on shutdown."""
    yield
    container = getattr(app.state, "dishka_container", None)
    if container is not None:
        await container.close()
