"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from asklet.util.di import select_providers


def create_container() -> AsyncContainer:
    """Build the production container (PostgreSQL persistence, real registry).

    FastapiProvider makes the current Request resolvable, which DishkaRoute
    needs to open the request scope.
    """
    return make_async_container(*select_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve the app's FromDishka dependencies from ``container``."""
    setup_dishka(container, app)
