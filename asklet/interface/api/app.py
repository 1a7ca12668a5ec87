"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from asklet.config import Settings
from asklet.interface.api.routes import (
    answers,
    auth,
    health,
    notifications,
    questions,
    tags,
    users,
    votes,
)
from asklet.util.di.container import create_container, setup_di
from asklet.util.observability import instrument_fastapi

ROUTERS = [
    health.router,
    auth.router,
    questions.router,
    answers.router,
    votes.router,
    notifications.router,
    users.router,
    tags.router,
]


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the API application.

    Args:
        container: DI container to serve from; the production container
            is built when omitted. Tests pass an in-memory one.

    Logfire should already be configured; start_app.py does this.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Asklet API",
        description="Questions and answers with voting, accepted answers and live notifications",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Browsers send the auth cookie cross-origin only with credentials allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Cache-Control", "Last-Event-ID"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Imported by uvicorn; see scripts/start_app.py
app = create_app()
