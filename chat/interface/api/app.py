"""FastAPI application."""

from fastapi import FastAPI

from chat.interface.api.routes import conversations, health, messages
from chat.util.di.container import create_container, setup_di
from chat.util.observability import instrument_fastapi


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py.
    """
    app_instance = FastAPI(
        title="Chat Message Store",
        description="Messages of chat conversations: tags, likes, resolution and soft delete",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(messages.router)
    app_instance.include_router(conversations.router)

    return app_instance
