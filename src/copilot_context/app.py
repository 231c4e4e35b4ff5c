"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup/shutdown
and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from copilot_context import __version__
from copilot_context.config import CopilotContextSettings
from copilot_context.context import ContextTree
from copilot_context.copilot import CopilotContext
from copilot_context.routers import context, functions, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    The CopilotContext is created with the app so the host can register entry
    points before serving. State lives only as long as the process.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    copilot: CopilotContext = app.state.copilot
    logger.info(
        f"Serving {len(copilot.entry_points)} entry point(s) and "
        f"{len(copilot.tree)} context fragment(s)"
    )

    yield

    logger.info("copilot-context shutting down, in-memory state discarded")


def create_app(
    settings: CopilotContextSettings | None = None,
    copilot: CopilotContext | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional CopilotContextSettings instance. If not provided,
                  settings will be loaded from environment variables.
        copilot: Optional CopilotContext to expose. If not provided, an empty
                 one is created using the configured context indent.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from copilot_context.dependencies import get_settings

        settings = get_settings()

    if copilot is None:
        copilot = CopilotContext(tree=ContextTree(indent=settings.context_indent))

    app = FastAPI(
        title="copilot-context",
        description="Entry point registry and prompt context for chat-completion copilots",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.copilot = copilot

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(functions.router)
    app.include_router(context.router)

    return app
