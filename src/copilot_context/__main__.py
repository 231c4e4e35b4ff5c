"""CLI entry point for copilot-context.

This module provides the command-line interface for starting the copilot-context
server. It can be invoked as `copilot-context` (via the script entry point) or
`python -m copilot_context`.
"""

import argparse
import os
import sys

import uvicorn

from copilot_context import __version__, create_app
from copilot_context.config import CopilotContextSettings


def main() -> None:
    """Main entry point for the copilot-context CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.
    """
    parser = argparse.ArgumentParser(
        prog="copilot-context",
        description="Entry point registry and prompt context for chat-completion copilots",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"copilot-context {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via COPILOT_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8000, can be set via COPILOT_PORT)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via COPILOT_LOG_LEVEL)",
    )

    parser.add_argument(
        "--context-indent",
        type=int,
        default=None,
        help="Spaces per level in the flattened context (default: 3, can be set via COPILOT_CONTEXT_INDENT)",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development (uvicorn --reload)",
    )

    args = parser.parse_args()

    # Build settings, CLI args override environment variables
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level
    if args.context_indent is not None:
        settings_kwargs["context_indent"] = args.context_indent

    settings = CopilotContextSettings(**settings_kwargs)

    if args.reload:
        # The reloader re-imports the app in a subprocess, so it needs an
        # import string and reads CLI overrides back from the environment
        for key, value in settings_kwargs.items():
            os.environ[f"COPILOT_{key.upper()}"] = str(value)
        uvicorn.run(
            "copilot_context.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            reload=True,
        )
        return

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
