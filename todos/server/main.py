"""Main entry point for Todos Server."""

from __future__ import annotations

import uvicorn
from loguru import logger

from todos.server.api.app import create_app
from todos.server.config.logging import setup_logging
from todos.server.config.settings import get_settings


def main() -> None:
    """Start the server; uvicorn handles SIGINT/SIGTERM with a graceful shutdown."""

    settings = get_settings()
    setup_logging(settings)

    app = create_app(settings)

    config = uvicorn.Config(
        app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level="debug" if settings.API_DEBUG else "info",
        # Logging is already routed through loguru by setup_logging()
        log_config=None,
        timeout_keep_alive=settings.KEEP_ALIVE_TIMEOUT,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT,
    )
    server = uvicorn.Server(config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught; server stopped")
    finally:
        logger.info("Server stopped gracefully")


if __name__ == "__main__":
    main()
