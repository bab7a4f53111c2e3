"""Entry point for the Menu Catalog API.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from ``Settings`` (environment variables ``HOST``, ``PORT`` and
``LOG_LEVEL``; defaults ``0.0.0.0``, ``3000`` and ``INFO``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from menu_catalog_api.app.core.config import settings
from menu_catalog_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
