"""Entry point for the Persons API server.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``8080``); see :mod:`persons_api.app.core.config` for the other
supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from persons_api.app.core.config import settings
from persons_api.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server running on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
