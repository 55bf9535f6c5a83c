"""Entry point for the Robot Registry API.

Serves ``robot_api.app.main:app`` with uvicorn.  Host and port come
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8080``); see ``robot_api/app/core/config.py`` for the
other settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from robot_api.app.core.config import settings
from robot_api.app.main import app


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
    logging.getLogger(__name__).info("Serving on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
