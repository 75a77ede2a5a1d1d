"""Entry point for the Doctor Record Service.

Serves the FastAPI application with Uvicorn.  Host, port, database
location and log level are read from the environment (or a ``.env``
file in the working directory); see ``doctors_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from doctors_api.app.core.config import settings
from doctors_api.app.main import app


async def main() -> None:
    """Start the API server and block until it shuts down."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server is live and listening on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
