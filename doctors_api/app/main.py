"""
Main entrypoint for the Doctor Record Service.

This module assembles the FastAPI application, sets up logging,
includes versioned routers and registers the handler that turns
database failures into error responses.  The ``create_app`` function
builds and configures the app, which is then instantiated at module
import time as ``app``::

    uvicorn doctors_api.app.main:app --reload

The database connection is opened in the application lifespan and
closed on shutdown, so every request shares one ``Database``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import Database, StoreError
from .core.logging_config import setup_logging
from .core.responses import error_response

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to build the application from.  Defaults to the
        module level settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the lifespan and
    # the routers can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db = Database(settings.database_url)
        db.connect()
        try:
            db.init_db()
            app.state.db = db
            yield
        finally:
            db.close()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    app.include_router(v1_router, prefix="/api")

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
        logger.exception(
            "Database error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return error_response("Internal server error")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
