"""
Main entrypoint for the Robot Registry API.

This module assembles the FastAPI application, sets up logging,
creates the robot store and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn robot_api.app.main:app --port 8080

or through ``run.py`` at the project root.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.robot_store import RobotStore
from .services.seed_service import load_initial_data


def create_app(settings: Optional[Settings] = None, store: Optional[RobotStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.
    store : Optional[RobotStore]
        Store to serve.  A fresh empty store with the default
        reference catalog is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The store is
        available as ``app.state.robot_store``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    robot_store = store if store is not None else RobotStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Seed once at startup; a missing or broken seed file aborts startup.
        if settings.seed_data_path:
            load_initial_data(robot_store, settings.seed_data_path)
        logger.info("%s %s started", settings.project_name, settings.api_version)
        yield
        logger.info("%s stopped", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.robot_store = robot_store

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed bodies and wrongly typed fields are reported as 400.
        logger.debug("Invalid request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid request body"},
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
