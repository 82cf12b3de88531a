"""
Main entrypoint for the Task Planner API.

This module assembles the FastAPI application, sets up logging,
registers the domain error handlers and includes the versioned
routers.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn task_planner_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.errors import register_exception_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .repositories.sqlite import SQLiteGateway


def create_app(gateway: Optional[SQLiteGateway] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    gateway : Optional[SQLiteGateway]
        Persistence gateway used by the request handlers.  Defaults to
        a gateway over ``settings.database_url``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file if needed and applies migrations.
        init_db(app.state.gateway.db_path)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.gateway = gateway or SQLiteGateway(timeout=settings.database_timeout)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
