"""
Main entrypoint for the Positions API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  ``create_app`` builds and configures
the app, which is then instantiated at module import time as ``app``,
so it can be served directly::

    uvicorn positions_api.app.main:app --reload

Each application gets its own ``PositionStore`` on ``app.state``.
Positions are held in memory only and are lost when the process exits.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.position_service import PositionStore


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[PositionStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; defaults to the module level ``settings``.
    store : Optional[PositionStore]
        Store to bind to the application.  A new empty store is created
        when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Configure logging before anything below logs.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.position_store = store if store is not None else PositionStore()

    # The same routes are served under the versioned prefix and at the
    # root, where existing clients call ``/positions`` directly.  Both
    # share the store above.
    if settings.api_prefix:
        app.include_router(v1_router, prefix=settings.api_prefix)
    app.include_router(v1_router)

    return app


app = create_app()
