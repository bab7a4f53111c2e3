"""
Main entrypoint for the Menu Catalog API.

This module assembles the FastAPI application, sets up logging, the
request logging middleware and the catalog exception handlers, and
includes the versioned router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn menu_catalog_api.app.main:app --reload

Each application owns exactly one ``CatalogStore``, available to
endpoints as ``app.state.catalog``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.request_logging import RequestLoggingMiddleware
from .services.menu_data import DEFAULT_MENU
from .services.menu_service import CatalogStore


def create_app(
    app_settings: Optional[Settings] = None,
    store: Optional[CatalogStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
    store : Optional[CatalogStore]
        Catalog to serve.  When omitted a new store is created, seeded
        with the sample menu if ``seed_menu`` is enabled.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings

    # Initialise logging before anything else so that the modules below
    # can safely log messages.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    if store is None:
        store = CatalogStore(DEFAULT_MENU if app_settings.seed_menu else None)
    app.state.catalog = store
    app.state.settings = app_settings

    app.add_middleware(RequestLoggingMiddleware, log_bodies=app_settings.log_request_bodies)
    register_exception_handlers(app, app_settings.validation_error_status)
    app.include_router(v1_router, prefix=app_settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
