"""
Main entrypoint for the Persons API.

This module assembles the FastAPI application, sets up logging,
creates the person store and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, so it can be served
with uvicorn or another ASGI server, e.g.::

    uvicorn persons_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.errors import register_exception_handlers
from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.person_store import PersonStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[PersonStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; the module level ``settings`` by default.
    store : Optional[PersonStore]
        Store shared by all request handlers.  A store seeded with
        the sample records is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first, so everything below can log.
    setup_logging(settings.log_level, logfile=settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.store = store if store is not None else PersonStore.with_sample_data()

    app.include_router(router)
    register_exception_handlers(app)

    logger.info("Application created with %d persons", len(app.state.store.list_persons()))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
