"""
Main entrypoint for the DocStore API.

This module assembles the FastAPI application: it sets up logging,
builds the document store and its service, registers middleware and
error handlers and includes the routers.  ``create_app`` accepts
explicit ``settings`` and ``store`` instances so tests can run
isolated applications side by side; the module level ``app`` is built
from the environment and can be served directly, e.g.::

    uvicorn docstore_api.app.main:app --reload
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api.error_handlers import register_error_handlers
from .api.probes import router as probes_router
from .api.v1.router import router as v1_router
from .core.config import Settings, get_settings
from .core.logging_config import setup_logging
from .core.store import DocumentStore
from .services.document_service import DocumentService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use.  Defaults to the process‑wide settings from
        ``get_settings``.
    store : Optional[DocumentStore]
        Store backing the document routes.  A fresh, empty store is
        created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.state.settings = settings
    app.state.document_service = DocumentService(store if store is not None else DocumentStore())
    app.state.started_at = time.monotonic()

    if settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials="*" not in settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    register_error_handlers(app)

    app.include_router(probes_router)
    app.include_router(v1_router, prefix="/api/v1")

    logger.info("%s %s created (environment: %s)", settings.project_name, settings.api_version, settings.environment)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
