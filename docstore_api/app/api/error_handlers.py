"""
Global exception handlers.

FastAPI reports request validation failures as HTTP 422 by default.
This API reports every malformed request (bad JSON, wrong field
types, missing required fields) as HTTP 400 instead, keeping the
``{"detail": ...}`` body shape used by ``HTTPException``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers on ``app``."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Validation error on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )
