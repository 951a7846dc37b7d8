"""Render every error as a `{"error": message}` JSON body."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from booklens.config import Settings
from booklens.exceptions import BookLensError

logger = logging.getLogger(__name__)

REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _describe_validation_error(error: dict[str, Any]) -> str:
    """Turn the first pydantic error into `field: reason`."""
    loc = [str(part) for part in error.get("loc", ()) if part not in REQUEST_LOCATIONS]
    message = error.get("msg", "Invalid request")
    if loc:
        return f"{'.'.join(loc)}: {message}"
    return message


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the JSON error handlers on the application."""

    @app.exception_handler(BookLensError)
    async def handle_booklens_error(request: Request, exc: BookLensError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        message = _describe_validation_error(errors[0]) if errors else "Invalid request"
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc
        )
        content: dict[str, str] = {"error": "Internal server error"}
        if settings.ENVIRONMENT != "production":
            content["message"] = str(exc)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)
