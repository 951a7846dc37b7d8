"""BookLens backend application."""

import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from booklens.config import configure_logging, get_settings
from booklens.database import dispose_engine, initialize_database
from booklens.infrastructure.common.error_handlers import register_exception_handlers
from booklens.infrastructure.library.routers import books
from booklens.infrastructure.reading.routers import reading_sessions

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        reading_timezone=settings.READING_TIMEZONE,
    )
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return response


register_exception_handlers(app, settings)


@app.get("/")
def root() -> dict[str, Any]:
    """Service banner with the endpoint map."""
    prefix = settings.API_PREFIX
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "endpoints": {
            "health": f"{prefix}/health",
            "books": f"{prefix}/books/*",
            "readingSessions": f"{prefix}/reading-sessions/*",
        },
    }


@app.get(f"{settings.API_PREFIX}/health")
def health() -> dict[str, bool]:
    return {"ok": True}


app.include_router(books.router, prefix=settings.API_PREFIX)
app.include_router(reading_sessions.router, prefix=settings.API_PREFIX)


@app.api_route(
    f"{settings.API_PREFIX}/{{path:path}}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
def endpoint_not_found(path: str) -> None:
    """Anything under the API prefix that no router claimed."""
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Endpoint not found")
