"""Engine, session factory and the request-scoped session dependency."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from booklens.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base shared by every table in models.py."""


_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _engine_options(settings: Settings) -> dict[str, Any]:
    if make_url(settings.DATABASE_URL).get_backend_name() == "sqlite":
        # One connection shared across threads, so in-memory databases survive
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {
        "pool_size": settings.DATABASE_POOL_SIZE,
        "max_overflow": settings.DATABASE_MAX_OVERFLOW,
        "pool_pre_ping": True,
        "pool_recycle": settings.DATABASE_POOL_RECYCLE,
    }


def initialize_database(settings: Settings) -> None:
    """Build the engine and session factory. Called once from the app lifespan."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = create_engine(settings.DATABASE_URL, **_engine_options(settings))
    _session_factory = sessionmaker(bind=_engine, autoflush=False, expire_on_commit=True)


def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
    _session_factory = None


def get_db(
    settings: Annotated[Settings, Depends(get_settings)],
) -> Generator[Session, None, None]:
    """Yield a session for one request, initializing lazily outside the lifespan."""
    if _session_factory is None:
        initialize_database(settings)
    if _session_factory is None:
        raise RuntimeError("Database session factory is not available")

    with _session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
