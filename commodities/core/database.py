"""SQLite engine and session factory for the SQL storage backend."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from commodities.core.config import Settings


def build_engine(settings: Settings) -> Engine:
    """Create an engine for STORAGE_URL. In-memory SQLite shares one connection so data survives."""
    kwargs: dict = {"echo": settings.DEBUG}
    if settings.STORAGE_URL in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(settings.STORAGE_URL, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to the given engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

