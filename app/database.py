"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Books API.

Explicit Database Handle
========================
Nothing here connects at import time. The application lifespan calls
create_db_engine() on startup, keeps the engine and its session factory
on app.state, and disposes the engine on shutdown. Request handlers
receive a session through get_db(), so the only shared state is the
connection pool owned by the engine.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives → create a new session from the factory
2. Use session for all database operations in that request
3. Commit on success, rollback on failure (see app.repositories)
4. Close session when request ends
"""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import Settings


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations, and the
    test suite uses it to create the schema in SQLite.
    """
    pass


# =============================================================================
# Engine and Session Factory
# =============================================================================
def create_db_engine(settings: Settings) -> Engine:
    """
    Create the database engine for the configured connection target.

    Key parameters:
    - pool_size / max_overflow: connection pool sizing (server databases)
    - pool_pre_ping: test connection health before use
    - echo: log SQL statements in debug mode

    SQLite does not share connections across threads by default, and an
    in-memory SQLite database lives only as long as its connection, so
    SQLite URLs get check_same_thread=False and in-memory ones a StaticPool.

    Args:
        settings: Application settings holding the database URL

    Returns:
        A new SQLAlchemy Engine (the caller owns it and must dispose it)
    """
    if settings.is_sqlite:
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in settings.database_url or settings.database_url in (
            "sqlite://",
            "sqlite+pysqlite://",
        ):
            kwargs["poolclass"] = StaticPool
        return create_engine(settings.database_url, echo=settings.debug, **kwargs)

    return create_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """
    Create a session factory bound to the engine.

    - autoflush=False: Don't auto-flush before queries
    - expire_on_commit=False: Rows read after commit stay usable
    """
    return sessionmaker(
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Opens a session from the factory the lifespan stored on app.state,
    yields it to the route handler and closes it when the request ends,
    even if the handler raised.

    Yields:
        SQLAlchemy Session instance
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def ping(engine: Engine) -> bool:
    """Return True if the database answers a trivial query."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    return True


def create_tables(engine: Engine) -> None:
    """
    Create all database tables.

    Used by the test suite and the seed script. In production, use
    Alembic migrations instead.
    """
    # Import models so they are registered on Base.metadata
    import app.models  # noqa: F401

    Base.metadata.create_all(bind=engine)

