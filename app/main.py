"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Accepts explicit Settings, so tests can point it at SQLite

2. Lifespan Events
   - startup: create the database engine and session factory
   - shutdown: dispose the engine (closes every pooled connection)

3. Exception Handlers
   - Domain errors (validation, not found, duplicate) map to 400/404/409
   - Request validation errors map to 400 with one message per violation
   - Database and unexpected errors map to 500
   - Every error body uses the same {"error": {"message", "status"}} shape
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, get_settings
from app.database import create_db_engine, create_session_factory, ping
from app.exceptions import BookAPIError
from app.routers import books_router
from app.schemas import violation_messages

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str | list[str]) -> JSONResponse:
    """Build the JSON error envelope shared by every handler."""
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


# =============================================================================
# Logging Configuration
# =============================================================================
def configure_logging(settings: Settings) -> None:
    """Configure root logging once, at the level from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown

    The engine is the only process-wide resource. It is created here,
    published on app.state for the get_db dependency, and disposed when
    the application stops, even if shutdown was triggered by an error.
    """
    settings: Settings = app.state.settings

    # ----- STARTUP -----
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Environment: {settings.environment}, debug: {settings.debug}")

    engine = create_db_engine(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info(f"Database engine created for {engine.url.render_as_string(hide_password=True)}")

    try:
        yield  # Application runs here
    finally:
        # ----- SHUTDOWN -----
        logger.info(f"Shutting down {settings.app_name}...")
        engine.dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached get_settings()

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="""
## Books API

A RESTful API for managing book records, keyed by ISBN.

- **GET /books**: list every book, ordered by title
- **GET /books/{isbn}**: fetch one book
- **POST /books**: create a book (all attributes required)
- **PUT /books/{isbn}**: replace a book
- **PATCH /books/{isbn}**: change some attributes of a book
- **DELETE /books/{isbn}**: delete a book
        """,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(BookAPIError)
    async def book_api_exception_handler(
        request: Request,
        exc: BookAPIError,
    ) -> JSONResponse:
        """Translate domain errors into their HTTP status and envelope."""
        logger.warning(
            f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """
        Handle request validation errors.

        FastAPI answers 422 by default; this API reports malformed input
        as 400 with one readable message per violation.
        """
        violations = violation_messages(exc.errors())
        logger.warning(f"{request.method} {request.url.path} -> 400: {violations}")
        return error_response(status.HTTP_400_BAD_REQUEST, violations)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Wrap routing errors (unknown path, wrong method) in the envelope."""
        response = error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """
        Handle SQLAlchemy database errors.

        Logs the actual error for debugging while hiding details from users.
        """
        logger.error(f"Database error: {exc}", exc_info=True)
        message = str(exc) if settings.debug else "A database error occurred."
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Catch-all exception handler. Shows details only in debug mode."""
        logger.error(f"Unhandled error: {exc}", exc_info=True)
        message = str(exc) if settings.debug else "An internal error occurred."
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database answers.",
    )
    def health_check(request: Request) -> dict:
        """Report API status and database connectivity."""
        try:
            ping(request.app.state.engine)
            database = "connected"
        except SQLAlchemyError as exc:
            logger.warning(f"Health check could not reach the database: {exc}")
            database = "unavailable"

        return {
            "status": "healthy" if database == "connected" else "degraded",
            "app": settings.app_name,
            "version": settings.api_version,
            "database": database,
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn app.main:app
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
