"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from run_tracker.api import auth, runs, stats
from run_tracker.config import Settings, get_settings
from run_tracker.database import create_db_engine, create_session_factory, init_db
from run_tracker.errors import InternalError, RunTrackerError
from run_tracker.repositories import (
    InMemoryRunRepository,
    InMemoryUserRepository,
    SqlRunRepository,
    SqlUserRepository,
)
from run_tracker.services.auth import AuthService
from run_tracker.services.photo_storage import PhotoStorage
from run_tracker.services.run_service import RunService

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as a ``{success: false, error}`` envelope."""

    @app.exception_handler(RunTrackerError)
    async def handle_run_tracker_error(request: Request, exc: RunTrackerError):
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return _error_response(exc.status_code, exc.message, headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        fields = sorted({str(error["loc"][-1]) for error in exc.errors() if error.get("loc")})
        message = f"Invalid or missing fields: {', '.join(fields)}" if fields else "Invalid request"
        return _error_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        message = "Endpoint not found" if exc.status_code == 404 else str(exc.detail)
        return _error_response(exc.status_code, message, getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        error = InternalError()
        return _error_response(error.status_code, error.message)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application from explicit settings (or the environment)."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Create storage and seed data; dispose of the database engine on shutdown."""
        Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
        engine = None
        if settings.uses_database:
            engine = create_db_engine(settings.database_url)
            init_db(engine)
            session_factory = create_session_factory(engine)
            app.state.user_repository = SqlUserRepository(session_factory)
            app.state.run_repository = SqlRunRepository(session_factory)
        else:
            app.state.user_repository = InMemoryUserRepository()
            app.state.run_repository = InMemoryRunRepository()

        user = AuthService(app.state.user_repository, settings).ensure_user(
            settings.seed_user_email, settings.seed_user_password
        )
        if settings.seed_demo_runs:
            RunService(app.state.run_repository, app.state.photo_storage).seed_demo_runs(user.id)

        logger.info(
            "Run tracker started (environment=%s, storage=%s)",
            settings.environment,
            settings.storage_backend,
        )
        yield
        if engine is not None:
            engine.dispose()

    app = FastAPI(
        title="Run Tracker API",
        description="Personal run log with photos and aggregate stats",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.photo_storage = PhotoStorage(
        settings.upload_dir, settings.upload_url_prefix, settings.max_upload_bytes
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Register routers
    app.include_router(auth.router)
    app.include_router(runs.router)
    app.include_router(stats.router)

    # The upload directory is created in the lifespan, not at import time
    app.mount(
        settings.upload_url_prefix,
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    return app


app = create_app()
