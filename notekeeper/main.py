"""
Notekeeper — FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() composes NoteStore → NoteService from Settings, registers
       middleware, exception handlers and routes, and optionally mounts a
       static frontend directory.
Who:   uvicorn (`uvicorn notekeeper.main:app` or the `notekeeper` script);
       tests call create_app() with their own Settings.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → CORS           │
    │                                                     │
    │  Routes:                                            │
    │    GET/POST /api/notes   DELETE /api/notes/{id}     │
    │    GET /api/test         GET /health                │
    │    /  (static frontend, optional)                   │
    │                                                     │
    │  Exception Handlers:                                │
    │    ValidationError→400  NotFound→404  Storage→500   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log notes file location and listen address
    Shutdown: log shutdown (the store holds no open handles between requests)
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from notekeeper import __version__
from notekeeper.config import Settings, settings as default_settings
from notekeeper.exceptions import (
    NotekeeperError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from notekeeper.middleware.logging import RequestLoggingMiddleware
from notekeeper.middleware.request_id import RequestIDMiddleware, request_id_var
from notekeeper.routes import health, notes
from notekeeper.services.note_service import NoteService
from notekeeper.store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(log_level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "request_id": request_id_var.get(""),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP status codes and the error envelope.

    Handler hierarchy:
        ValidationError          → 400 Bad Request
        RequestValidationError   → 400 Bad Request (body does not match the schema)
        NotFoundError            → 404 Not Found
        StorageError             → 500 Internal Server Error
        NotekeeperError (base)   → 500 Internal Server Error
        HTTPException (routing)  → its own status (404 "route not found")
        Exception (fallback)     → 500 Internal Server Error

    Responses never carry paths or OS errors; those are logged from
    exc.context.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("[%s] Malformed request: %s", request_id_var.get(""), exc.errors())
        return _error_response(400, "invalid request body")

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, exc.message)

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error(
            "[%s] Storage error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(500, exc.message)

    @app.exception_handler(NotekeeperError)
    async def handle_app_error(request: Request, exc: NotekeeperError):
        logger.error(
            "[%s] Application error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(500, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error_response(404, "route not found")
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(500, "internal server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Configuration to build the app from. Defaults to the
                      environment-backed module-level settings.

    Returns:
        Fully configured FastAPI instance with its own NoteStore and
        NoteService on app.state.
    """
    cfg = app_settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(cfg.log_level)
        logger.info("=" * 60)
        logger.info("Notekeeper %s starting up...", __version__)
        logger.info("Notes file: %s", Path(cfg.notes_file).resolve())
        if cfg.frontend_dir:
            logger.info("Frontend directory: %s", Path(cfg.frontend_dir).resolve())
        logger.info("Server ready at http://%s:%d", cfg.backend_host, cfg.backend_port)
        logger.info("=" * 60)

        yield

        logger.info("Notekeeper shutting down...")

    app = FastAPI(
        title="Notekeeper API",
        description="Minimal note-taking API backed by a single JSON document.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Compose Store → Service ───────────────────────────────────────────
    app.state.settings = cfg
    app.state.note_service = NoteService(NoteStore(cfg.notes_file))

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in reverse order of addition: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins_list,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(health.router)

    # Mounted last so the API routes above take precedence over "/"
    if cfg.frontend_dir:
        frontend = Path(cfg.frontend_dir)
        if frontend.is_dir():
            app.mount("/", StaticFiles(directory=frontend, html=True), name="frontend")
        else:
            logger.warning("Frontend directory %s does not exist; not serving it", frontend)

    return app


def run() -> None:
    """Console entry point: serve the default app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "notekeeper.main:app",
        host=default_settings.backend_host,
        port=default_settings.backend_port,
        log_level=default_settings.log_level.lower(),
    )


# uvicorn expects `notekeeper.main:app` to be importable
app = create_app()
