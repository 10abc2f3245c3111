"""
National Parks API — FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance;
       run() loads the catalogs and starts uvicorn.
Who:   uvicorn (uvicorn parks_api.main:app), the `parks-api` console script,
       `python -m parks_api`, and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐ ┌─────────┐  │
    │  │ Req ID   │→│  Logging    │→│ GZip │→│  CORS   │  │
    │  └──────────┘ └─────────────┘ └──────┘ └─────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ GET /parks…  │ │ GET /states… │ │ GET /health │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Unexpected→500│   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Load parks.json and states.json (unless a catalog was injected);
       a CatalogLoadError propagates and uvicorn exits before binding
    3. Attach one CatalogService per catalog to app.state

    Shutdown:
    Nothing to release; the catalogs live until the process exits.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from parks_api import __version__
from parks_api.config import Settings, settings
from parks_api.exceptions import (
    CatalogLoadError,
    NotFoundError,
    ParksAPIError,
)
from parks_api.middleware.logging import RequestLoggingMiddleware
from parks_api.middleware.request_id import RequestIDMiddleware, request_id_var
from parks_api.routes import health, parks, states
from parks_api.schemas.catalog import ErrorResponse
from parks_api.services.catalog_loader import Catalog, load_catalog
from parks_api.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    uvicorn's own access log is silenced; RequestLoggingMiddleware writes
    one line per request with the request ID instead.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, level or settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Catalog Wiring & Lifespan
# ══════════════════════════════════════════════════════════════════════════

def install_catalog(app: FastAPI, catalog: Catalog) -> None:
    """Attach read-only services for both catalogs to the application state."""
    app.state.catalog = catalog
    app.state.park_service = CatalogService.for_parks(catalog.parks)
    app.state.state_service = CatalogService.for_states(catalog.states)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Load the catalogs before the first request unless create_app() was given one.

    Any CatalogLoadError is logged and re-raised: uvicorn treats a failed
    lifespan startup as fatal and never opens the listening socket.
    """
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("=" * 60)
    logger.info("National Parks API %s starting up...", __version__)

    if not hasattr(app.state, "catalog"):
        try:
            catalog = load_catalog(app_settings.parks_file, app_settings.states_file)
        except CatalogLoadError as e:
            logger.critical("Startup aborted: %s", e.message)
            raise
        install_catalog(app, catalog)

    logger.info(
        "Catalogs ready: %d parks, %d states",
        len(app.state.park_service),
        len(app.state.state_service),
    )
    logger.info("API docs: http://%s:%d/docs", app_settings.backend_host, app_settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("National Parks API shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers so every error has the same body.

    Handler hierarchy:
        RequestValidationError   → 400 Bad Request (e.g. /parks/abc)
        NotFoundError            → 404 Not Found
        StarletteHTTPException   → its own status (unknown route 404, 405)
        ParksAPIError (base)     → 500 Internal Server Error
        Exception (fallback)     → 500 Internal Server Error

    Body: {"status": "error", "message": "..."}. 500 responses carry a generic
    message; details go to the server log only.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Path parameter failed FastAPI validation, e.g. a non-numeric id."""
        rid = request_id_var.get("")
        errors = exc.errors()
        if errors:
            first = errors[0]
            name = first["loc"][-1] if first.get("loc") else "request"
            message = f"Invalid {name}: {first['msg']}"
        else:
            message = "Invalid request"
        logger.warning("[%s] Request validation error: %s", rid, message)
        return _error_response(400, message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        """Unknown id. An expected outcome, so no error-level logging."""
        return _error_response(404, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(ParksAPIError)
    async def handle_app_error(request: Request, exc: ParksAPIError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return _error_response(500, "An internal error occurred. Please try again later.")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return _error_response(500, "An unexpected error occurred. Please try again later.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    catalog: Optional[Catalog] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        catalog:      Pre-loaded catalog. When omitted, the lifespan loads one
                      from the configured files at startup.
        app_settings: Settings override (tests); defaults to the module singleton.

    Returns:
        Fully configured FastAPI instance.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="National Parks API",
        description=(
            "Read-only catalog of U.S. national parks and the states that contain them. "
            "List, fetch by ID, or fuzzy-search either catalog."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/api-docs/openapi.json",
        openapi_tags=[
            {"name": "Parks", "description": "National Parks"},
            {"name": "States", "description": "States with National Parks"},
        ],
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    if catalog is not None:
        install_catalog(app, catalog)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(parks.router)
    app.include_router(states.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """
    Process entry point: load both catalogs, then serve on the configured host/port.

    The catalogs are loaded before uvicorn is started, so a missing or
    malformed file exits with status 1 without ever binding the listener.
    """
    setup_logging()
    try:
        catalog = load_catalog(settings.parks_file, settings.states_file)
    except CatalogLoadError as e:
        logger.critical("Startup aborted: %s", e.message)
        logger.critical("Fix the catalog files (PARKS_FILE / STATES_FILE) and restart.")
        raise SystemExit(1) from e

    uvicorn.run(
        create_app(catalog),
        host=settings.backend_host,
        port=settings.backend_port,
        log_config=None,
    )


# uvicorn expects `parks_api.main:app` to be importable
app = create_app()
