"""
Faithtrack Backend: FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn faithtrack.main:app).

Application Architecture:
    ┌───────────────────────────────────────────────────────┐
    │                     FastAPI App                       │
    │                                                       │
    │  Middleware Chain:                                    │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐          │
    │  │  Req ID  │→│ Logging  │→│ GZip │→│ CORS │          │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘          │
    │                                                       │
    │  Routes:                                              │
    │  /api/prayers  /api/prayer-wall  /api/journal         │
    │  /api/devotionals  /api/search  /health               │
    │                                                       │
    │  Exception Handlers:                                  │
    │  Unauthenticated→401 │ NotFound→404 │ Upstream→502    │
    │  Database→500        │ Exception→500                  │
    └───────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate configuration, log readiness
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from faithtrack import __version__
from faithtrack.config import settings
from faithtrack.database import dispose_engine
from faithtrack.exceptions import (
    DatabaseError,
    FaithtrackError,
    NotFoundError,
    NotFoundOrForbiddenError,
    UnauthenticatedError,
    UpstreamError,
)
from faithtrack.middleware.logging import RequestLoggingMiddleware
from faithtrack.middleware.request_id import RequestIDMiddleware, request_id_var
from faithtrack.routes import devotionals, health, journal, prayer_wall, prayers, search

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole application.

    Format: 2026-01-15T12:00:00 [INFO] faithtrack.services.prayer_service: message
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Faithtrack Backend %s starting up...", __version__)

    # A missing auth secret is reported but not fatal: the public prayer wall
    # and health check still work, every other caller is anonymous
    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Faithtrack Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, rid: str, details=None) -> dict:
    body = {"error": error, "message": message, "request_id": rid}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler map:
        UnauthenticatedError      → 401 Unauthorized
        NotFoundOrForbiddenError  → 404 Not Found
        NotFoundError             → 404 Not Found
        UpstreamError             → 502 Bad Gateway (upstream status and body in details)
        DatabaseError             → 500 Internal Server Error (generic message)
        FaithtrackError (base)    → 500 Internal Server Error
        Exception (fallback)      → 500 Internal Server Error

    Request validation errors keep FastAPI's default 422 response.
    """

    @app.exception_handler(UnauthenticatedError)
    async def handle_unauthenticated(request: Request, exc: UnauthenticatedError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=401,
            content=_error_body("unauthenticated", exc.message, rid),
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(NotFoundOrForbiddenError)
    async def handle_not_found_or_forbidden(request: Request, exc: NotFoundOrForbiddenError):
        # Same body as a plain 404; the record id stays in the server log
        rid = request_id_var.get("")
        logger.info("[%s] Ownership check failed: %s", rid, exc.context)
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message, rid),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message, rid),
        )

    @app.exception_handler(UpstreamError)
    async def handle_upstream_error(request: Request, exc: UpstreamError):
        rid = request_id_var.get("")
        logger.error("[%s] Grok API error (status=%s)", rid, exc.status_code)
        details = {}
        if exc.status_code is not None:
            details["upstream_status"] = exc.status_code
        if exc.body is not None:
            details["upstream_body"] = exc.body
        return JSONResponse(
            status_code=502,
            content=_error_body("upstream_error", exc.message, rid, details),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "server_error",
                "An internal error occurred. Please try again later.",
                rid,
            ),
        )

    @app.exception_handler(FaithtrackError)
    async def handle_faithtrack_error(request: Request, exc: FaithtrackError):
        rid = request_id_var.get("")
        logger.error("[%s] Unhandled application error: %s", rid, exc.message)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc.message, rid),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
                rid,
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Faithtrack API",
        description=(
            "Personal faith companion: private prayers, journal and devotionals, "
            "a public prayer wall, and scripture questions answered by xAI Grok."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(prayers.router)
    app.include_router(prayer_wall.router)
    app.include_router(journal.router)
    app.include_router(devotionals.router)
    app.include_router(search.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
