"""
FAQDesk Backend: FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn app.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Layout:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌────────────────┐ ┌──────────┐ ┌───────────────┐  │
    │  │ HTTPS redirect │→│ Req ID   │→│  Logging      │  │
    │  └────────────────┘ └──────────┘ └───────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐  │
    │  │ /faq CRUD    │ │ /health  │ │ / static assets │  │
    │  └──────────────┘ └──────────┘ └─────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Store→500    │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, optionally create the faq table, log ready
    Shutdown: dispose the database engine, log shutdown
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from app import __version__
from app.config import settings
from app.database import create_schema, dispose_engine
from app.exceptions import NotFoundError, StoreError, ValidationError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import faq, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
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


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Run startup work before the yield and shutdown work after it."""
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("FAQDesk Backend %s starting up (%s)", __version__, settings.environment)

    if settings.db_create_schema:
        await create_schema()

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    if settings.is_development:
        logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("FAQDesk Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler mapping:
        ValidationError    → 400 Bad Request
        NotFoundError      → 404 Not Found
        StoreError         → 500 Internal Server Error (raw store text when
                             settings.expose_store_errors is enabled)
        Exception          → 500 Internal Server Error (generic message)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        message = (
            exc.message
            if settings.expose_store_errors
            else "An internal error occurred. Please try again later."
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "store_error",
                "message": message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all: the stack trace is logged, never returned.

        This handler runs in ServerErrorMiddleware, outside RequestIDMiddleware,
        so the ID is read back from the shared request state.
        """
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Static Front-End
# ══════════════════════════════════════════════════════════════════════════

class FrontendStaticFiles(StaticFiles):
    """
    StaticFiles mounted at the site root.

    Non-GET requests that fall through the API routes (e.g. PUT /faq/abc)
    get 404 instead of StaticFiles' 405, the same as an unmatched route.
    """

    async def get_response(self, path: str, scope):
        if scope["method"] not in ("GET", "HEAD"):
            raise StarletteHTTPException(status_code=404)
        return await super().get_response(path, scope)


def mount_static(app: FastAPI) -> None:
    """Serve index.html and assets from settings.static_root, if present."""
    static_root = Path(settings.static_root)
    if not static_root.is_dir():
        logger.warning("Static root %s not found; front-end not served", static_root)
        return
    app.mount(
        "/",
        FrontendStaticFiles(directory=str(static_root), html=True),
        name="static",
    )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    OpenAPI docs are only exposed in the development environment.
    """
    docs_enabled = settings.is_development
    app = FastAPI(
        title="FAQDesk API",
        description="Create, read, update and delete frequently asked questions.",
        version=__version__,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: HTTPS redirect → Request ID → Logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(faq.router)
    app.include_router(health.router)

    # Mounted last so API routes take precedence over the catch-all root
    mount_static(app)

    return app


# uvicorn expects `app.main:app` to be importable
app = create_app()
