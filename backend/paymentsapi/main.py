"""
Payments API — FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn paymentsapi.main:app`) and the `paymentsapi` CLI.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │ Req ID   │→│  Logging        │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes (in mount order):                           │
    │  ┌──────────────┐ ┌──────────────────┐ ┌─────────┐  │
    │  │ user router  │ │ GET /users/{id}/ │ │ GET /   │  │
    │  │ (pluggable)  │ │        payment   │ │         │  │
    │  └──────────────┘ └──────────────────┘ └─────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ PaymentsApiError→500 │ Exception→500         │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Unknown paths and methods get FastAPI's default 404/405 responses.
Routes match case-insensitively and accept one trailing slash
(see paymentsapi.routing.LenientRoute).
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from paymentsapi import __version__
from paymentsapi.config import Settings, settings
from paymentsapi.exceptions import PaymentsApiError
from paymentsapi.middleware.logging import RequestLoggingMiddleware
from paymentsapi.middleware.request_id import RequestIDMiddleware, request_id_var
from paymentsapi.routes import payment, root
from paymentsapi.routing import load_router

logger = logging.getLogger(__name__)

STARTUP_MESSAGE = "Server is running.."


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output goes to stdout so container runtimes capture it.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging and announce startup; log shutdown."""
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)

    logger.info(STARTUP_MESSAGE)
    logger.info("Listening on http://%s:%d", app_settings.host, app_settings.port)

    yield

    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def current_request_id(request: Request) -> str:
    """Request ID from the context, or from request.state once it is reset."""
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to JSON error responses.

        PaymentsApiError   → 500 with the exception's message
        Exception          → 500 generic message, traceback logged

    The bundled routes never raise PaymentsApiError. The handler is there
    for user routers plugged in through USER_ROUTER, which may raise it
    (or a subclass) to fail a request with a readable message.

    Context dicts and tracebacks are logged server-side only.
    """

    @app.exception_handler(PaymentsApiError)
    async def handle_app_error(request: Request, exc: PaymentsApiError):
        rid = current_request_id(request)
        logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = current_request_id(request)
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build from; the module singleton if None.

    Raises:
        RouterLoadError: if `user_router` does not name an APIRouter.
    """
    if app_settings is None:
        app_settings = settings
    docs = app_settings.enable_docs

    app = FastAPI(
        title="Payments API",
        description="Demonstration of RESTful URL design for a user payment lookup.",
        version=__version__,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
        lifespan=lifespan,
        # LenientRoute matches /path/ directly; never answer with a 307
        redirect_slashes=False,
    )
    app.state.settings = app_settings

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(load_router(app_settings.user_router))
    app.include_router(payment.router)
    app.include_router(root.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()
