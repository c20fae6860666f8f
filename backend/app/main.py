"""
Employee Directory Backend - FastAPI Application Factory
========================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance;
       run() starts uvicorn on BACKEND_HOST:BACKEND_PORT.
Who:   uvicorn (`uvicorn app.main:app`) or the `employee-directory` script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────┐ ┌──────────────────────┐  │
    │  │ /api/employees[/id]  │ │ /   /health          │  │
    │  └──────────────────────┘ └──────────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ DatabaseError→500 │ *→500     │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  Docs: /swagger-ui, /api-docs/openapi.json          │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration and open the pool (abort on failure)
    3. Attach the EmployeeGateway to app.state

    Shutdown:
    1. Dispose the pool (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from app import __version__
from app.config import Settings, settings
from app.database import dispose_pool, init_pool
from app.exceptions import (
    ConfigError,
    DatabaseConnectionError,
    DatabaseError,
    NotFoundError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from app.routes import employees, health
from app.services.employee_gateway import EmployeeGateway

logger = logging.getLogger(__name__)

DOCS_URL = "/swagger-ui"
OPENAPI_URL = "/api-docs/openapi.json"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] app.services.employee_gateway: Employee 3 created
    Called once from the lifespan, before the pool is opened.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that log every statement or request at INFO
    for noisy in ("uvicorn.access", "sqlalchemy.engine", "httpcore", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

def build_lifespan(config: Settings):
    """Returns a lifespan bound to `config`."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # ── Startup ───────────────────────────────────────────────────────
        setup_logging(config.log_level)
        logger.info("Employee Directory backend starting up...")

        try:
            engine = await init_pool(config)
        except (ConfigError, DatabaseConnectionError) as e:
            # Re-raised: uvicorn reports "Application startup failed" and exits
            logger.critical("Startup aborted: %s", e.message)
            raise

        app.state.gateway = EmployeeGateway(engine, fail_soft_reads=config.fail_soft_reads)
        logger.info(
            "Read error policy: %s",
            "fail-soft" if config.fail_soft_reads else "strict",
        )
        logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)
        logger.info("Swagger UI: http://%s:%d%s", config.backend_host, config.backend_port, DOCS_URL)

        yield

        # ── Shutdown ──────────────────────────────────────────────────────
        logger.info("Employee Directory backend shutting down...")
        await dispose_pool(engine)
        logger.info("Shutdown complete.")

    return lifespan


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to empty-bodied responses.

        NotFoundError        → 404
        DatabaseError        → 500
        Exception (fallback) → 500

    Details (message, context, stack trace) go to the log only.

    The catch-all handler runs in ServerErrorMiddleware, outside
    RequestIDMiddleware, after request_id_var has been reset. It reads the id
    from request.state instead and sets the X-Request-ID header itself.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] %s", rid, exc.message)
        return Response(status_code=404)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return Response(status_code=500)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("") or getattr(request.state, "request_id", "")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
        headers = {REQUEST_ID_HEADER: rid} if rid else None
        return Response(status_code=500, headers=headers)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Settings = settings) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance. The pool is opened by the
    lifespan, so constructing the app never touches the database.
    """
    app = FastAPI(
        title="Employee Directory API",
        description="Create, read, update and delete employee records.",
        version=__version__,
        docs_url=DOCS_URL,
        redoc_url=None,
        openapi_url=OPENAPI_URL,
        lifespan=build_lifespan(config),
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS → routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(employees.router)

    return app


# uvicorn app.main:app
app = create_app()


def run() -> None:
    """Console entry point: serve `app` on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
