"""
Rural Sports Backend: FastAPI Application Factory
==================================================

What:  Builds the FastAPI application: middleware, exception handlers, routers
       and the startup/shutdown lifecycle.
Who:   uvicorn (uvicorn app.main:app) and the test suite (create_app()).

Application Architecture:
    ┌──────────────────────────────────────────────────────────────┐
    │                        FastAPI App                           │
    │                                                              │
    │  Middleware: RateLimit → RequestID → AccessLog → GZip → CORS │
    │                                                              │
    │  Routers (/api, session cookie required unless noted):       │
    │    auth (public) · users · events · materials · donations    │
    │    loans · teams · interactions · stats · consult            │
    │    files (public) · /health (public)                         │
    │                                                              │
    │  Exception handlers:                                         │
    │    Validation→400 · Auth→401 · NotFound→404 · Conflict→409   │
    │    DB/File→500 · LLM/Circuit→503 (429 comes from middleware) │
    └──────────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, configuration warnings, storage directory
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import (
    AuthenticationError,
    CircuitBreakerOpenError,
    ConflictError,
    DatabaseError,
    FileStorageError,
    LLMServiceError,
    NotFoundError,
    RuralSportsError,
    ValidationError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.rate_limit import RateLimitMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import (
    auth,
    consult,
    donations,
    events,
    files,
    health,
    interactions,
    loans,
    materials,
    stats,
    teams,
    users,
)

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, at startup.

    Format: 2026-05-14T09:30:00 [INFO] app.services.event_service: message
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Quiet per-operation chatter from libraries
    for noisy in ("uvicorn.access", "sqlalchemy.engine", "httpcore", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Rural Sports Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: /health and the non-AI endpoints still work
        logger.error("Configuration error: %s", str(e))

    storage = Path(settings.storage_root)
    storage.mkdir(parents=True, exist_ok=True)
    logger.info("Storage directory: %s", storage.resolve())
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Rural Sports Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"error": error, "message": message}
    if details:
        content["details"] = details
    content["request_id"] = request_id_var.get("")
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map the exception hierarchy to HTTP responses.

    Body: {"error": <code>, "message": <text>, "details"?: {...}, "request_id": <id>}

    Server-side failures (database, file system, anything unexpected) answer
    with a generic message; their details go to the log only.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc.message, exc.context)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        return _error_response(401, "unauthorized", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        return _error_response(409, "conflict", exc.message, exc.context)

    @app.exception_handler(CircuitBreakerOpenError)
    async def handle_circuit_breaker(request: Request, exc: CircuitBreakerOpenError):
        logger.warning("[%s] Circuit breaker open: %s", request_id_var.get(""), exc.message)
        return _error_response(
            503,
            "service_unavailable",
            exc.message,
            {"recovery_time": exc.recovery_time},
            headers={"Retry-After": str(exc.recovery_time)},
        )

    @app.exception_handler(LLMServiceError)
    async def handle_llm_error(request: Request, exc: LLMServiceError):
        logger.error("[%s] LLM service error: %s", request_id_var.get(""), exc.message)
        headers = {"Retry-After": str(exc.retry_after)} if exc.retry_after else None
        return _error_response(503, "llm_service_error", exc.message, exc.context, headers=headers)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context
        )
        return _error_response(
            500, "server_error", "An internal error occurred. Please try again later."
        )

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        logger.error(
            "[%s] File storage error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context
        )
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(RuralSportsError)
    async def handle_application_error(request: Request, exc: RuralSportsError):
        logger.error("[%s] Unhandled application error: %s", request_id_var.get(""), exc.message)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True
        )
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Rural Sports API",
        description=(
            "Community sports management for villages: members, events and sign-ups, "
            "donated equipment and loans, teams, a community board and an AI sports expert."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Middleware ────────────────────────────────────────────────────────
    # Last added runs first: RateLimit → RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,  # session cookie
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RateLimitMiddleware)

    register_exception_handlers(app)

    # ── Routes ────────────────────────────────────────────────────────────
    for module in (
        auth,
        users,
        events,
        materials,
        donations,
        loans,
        teams,
        interactions,
        stats,
        consult,
        files,
        health,
    ):
        app.include_router(module.router)

    return app


app = create_app()
