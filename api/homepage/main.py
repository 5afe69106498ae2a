"""
Personal homepage API.

FastAPI application serving the public profile and the admin endpoints that
edit it.
"""

import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from homepage.config import settings, validate_security_settings
from homepage.errors import HomepageError, StorageError
from homepage.middleware.rate_limit import limiter
from homepage.routers.auth import router as auth_router
from homepage.routers.profile import router as profile_router
from homepage.services.bootstrap import ensure_defaults
from homepage.store import create_store

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    configure_logging()
    validate_security_settings()

    store = create_store(settings)
    await store.init()
    await ensure_defaults(store)
    app.state.store = store
    logger.info("Homepage API started with %s storage", settings.storage_backend)
    yield
    await store.close()


app = FastAPI(
    title="Homepage API",
    description="Public profile and admin panel backend for a personal homepage",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Add rate limiter state
app.state.limiter = limiter

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(profile_router)


# --- Middleware ---


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add a unique request ID to each request."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# --- Exception Handlers ---


def _error_response(request: Request, status_code: int, code: str, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "message": message,
            "code": code,
            "request_id": getattr(request.state, "request_id", None),
            **extra,
        },
    )


def _sanitize_error_detail(error: dict[str, Any]) -> dict[str, Any]:
    """Sanitize Pydantic error detail to be JSON-serializable."""
    sanitized = {}
    for key, value in error.items():
        if key == "ctx":
            # Context may contain non-serializable objects like ValueError
            sanitized[key] = {k: str(v) for k, v in value.items()} if isinstance(value, dict) else str(value)
        elif key == "loc":
            sanitized[key] = [str(loc) for loc in value]
        elif key == "input":
            # Never echo submitted values back (passwords)
            continue
        else:
            sanitized[key] = value
    return sanitized


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with the first offending field."""
    errors = [_sanitize_error_detail(e) for e in exc.errors()]
    if errors:
        first_error = errors[0]
        # Drop the leading "body" segment so the field reads like the JSON key
        loc = [part for part in first_error.get("loc", []) if part != "body"]
        field = ".".join(loc)
        msg = first_error.get("msg", "Validation error")
        message = f"{field}: {msg}" if field else msg
    else:
        message = "Validation error"

    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        message,
        details=errors,
    )


@app.exception_handler(RateLimitExceeded)
async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Report rate limiting in the same envelope as every other error."""
    return _error_response(
        request,
        status.HTTP_429_TOO_MANY_REQUESTS,
        "RATE_LIMITED",
        f"Too many requests, limit is {exc.detail}",
    )


@app.exception_handler(HomepageError)
async def homepage_exception_handler(request: Request, exc: HomepageError) -> JSONResponse:
    """Translate service errors into their status code and message."""
    if isinstance(exc, StorageError):
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc.message)
    extra = {}
    field = getattr(exc, "field", None)
    if field:
        extra["field"] = field
    return _error_response(request, exc.status_code, exc.code, exc.message, **extra)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent error format."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An unexpected error occurred",
    )


# --- Health Check ---


@app.get("/api/health", tags=["System"])
async def health_check() -> dict[str, str]:
    """
    Health check endpoint.

    Returns 200 OK if the API is running.
    """
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
