"""
FastAPI application for the GitWrap API.

Serves the year-in-review JSON consumed by the wrapped card front end:
- msgspec JSON serialization
- CORS for the front-end origins
- X-Process-Time timing header on every response
- Consistent {"error": message} bodies for every failure
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

import msgspec
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from ..core.config import get_settings, setup_logging
from ..services.wrapped import close_github_client
from .errors import APIError, api_error_handler
from .routers import github

logger = logging.getLogger(__name__)


class MSGSpecResponse(Response):
    """Custom response class using msgspec for fast JSON serialization."""

    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        if content is None:
            return b""
        return msgspec.json.encode(content)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.

    Startup:
    - Configure logging
    - Warn when no GitHub token is available

    Shutdown:
    - Close the shared GitHub HTTP client
    """
    setup_logging()
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} {settings.app_version}...")
    if not settings.github_auth_token:
        logger.warning("No GitHub token configured; /api/github will return 500")

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    await close_github_client()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Year-in-review statistics for GitHub users",
        version=settings.app_version,
        default_response_class=MSGSpecResponse,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS middleware - allows the card front end to call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
        allow_credentials=settings.cors_allow_credentials,
        expose_headers=settings.cors_expose_headers,
    )

    @app.middleware("http")
    async def add_performance_headers(request: Request, call_next):
        """Add timing header to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = (time.time() - start_time) * 1000
        response.headers["X-Process-Time"] = f"{process_time:.2f}ms"
        if request.url.path.startswith("/api/") and response.status_code >= 400:
            response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate"
        return response

    app.add_exception_handler(APIError, api_error_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with consistent format."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        # Never leak exception details in production, regardless of DEBUG flag
        show_detail = settings.debug and settings.environment != "production"
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": str(exc) if show_detail else "An internal error occurred",
            },
        )

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now(tz=timezone.utc).isoformat()}

    @app.get("/health/github", tags=["health"])
    async def health_check_github():
        """Report whether a GitHub token is configured (no outbound call)."""
        configured = bool(get_settings().github_auth_token)
        return {
            "status": "healthy" if configured else "degraded",
            "token_configured": configured,
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        }

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
        }

    app.include_router(github.router, prefix="/api/github", tags=["github"])

    return app


# Create app instance
app = create_app()
