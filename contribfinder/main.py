"""
FastAPI application entry point for the Contribution Finder service.
"""

import logging
from datetime import datetime, timezone
import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from . import __version__
from .config import Settings, get_settings, settings
from .api import auth_router, explore_router
from .database import db_manager
from .errors import APIError
from .models.auth_models import HealthResponse


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure structlog on top of stdlib logging."""
    logging.basicConfig(format="%(message)s", level=log_level.upper())

    renderer = (
        structlog.dev.ConsoleRenderer()
        if log_format == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


configure_logging(settings.log_level, settings.log_format)
logger = structlog.get_logger(__name__)

ENDPOINTS = [
    "GET  /health",
    "GET  /auth/github",
    "POST /auth/github/callback",
    "GET  /auth/verify",
    "GET  /api/options",
    "GET  /api/issues",
    "GET  /api/trending",
    "GET  /api/repos/stars",
    "GET  /api/repos/{owner}/{name}/stars",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Contribution Finder",
                version=__version__,
                port=settings.app_port,
                endpoints=ENDPOINTS,
                frontend_url=settings.frontend_url,
                github_configured=settings.github_configured)
    if not settings.github_configured:
        logger.warning("GITHUB_CLIENT_ID and GITHUB_CLIENT_SECRET must be set for sign-in")

    try:
        db_manager.initialize()
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    # Shutdown
    logger.info("Shutting down Contribution Finder")
    db_manager.close()


app = FastAPI(
    title="Contribution Finder",
    description="Find beginner-friendly GitHub issues; GitHub OAuth sign-in proxy",
    version=__version__,
    debug=settings.app_debug,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app.include_router(auth_router, tags=["Auth"])
app.include_router(explore_router, prefix="/api", tags=["Explore"])


@app.get("/health", response_model=HealthResponse)
async def health_check(app_settings: Settings = Depends(get_settings)):
    """Health check endpoint."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        github_configured=app_settings.github_configured
    )


def main():
    """Run the service with uvicorn."""
    import uvicorn

    uvicorn.run(
        "contribfinder.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_debug,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
