"""signfolio API - Main FastAPI Application.

This module provides the FastAPI application serving the portfolio content.
It includes:
- CORS middleware configuration
- API versioning (/api/v1)
- Health check endpoints
- Portfolio listing and detail endpoints
- sitemap.xml and robots.txt

Usage:
    uvicorn signfolio.api.main:app --reload
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import structlog
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from signfolio import __version__
from signfolio.api.dependencies import reset_dependencies
from signfolio.api.models import ErrorResponse
from signfolio.api.routes import health_router, portfolio_router, seo_router
from signfolio.config.settings import check_configuration, get_settings
from signfolio.core.exceptions import PortfolioLoadError

logger = structlog.get_logger(__name__)

API_TITLE = "signfolio API"
API_DESCRIPTION = "Portfolio content for a signage-fabrication site, read from Notion."


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    - Startup: check the Notion settings once (listings fail until they are set)
    - Shutdown: close the shared Notion client
    """
    logger.info("application_starting", version=__version__)
    check_configuration()

    yield

    logger.info("application_stopping")
    await reset_dependencies()
    logger.info("application_stopped")


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    exc: Exception,
) -> JSONResponse:
    response = ErrorResponse(
        error=error,
        message=message,
        detail=str(exc) if get_settings().debug else None,
        path=request.url.path,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
    )

    @app.exception_handler(PortfolioLoadError)
    async def portfolio_load_error_handler(
        request: Request, exc: PortfolioLoadError
    ) -> JSONResponse:
        logger.error("portfolio_unavailable", path=request.url.path, error=str(exc))
        return _error_response(
            request,
            status.HTTP_502_BAD_GATEWAY,
            "portfolio_unavailable",
            "Portfolio data could not be loaded",
            exc,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_server_error",
            "An unexpected error occurred",
            exc,
        )

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": API_TITLE,
            "version": __version__,
            "health": "/health",
            "api": "/api/v1/portfolio",
        }

    app.include_router(health_router)
    app.include_router(seo_router)

    api_v1_router = APIRouter(prefix="/api/v1")
    api_v1_router.include_router(portfolio_router)
    app.include_router(api_v1_router)

    return app


app = create_app()
