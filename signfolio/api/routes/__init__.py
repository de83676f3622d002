"""API route modules."""

from signfolio.api.routes.health import router as health_router
from signfolio.api.routes.portfolio import router as portfolio_router
from signfolio.api.routes.seo import router as seo_router

__all__ = [
    "health_router",
    "portfolio_router",
    "seo_router",
]
