"""
HTTP surface.

FastAPI application exposing the portfolio content:

- GET /api/v1/portfolio: visible items in display order
- GET /api/v1/portfolio/{id}: one item
- GET /sitemap.xml, GET /robots.txt
- GET /health, /health/live, /health/ready
"""

from signfolio.api.main import app, create_app

__all__ = ["app", "create_app"]
