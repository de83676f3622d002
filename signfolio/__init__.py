"""
signfolio - portfolio content layer for a signage-fabrication website.

This package contains the modules that turn a Notion database into the
portfolio shown on the public site:
- collectors: Notion REST client, query builders, and page normalizer
- services: portfolio read service (listing, detail, category) and sitemap
- models: PortfolioItem and listing options
- api: FastAPI application serving JSON, sitemap.xml, and robots.txt
- config: Pydantic settings and the startup configuration check
- core: exception hierarchy
"""

__version__ = "0.1.0"
