"""
Services.

- portfolio: PortfolioService, the read API over the Notion database
- sitemap: sitemap.xml and robots.txt generation
"""

from signfolio.services.portfolio import (
    PortfolioService,
    display_sort_key,
    filter_by_category,
    get_by_id,
    list_all,
    parse_timestamp,
    sort_for_display,
)
from signfolio.services.sitemap import (
    SitemapEntry,
    build_sitemap_entries,
    generate_sitemap,
    render_robots_txt,
    render_sitemap_xml,
)

__all__ = [
    "PortfolioService",
    "display_sort_key",
    "filter_by_category",
    "get_by_id",
    "list_all",
    "parse_timestamp",
    "sort_for_display",
    "SitemapEntry",
    "build_sitemap_entries",
    "generate_sitemap",
    "render_robots_txt",
    "render_sitemap_xml",
]
