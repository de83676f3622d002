"""Sitemap and robots.txt generation for the public site."""

from datetime import datetime, timezone
from typing import Iterable, Optional
from urllib.parse import quote
from xml.sax.saxutils import escape as xml_escape

import structlog
from pydantic import BaseModel

from signfolio.core.exceptions import PortfolioLoadError
from signfolio.models.portfolio import PortfolioItem
from signfolio.services.portfolio import PortfolioService, parse_timestamp

logger = structlog.get_logger(__name__)

ROBOTS_USER_AGENTS = ("*", "Googlebot", "Yeti")


class SitemapEntry(BaseModel):
    """One <url> element of sitemap.xml."""

    url: str
    last_modified: datetime
    change_frequency: str
    priority: float


def _static_entries(base_url: str, now: datetime) -> list[SitemapEntry]:
    return [
        SitemapEntry(url=base_url, last_modified=now, change_frequency="daily", priority=1.0),
        SitemapEntry(
            url=f"{base_url}/portfolio", last_modified=now, change_frequency="daily", priority=0.8
        ),
        SitemapEntry(
            url=f"{base_url}/about", last_modified=now, change_frequency="monthly", priority=0.5
        ),
    ]


def build_sitemap_entries(
    site_url: str,
    items: Iterable[PortfolioItem],
    now: Optional[datetime] = None,
) -> list[SitemapEntry]:
    """Build entries for the static pages and one detail page per item.

    Args:
        site_url: Public base URL.
        items: Portfolio items to link.
        now: Timestamp for pages without a better one. Defaults to utcnow.

    Returns:
        Static entries first, then item entries in the given order.
    """
    now = now or datetime.now(timezone.utc)
    base_url = site_url.rstrip("/")
    entries = _static_entries(base_url, now)

    for item in items:
        if not item.id:
            continue
        completed = parse_timestamp(item.completed_at)
        entries.append(
            SitemapEntry(
                url=f"{base_url}/portfolio/{quote(item.id, safe='')}",
                last_modified=(
                    datetime.fromtimestamp(completed, tz=timezone.utc)
                    if completed is not None
                    else now
                ),
                change_frequency="monthly",
                priority=0.7,
            )
        )
    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
    ]
    for entry in entries:
        lines.extend(
            [
                "  <url>",
                f"    <loc>{xml_escape(entry.url)}</loc>",
                f"    <lastmod>{entry.last_modified.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')}</lastmod>",
                f"    <changefreq>{entry.change_frequency}</changefreq>",
                f"    <priority>{entry.priority:.1f}</priority>",
                "  </url>",
            ]
        )
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


def render_robots_txt(site_url: str) -> str:
    """Allow every crawler except under /api/ and point at the sitemap."""
    blocks = [
        f"User-agent: {agent}\nAllow: /\nDisallow: /api/" for agent in ROBOTS_USER_AGENTS
    ]
    blocks.append(f"Sitemap: {site_url.rstrip('/')}/sitemap.xml")
    return "\n\n".join(blocks) + "\n"


async def generate_sitemap(
    service: PortfolioService,
    site_url: str,
    now: Optional[datetime] = None,
) -> str:
    """Render sitemap.xml, keeping the static pages if the listing fails."""
    try:
        items = await service.list_all()
    except PortfolioLoadError as e:
        logger.error("sitemap_listing_failed", error=str(e))
        items = []
    return render_sitemap_xml(build_sitemap_entries(site_url, items, now))
