"""Unit tests for sitemap.xml and robots.txt generation."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from xml.etree import ElementTree

import pytest

from signfolio.core.exceptions import PortfolioLoadError
from signfolio.models.portfolio import PortfolioItem
from signfolio.services.sitemap import (
    build_sitemap_entries,
    generate_sitemap,
    render_robots_txt,
    render_sitemap_xml,
)

SITE_URL = "https://signs.example.com/"
NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}


class TestBuildSitemapEntries:
    def test_static_pages_first(self):
        entries = build_sitemap_entries(SITE_URL, [], now=NOW)

        assert [(e.url, e.change_frequency, e.priority) for e in entries] == [
            ("https://signs.example.com", "daily", 1.0),
            ("https://signs.example.com/portfolio", "daily", 0.8),
            ("https://signs.example.com/about", "monthly", 0.5),
        ]
        assert all(e.last_modified == NOW for e in entries)

    def test_item_entries(self):
        items = [
            PortfolioItem(id="abc-123", title="Dated", completed_at="2023-04-05"),
            PortfolioItem(id="def-456", title="Undated"),
        ]

        entries = build_sitemap_entries(SITE_URL, items, now=NOW)[3:]

        assert [e.url for e in entries] == [
            "https://signs.example.com/portfolio/abc-123",
            "https://signs.example.com/portfolio/def-456",
        ]
        assert entries[0].last_modified == datetime(2023, 4, 5, tzinfo=timezone.utc)
        assert entries[1].last_modified == NOW
        assert {e.priority for e in entries} == {0.7}
        assert {e.change_frequency for e in entries} == {"monthly"}

    def test_items_without_id_skipped(self):
        entries = build_sitemap_entries(SITE_URL, [PortfolioItem(title="No id")], now=NOW)

        assert len(entries) == 3

    def test_id_is_url_quoted(self):
        entries = build_sitemap_entries(SITE_URL, [PortfolioItem(id="a/b c", title="x")], now=NOW)

        assert entries[-1].url == "https://signs.example.com/portfolio/a%2Fb%20c"


class TestRenderSitemapXml:
    def test_valid_urlset(self):
        items = [PortfolioItem(id="abc", title="x", completed_at="2023-04-05")]

        xml = render_sitemap_xml(build_sitemap_entries(SITE_URL, items, now=NOW))
        root = ElementTree.fromstring(xml.encode("utf-8"))

        urls = root.findall("sm:url", NS)
        assert len(urls) == 4
        assert urls[0].findtext("sm:loc", namespaces=NS) == "https://signs.example.com"
        assert urls[0].findtext("sm:lastmod", namespaces=NS) == "2024-06-01T12:00:00Z"
        assert urls[0].findtext("sm:priority", namespaces=NS) == "1.0"
        assert urls[3].findtext("sm:lastmod", namespaces=NS) == "2023-04-05T00:00:00Z"
        assert urls[3].findtext("sm:changefreq", namespaces=NS) == "monthly"

    def test_escapes_markup(self):
        entries = build_sitemap_entries("https://example.com/?a=1&b=2", [], now=NOW)

        assert "&amp;" in render_sitemap_xml(entries)


class TestRenderRobotsTxt:
    def test_blocks_and_sitemap(self):
        robots = render_robots_txt(SITE_URL)

        for agent in ("*", "Googlebot", "Yeti"):
            assert f"User-agent: {agent}\nAllow: /\nDisallow: /api/" in robots
        assert robots.rstrip().endswith("Sitemap: https://signs.example.com/sitemap.xml")


class TestGenerateSitemap:
    @pytest.mark.asyncio
    async def test_includes_listed_items(self):
        service = MagicMock()
        service.list_all = AsyncMock(return_value=[PortfolioItem(id="abc", title="x")])

        xml = await generate_sitemap(service, SITE_URL, now=NOW)

        assert "https://signs.example.com/portfolio/abc" in xml

    @pytest.mark.asyncio
    async def test_listing_failure_keeps_static_pages(self):
        service = MagicMock()
        service.list_all = AsyncMock(side_effect=PortfolioLoadError())

        xml = await generate_sitemap(service, SITE_URL, now=NOW)

        assert xml.count("<url>") == 3
