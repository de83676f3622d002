"""Unit tests for the HTTP endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from signfolio.api.dependencies import get_notion_client, get_portfolio_service
from signfolio.api.main import app
from signfolio.config.settings import get_settings
from signfolio.core.exceptions import ContentSourceTimeoutError
from signfolio.services.portfolio import PortfolioService
from tests.conftest import PAGE_ID


def _results(*pages) -> dict:
    return {"object": "list", "results": list(pages), "has_more": False}


@pytest.fixture
def notion():
    """Mocked NotionClient shared by the overridden dependencies."""
    mock = MagicMock()
    mock.query_database = AsyncMock(return_value=_results())
    mock.retrieve_page = AsyncMock()
    mock.health_check = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def client(notion):
    app.dependency_overrides[get_portfolio_service] = lambda: PortfolioService(notion)
    app.dependency_overrides[get_notion_client] = lambda: notion
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestPortfolioEndpoints:
    def test_list_uses_camel_case(self, client, notion, sample_page):
        notion.query_database.return_value = _results(sample_page)

        response = client.get("/api/v1/portfolio")

        assert response.status_code == 200
        body = response.json()
        assert body[0]["id"] == PAGE_ID
        assert body[0]["completedAt"] == "2024-03-01"
        assert body[0]["coverImageUrls"]
        assert "completed_at" not in body[0]

    def test_list_passes_query_options(self, client, notion, page_factory):
        notion.query_database.return_value = _results(
            page_factory(page_id="a", title="Dated", completed_at="2024-01-01"),
            page_factory(page_id="b", title="Undated"),
        )

        response = client.get(
            "/api/v1/portfolio",
            params={"type": "LED채널", "page_size": 5, "only_completed": "true"},
        )

        assert [item["title"] for item in response.json()] == ["Dated"]
        body = notion.query_database.await_args.args[0]
        assert body["filter"]["and"][1]["or"][0]["multi_select"] == {"contains": "LED채널"}

    def test_page_size_validated(self, client):
        assert client.get("/api/v1/portfolio", params={"page_size": 0}).status_code == 422

    def test_load_failure_is_bad_gateway(self, client, notion):
        notion.query_database.side_effect = ContentSourceTimeoutError("notion", "timed out")

        response = client.get("/api/v1/portfolio")

        assert response.status_code == 502
        assert response.json()["error"] == "portfolio_unavailable"
        assert response.json()["path"] == "/api/v1/portfolio"

    def test_detail(self, client, notion, page_factory):
        notion.retrieve_page.return_value = page_factory(title="Detail Clinic")

        response = client.get(f"/api/v1/portfolio/{PAGE_ID.replace('-', '')}")

        assert response.status_code == 200
        assert response.json()["title"] == "Detail Clinic"

    def test_detail_not_found(self, client):
        response = client.get("/api/v1/portfolio/not-a-page-id")

        assert response.status_code == 404


class TestHealthEndpoints:
    def test_healthy(self, client):
        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["notion_configured"] is True
        assert body["missing_settings"] == []

    def test_degraded_without_credentials(self, client, monkeypatch):
        monkeypatch.delenv("NOTION_API_KEY")
        get_settings.cache_clear()

        body = client.get("/health").json()

        assert body["status"] == "degraded"
        assert body["missing_settings"] == ["NOTION_API_KEY"]

    def test_live(self, client):
        assert client.get("/health/live").json()["status"] == "alive"

    def test_ready(self, client, notion):
        assert client.get("/health/ready").status_code == 200

        notion.health_check.return_value = False
        assert client.get("/health/ready").status_code == 503


class TestSeoEndpoints:
    def test_robots(self, client):
        response = client.get("/robots.txt")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "Disallow: /api/" in response.text
        assert "Sitemap: https://theopeningsign.vercel.app/sitemap.xml" in response.text

    def test_sitemap(self, client, notion, page_factory):
        notion.query_database.return_value = _results(page_factory(title="Clinic"))

        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        assert f"https://theopeningsign.vercel.app/portfolio/{PAGE_ID}" in response.text

    def test_sitemap_survives_listing_failure(self, client, notion):
        notion.query_database.side_effect = ContentSourceTimeoutError("notion", "timed out")

        response = client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response.text.count("<url>") == 3
