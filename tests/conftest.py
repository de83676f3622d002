"""
Pytest Configuration and Shared Fixtures.

This module provides common fixtures for all tests:

- notion_env: Notion settings in the environment, settings cache cleared
- page_factory: Builder for raw Notion page records
- sample_page: A fully populated page record
"""

from typing import Any, Optional

import pytest

from signfolio.config.settings import get_settings

API_BASE = "https://api.notion.com/v1"
DATABASE_ID = "0f1e2d3c4b5a69788796a5b4c3d2e1f0"
PAGE_ID = "1a2b3c4d-5e6f-7a8b-9c0d-1e2f3a4b5c6d"
CANONICAL_PAGE_ID = "1a2b3c4d5e6f7a8b9c0d1e2f3a4b5c6d"


@pytest.fixture(autouse=True)
def notion_env(monkeypatch):
    """Configure Notion settings for every test and reset the settings cache."""
    monkeypatch.setenv("NOTION_API_KEY", "secret_test_token")
    monkeypatch.setenv("NOTION_DATABASE_ID", DATABASE_ID)
    monkeypatch.delenv("APP_ENV", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def title_property(text: str) -> dict:
    return {"id": "title", "type": "title", "title": [{"type": "text", "plain_text": text}]}


def rich_text_property(*fragments: str) -> dict:
    return {
        "type": "rich_text",
        "rich_text": [{"type": "text", "plain_text": fragment} for fragment in fragments],
    }


def files_property(*entries: Any) -> dict:
    return {"type": "files", "files": list(entries)}


def hosted_file(url: str, name: str = "image.jpg") -> dict:
    return {"name": name, "type": "file", "file": {"url": url, "expiry_time": "2024-05-01T00:00:00.000Z"}}


@pytest.fixture
def page_factory():
    """Return a builder for raw Notion pages."""

    def make_page(
        page_id: Optional[str] = PAGE_ID,
        title: Optional[str] = "Clinic A",
        completed_at: Optional[str] = None,
        created_time: str = "2024-01-01T00:00:00.000Z",
        **properties: Any,
    ) -> dict:
        props: dict[str, Any] = {}
        if title is not None:
            props["병원명"] = title_property(title)
        if completed_at is not None:
            props["시공완료"] = {"type": "date", "date": {"start": completed_at, "end": None}}
        props.update(properties)
        page: dict[str, Any] = {
            "object": "page",
            "created_time": created_time,
            "properties": props,
        }
        if page_id is not None:
            page["id"] = page_id
        return page

    return make_page


@pytest.fixture
def sample_page(page_factory) -> dict:
    """Return a page with every mapped property populated."""
    return page_factory(
        title="Seoul Dental Clinic",
        completed_at="2024-03-01",
        **{
            "위치": rich_text_property("Seoul ", "Gangnam"),
            "시공종류": {
                "type": "multi_select",
                "multi_select": [{"name": "LED채널"}, {"name": "아크릴"}],
            },
            "간판종류": {"type": "select", "select": {"name": "외부"}},
            "진료과목": {
                "type": "multi_select",
                "multi_select": [{"name": "치과"}, {"name": "교정"}],
            },
            "메인이미지": files_property(
                hosted_file("https://s3.example.com/cover-1.jpg?X-Amz-Expires=3600"),
                {"name": "cover-2", "type": "external", "external": {"url": "https://cdn.example.com/cover-2.jpg"}},
            ),
            "보조이미지": files_property(hosted_file("https://s3.example.com/extra-1.jpg")),
            "설명": rich_text_property("First line", "Second line"),
            "작성일": {"type": "created_time", "created_time": "2024-02-10T09:30:00.000Z"},
            "노출여부": {"type": "checkbox", "checkbox": True},
        },
    )
