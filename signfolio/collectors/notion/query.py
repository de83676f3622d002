"""Query bodies for the Notion database query endpoint.

Notion cannot sort by "completion date descending, undated last", so the
queries ask for a safe creation-time order and a generous page; the
portfolio service re-sorts and trims in memory.
"""

from typing import Any, Optional

from signfolio.collectors.notion.normalizer import (
    CATEGORY_FIELD,
    LEGACY_CATEGORY_FIELD,
    VISIBILITY_FIELD,
)
from signfolio.models.portfolio import PortfolioQueryOptions, SignType

DEFAULT_PAGE_SIZE = 20
MIN_QUERY_PAGE_SIZE = 50
MAX_QUERY_PAGE_SIZE = 100  # Notion's limit per request


def created_time_descending() -> list[dict[str, str]]:
    return [{"timestamp": "created_time", "direction": "descending"}]


def category_filter(category: str) -> dict[str, Any]:
    """Match a category on either the current or the legacy field."""
    return {
        "or": [
            {"property": CATEGORY_FIELD, "multi_select": {"contains": category}},
            {"property": LEGACY_CATEGORY_FIELD, "select": {"equals": category}},
        ]
    }


def build_query_options(options: Optional[PortfolioQueryOptions] = None) -> dict[str, Any]:
    """Build the primary listing query.

    Args:
        options: Listing options. A filter_type of '전체' adds no category filter.

    Returns:
        JSON body for POST databases/{id}/query.
    """
    options = options or PortfolioQueryOptions()

    conditions: list[dict[str, Any]] = [
        {"property": VISIBILITY_FIELD, "checkbox": {"equals": True}},
    ]
    if options.filter_type and options.filter_type != SignType.ALL.value:
        conditions.append(category_filter(options.filter_type))

    page_size = max(options.page_size or DEFAULT_PAGE_SIZE, MIN_QUERY_PAGE_SIZE)

    return {
        "filter": {"and": conditions},
        "sorts": created_time_descending(),
        "page_size": min(page_size, MAX_QUERY_PAGE_SIZE),
    }


def build_fallback_query(options: Optional[PortfolioQueryOptions] = None) -> dict[str, Any]:
    """Build the unfiltered query used when the visibility filter matches nothing."""
    body: dict[str, Any] = {"sorts": created_time_descending()}
    if options and options.page_size:
        body["page_size"] = min(options.page_size, MAX_QUERY_PAGE_SIZE)
    return body
