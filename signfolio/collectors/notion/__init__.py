"""Notion content source module.

Provides NotionClient for the REST API, the query builders, and the page
normalizer functions.
"""

from signfolio.collectors.notion.client import NotionClient
from signfolio.collectors.notion.normalizer import (
    extract_file_url,
    extract_file_urls,
    extract_first_file_url,
    normalize_page,
    normalize_pages,
    normalize_to_32hex,
    to_hyphenated_id,
)
from signfolio.collectors.notion.query import build_fallback_query, build_query_options

__all__ = [
    "NotionClient",
    "build_fallback_query",
    "build_query_options",
    "extract_file_url",
    "extract_file_urls",
    "extract_first_file_url",
    "normalize_page",
    "normalize_pages",
    "normalize_to_32hex",
    "to_hyphenated_id",
]
