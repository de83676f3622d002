"""
Content Source Integrations.

- base: BaseCollector interface shared by content source clients
- notion: Notion REST client, query builders, and page normalizer

Example:
    from signfolio.collectors import NotionClient, normalize_pages

    async with NotionClient() as client:
        data = await client.query_database({"page_size": 50})
        items = normalize_pages(data.get("results"))
"""

from signfolio.collectors.base import BaseCollector
from signfolio.collectors.notion import NotionClient, normalize_page, normalize_pages

__all__ = [
    "BaseCollector",
    "NotionClient",
    "normalize_page",
    "normalize_pages",
]
