"""Portfolio read service.

Orchestrates Notion queries, page normalization, the empty-result fallback,
display ordering and trimming. This is the only read API the HTTP surface
uses; it never returns partially built items.

Display order:
    Items with a completion date come first. Within each group items are
    ordered newest first by completion date, falling back to the page
    creation time, then to epoch zero when neither parses.
"""

from datetime import datetime, timezone
from typing import Iterable, Optional, Union

import structlog

from signfolio.collectors.notion.client import NotionClient
from signfolio.collectors.notion.normalizer import (
    normalize_page,
    normalize_pages,
    normalize_to_32hex,
    to_hyphenated_id,
)
from signfolio.collectors.notion.query import build_fallback_query, build_query_options
from signfolio.core.exceptions import PortfolioLoadError, SignfolioError
from signfolio.models.portfolio import PortfolioItem, PortfolioQueryOptions, SignType

logger = structlog.get_logger(__name__)


# =============================================================================
# Ordering
# =============================================================================


def parse_timestamp(value: Optional[str]) -> Optional[float]:
    """Parse an ISO date or datetime string to epoch seconds.

    Date-only and naive values are read as UTC. Returns None when unparseable.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def display_sort_key(item: PortfolioItem) -> tuple[int, float]:
    """Sort key for display order; use with ascending sort."""
    timestamp = parse_timestamp(item.completed_at)
    if timestamp is None:
        timestamp = parse_timestamp(item.created_time)
    if timestamp is None:
        timestamp = 0.0
    return (0 if item.completed_at else 1, -timestamp)


def sort_for_display(items: Iterable[PortfolioItem]) -> list[PortfolioItem]:
    """Return items in display order: dated first, newest first within each group."""
    return sorted(items, key=display_sort_key)


# =============================================================================
# Portfolio Service
# =============================================================================


class PortfolioService:
    """Read API over the Notion portfolio database.

    Example:
        async with NotionClient() as client:
            service = PortfolioService(client)
            recent = await service.list_all(PortfolioQueryOptions(page_size=6))
            item = await service.get_by_id(recent[0].id)
    """

    def __init__(self, client: NotionClient):
        self._client = client

    async def _query(self, body: dict) -> list[PortfolioItem]:
        data = await self._client.query_database(body)
        return normalize_pages(data.get("results") if isinstance(data, dict) else None)

    async def list_all(
        self,
        options: Optional[PortfolioQueryOptions] = None,
    ) -> list[PortfolioItem]:
        """List visible portfolio items in display order.

        When the visibility-filtered query returns nothing and no category
        was requested, the database is queried once more without any filter,
        for databases that do not use the visibility checkbox.

        Args:
            options: Category filter, page size and dated-only flag.

        Returns:
            Items in display order, trimmed to options.page_size if set.

        Raises:
            PortfolioLoadError: If any query fails.
        """
        options = options or PortfolioQueryOptions()

        try:
            items = await self._query(build_query_options(options))
            # TODO: confirm with the site owner whether the unfiltered retry
            # should also apply to category listings
            if not items and not options.filter_type:
                logger.info("portfolio_visibility_fallback")
                items = await self._query(build_fallback_query(options))
        except SignfolioError as e:
            logger.error("portfolio_list_failed", error=str(e), error_type=type(e).__name__)
            raise PortfolioLoadError(details={"cause": type(e).__name__}) from e

        if options.only_with_completed_at:
            items = [item for item in items if item.completed_at]

        items = sort_for_display(items)

        if options.page_size:
            return items[: options.page_size]
        return items

    async def get_by_id(self, page_id: str) -> Optional[PortfolioItem]:
        """Get one portfolio item by page id.

        The id is reduced to its canonical 32-hex form first; malformed ids
        return None without any request. If retrieving the page directly
        fails or yields no item, the full listing is scanned instead.

        Args:
            page_id: Page id in any hyphenation, or a slug ending in one.

        Returns:
            The item, or None if no page matches.

        Raises:
            PortfolioLoadError: If the fallback listing fails.
        """
        canonical = normalize_to_32hex(page_id)
        if canonical is None:
            return None

        try:
            page = await self._client.retrieve_page(to_hyphenated_id(canonical))
        except SignfolioError as e:
            logger.warning("portfolio_retrieve_failed", page_id=canonical, error=str(e))
        else:
            item = normalize_page(page)
            if item is not None:
                return item

        for item in await self.list_all():
            if normalize_to_32hex(item.id) == canonical:
                return item
        return None

    async def filter_by_category(
        self,
        category: Union[SignType, str],
    ) -> list[PortfolioItem]:
        """List items of one category; SignType.ALL lists every visible item."""
        if isinstance(category, SignType):
            category = category.value
        return await self.list_all(PortfolioQueryOptions(filter_type=category))


# =============================================================================
# One-shot helpers
# =============================================================================


async def list_all(options: Optional[PortfolioQueryOptions] = None) -> list[PortfolioItem]:
    """List items with a NotionClient built from settings."""
    async with NotionClient() as client:
        return await PortfolioService(client).list_all(options)


async def get_by_id(page_id: str) -> Optional[PortfolioItem]:
    """Get one item with a NotionClient built from settings."""
    async with NotionClient() as client:
        return await PortfolioService(client).get_by_id(page_id)


async def filter_by_category(category: Union[SignType, str]) -> list[PortfolioItem]:
    """List one category with a NotionClient built from settings."""
    async with NotionClient() as client:
        return await PortfolioService(client).filter_by_category(category)
