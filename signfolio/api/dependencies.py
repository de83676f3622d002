"""FastAPI dependency injection providers.

This module provides dependency functions for injecting services into route handlers.
"""

from typing import Optional

from signfolio.collectors.notion.client import NotionClient
from signfolio.services.portfolio import PortfolioService

# Global instance for singleton pattern
_notion_client: Optional[NotionClient] = None


def get_notion_client() -> NotionClient:
    """
    Get the shared NotionClient.

    Uses a singleton pattern so requests reuse one HTTP connection pool.
    """
    global _notion_client

    if _notion_client is None:
        _notion_client = NotionClient()

    return _notion_client


def get_portfolio_service() -> PortfolioService:
    """Get a PortfolioService bound to the shared client."""
    return PortfolioService(get_notion_client())


async def reset_dependencies() -> None:
    """
    Close and drop the shared client.

    Called on application shutdown and between tests.
    """
    global _notion_client

    if _notion_client is not None:
        await _notion_client.aclose()
    _notion_client = None
