"""
Data Models.

Domain entities shared by the content layer and the HTTP surface:

- PortfolioItem: one showcased project, normalised from a Notion page
- PortfolioQueryOptions: listing options (category, page size, dated only)
- SignType: known category labels, current and legacy

Example:
    from signfolio.models import PortfolioItem

    item = PortfolioItem(id="abc", title="Clinic A", completed_at="2024-03-01")
    item.model_dump(by_alias=True)["completedAt"]  # "2024-03-01"
"""

from signfolio.models.portfolio import (
    PortfolioItem,
    PortfolioQueryOptions,
    SignType,
)

__all__ = [
    "PortfolioItem",
    "PortfolioQueryOptions",
    "SignType",
]
