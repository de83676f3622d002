"""Portfolio endpoints for the signfolio API.

Read-only access to the normalised portfolio items, serialised with
camelCase field names.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from signfolio.api.dependencies import get_portfolio_service
from signfolio.api.models import ErrorResponse
from signfolio.models.portfolio import PortfolioItem, PortfolioQueryOptions
from signfolio.services.portfolio import PortfolioService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/portfolio", tags=["Portfolio"])


@router.get(
    "",
    response_model=list[PortfolioItem],
    summary="List portfolio items",
    description="Visible items in display order: dated first, newest first.",
    responses={
        502: {"model": ErrorResponse, "description": "Content source unavailable"},
    },
)
async def list_portfolio(
    category: Optional[str] = Query(
        None, alias="type", description="Category filter; '전체' lists every category"
    ),
    page_size: Optional[int] = Query(None, ge=1, le=100),
    only_completed: bool = Query(False, description="Only items with a completion date"),
    service: PortfolioService = Depends(get_portfolio_service),
) -> list[PortfolioItem]:
    options = PortfolioQueryOptions(
        filter_type=category,
        page_size=page_size,
        only_with_completed_at=only_completed,
    )
    return await service.list_all(options)


@router.get(
    "/{item_id}",
    response_model=PortfolioItem,
    summary="Get a portfolio item",
    responses={
        404: {"model": ErrorResponse, "description": "No item with this id"},
        502: {"model": ErrorResponse, "description": "Content source unavailable"},
    },
)
async def get_portfolio_item(
    item_id: str,
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioItem:
    """
    Get one item by Notion page id.

    Hyphenated and bare ids are both accepted.
    """
    item = await service.get_by_id(item_id)
    if item is None:
        logger.info("portfolio_item_not_found", item_id=item_id)
        raise HTTPException(status_code=404, detail=f"Portfolio item {item_id} not found")
    return item
