"""Pydantic models for signfolio portfolio entities."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SignType(str, Enum):
    """Category labels used by the current and the legacy category fields."""
    ALL = "전체"
    INTERIOR = "내부"
    EXTERIOR = "외부"
    INTERIOR_EXTERIOR = "내부/외부 통합"
    DRAFT = "시안"
    BANNER = "현수막"
    LED_CHANNEL = "LED채널"
    ACRYLIC = "아크릴"
    NEON = "네온"
    COMPOSITE = "복합"
    OTHER = "기타"


class PortfolioItem(BaseModel):
    """One showcased project, normalised from a Notion page.

    Instances are immutable snapshots built fresh on every fetch. Serialise
    with ``model_dump(by_alias=True)`` to get the camelCase wire names.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str = Field("", description="Notion page ID")
    title: str = Field(..., min_length=1, description="Clinic or project name")
    location: Optional[str] = None
    type: Optional[str] = Field(
        None, description="Category labels joined with ' · '"
    )
    completed_at: Optional[str] = Field(
        None, description="Completion date (YYYY-MM-DD)"
    )
    departments: Optional[list[str]] = None
    cover_image_url: Optional[str] = None
    cover_image_urls: list[str] = Field(default_factory=list)
    additional_image_urls: list[str] = Field(default_factory=list)
    description: Optional[str] = None
    created_time: Optional[str] = Field(
        None, description="Page creation timestamp, secondary sort key"
    )


class PortfolioQueryOptions(BaseModel):
    """Options accepted by the portfolio listing."""

    model_config = ConfigDict(extra="forbid")

    filter_type: Optional[str] = Field(
        None, description="Category to filter on; '전체' means every category"
    )
    page_size: Optional[int] = Field(
        None, ge=1, description="Maximum number of items returned after sorting"
    )
    only_with_completed_at: bool = Field(
        default=False, description="Drop items without a completion date"
    )
