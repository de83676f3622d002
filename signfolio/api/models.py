"""Pydantic models for API responses.

Portfolio endpoints return PortfolioItem directly (camelCase aliases);
this module holds the envelope and status models.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Human-readable error message")
    detail: Optional[str] = Field(None, description="Additional detail (debug mode only)")
    path: Optional[str] = Field(None, description="Request path")
    timestamp: datetime


class HealthCheckResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    environment: str
    notion_configured: bool
    missing_settings: list[str] = Field(default_factory=list)
    timestamp: datetime
