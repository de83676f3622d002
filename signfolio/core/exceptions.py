"""
Core exception hierarchy for signfolio.

Provides standardized exception types with categorization for retry logic.
The content layer raises these instead of generic Exception.
"""

from typing import Any, Optional


# =============================================================================
# Base Exceptions
# =============================================================================


class SignfolioError(Exception):
    """Base exception for all signfolio errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class RetryableError(SignfolioError):
    """
    Transient errors that may succeed on a later attempt.

    Examples: Rate limits, timeouts.
    """

    pass


class PermanentError(SignfolioError):
    """
    Errors that won't be fixed by retrying.

    Examples: Missing configuration, authentication failures, missing pages.
    """

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PermanentError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details)


# =============================================================================
# Content Source Errors
# =============================================================================


class ContentSourceError(SignfolioError):
    """Base exception for content source (Notion API) errors."""

    def __init__(
        self,
        source: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.source = source
        super().__init__(f"[{source}] {message}", details)

    @property
    def status_code(self) -> Optional[int]:
        return self.details.get("status_code")


class ContentSourceRateLimitError(ContentSourceError, RetryableError):
    """Raised when the content source rate limits requests."""

    pass


class ContentSourceTimeoutError(ContentSourceError, RetryableError):
    """Raised when a content source request exceeds its timeout."""

    pass


class ContentSourceAuthError(ContentSourceError, PermanentError):
    """Raised when the content source rejects the credential."""

    pass


class ContentSourceNotFoundError(ContentSourceError, PermanentError):
    """Raised when the requested database or page does not exist."""

    pass


# =============================================================================
# Portfolio Errors
# =============================================================================


class PortfolioLoadError(SignfolioError):
    """Raised when the portfolio listing cannot be loaded."""

    def __init__(
        self,
        message: str = "Failed to load portfolio data",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, details)
