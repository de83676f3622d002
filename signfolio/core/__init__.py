"""
Core infrastructure modules for signfolio.

Provides common utilities used across the application:
- exceptions: Standardized exception hierarchy
"""

from signfolio.core.exceptions import (
    SignfolioError,
    RetryableError,
    PermanentError,
    ConfigurationError,
    ContentSourceError,
    ContentSourceRateLimitError,
    ContentSourceTimeoutError,
    ContentSourceAuthError,
    ContentSourceNotFoundError,
    PortfolioLoadError,
)

__all__ = [
    "SignfolioError",
    "RetryableError",
    "PermanentError",
    "ConfigurationError",
    "ContentSourceError",
    "ContentSourceRateLimitError",
    "ContentSourceTimeoutError",
    "ContentSourceAuthError",
    "ContentSourceNotFoundError",
    "PortfolioLoadError",
]
