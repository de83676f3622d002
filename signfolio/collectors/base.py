"""Base interface for content source clients.

Content source clients should extend BaseCollector and implement the required methods.
"""

from abc import ABC, abstractmethod


class BaseCollector(ABC):
    """Abstract base class for content source clients.

    Provides a common interface for health checking and cleanup.
    Concrete clients implement the source-specific read methods.
    """

    #: Identifier used in logs and in ContentSourceError messages.
    source: str = "unknown"

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the content source is reachable and configured.

        Returns:
            True if a trivial request succeeds.
        """
        ...

    async def aclose(self) -> None:
        """Release any open connections."""
        return None
