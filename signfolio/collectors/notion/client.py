"""Notion REST API client.

Provides async methods to query the portfolio database and retrieve single
pages over the Notion REST API, with a fixed per-request timeout.

API Reference: https://developers.notion.com/reference/intro
"""

import asyncio
from typing import Any, Optional

import httpx
import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from signfolio.collectors.base import BaseCollector
from signfolio.config.settings import get_settings
from signfolio.core.exceptions import (
    ConfigurationError,
    ContentSourceAuthError,
    ContentSourceError,
    ContentSourceNotFoundError,
    ContentSourceRateLimitError,
    ContentSourceTimeoutError,
)

logger = structlog.get_logger(__name__)


class NotionClient(BaseCollector):
    """Async client for the Notion REST API.

    Missing credentials do not fail construction; each request raises
    ConfigurationError instead, so an unconfigured deployment still starts.

    Example:
        async with NotionClient() as client:
            data = await client.query_database({"page_size": 10})
            page = await client.retrieve_page(data["results"][0]["id"])
    """

    source = "notion"

    def __init__(
        self,
        api_key: Optional[str] = None,
        database_id: Optional[str] = None,
        *,
        api_base: Optional[str] = None,
        notion_version: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_key: Notion integration token. If not provided, loads from settings.
            database_id: Portfolio database ID. If not provided, loads from settings.
            api_base: REST base URL.
            notion_version: Value of the Notion-Version header.
            timeout: Deadline for each whole request in seconds (default 10).
            transport: Custom httpx transport, mainly for tests.
        """
        settings = get_settings()
        self._api_key = api_key or (
            settings.notion_api_key.get_secret_value()
            if settings.notion_api_key
            else None
        )
        self._database_id = database_id or settings.notion_database_id
        self._api_base = (api_base or settings.notion_api_base).rstrip("/")
        self._notion_version = notion_version or settings.notion_version
        self._timeout = timeout if timeout is not None else settings.notion_timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def database_id(self) -> Optional[str]:
        return self._database_id

    async def __aenter__(self) -> "NotionClient":
        """Enter async context manager."""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.aclose()

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            headers = {
                "Notion-Version": self._notion_version,
                "Content-Type": "application/json",
            }
            if self._api_key:
                headers["Authorization"] = f"Bearer {self._api_key}"
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers=headers,
                transport=self._transport,
            )
        return self._client

    def _require_configuration(self, *, database: bool) -> None:
        if not self._api_key:
            raise ConfigurationError("Notion API key not configured", config_key="NOTION_API_KEY")
        if database and not self._database_id:
            raise ConfigurationError(
                "Notion database ID not configured", config_key="NOTION_DATABASE_ID"
            )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text[:200] or "Unknown error"
        if isinstance(data, dict):
            return str(data.get("message") or data.get("code") or "Unknown error")
        return "Unknown error"

    @retry(
        retry=retry_if_exception_type(ContentSourceRateLimitError),
        stop=stop_after_attempt(2),
        wait=wait_fixed(1),
        reraise=True,
        before_sleep=lambda retry_state: logger.warning(
            "notion_rate_limit_retry",
            attempt=retry_state.attempt_number,
        ),
    )
    async def _request(
        self,
        method: str,
        endpoint: str,
        *,
        json_data: Optional[dict] = None,
    ) -> dict[str, Any]:
        """Make an API request and map failures onto ContentSourceError.

        Args:
            method: HTTP method (GET, POST).
            endpoint: API endpoint path relative to the base URL.
            json_data: JSON body for POST requests.

        Returns:
            Parsed JSON response.

        Raises:
            ContentSourceRateLimitError: When rate limited twice in a row.
            ContentSourceTimeoutError: When the request exceeds the timeout.
            ContentSourceAuthError: On authentication or permission failure.
            ContentSourceNotFoundError: When the database or page is not found.
            ContentSourceError: On other API or transport errors.
        """
        client = await self._ensure_client()
        url = f"{self._api_base}/{endpoint}"

        try:
            # httpx timeouts apply per phase; this bounds connect, send and body read together
            async with asyncio.timeout(self._timeout):
                if method.upper() == "GET":
                    response = await client.get(url)
                else:
                    response = await client.post(url, json=json_data or {})
        except (httpx.TimeoutException, TimeoutError) as e:
            logger.error("notion_timeout", endpoint=endpoint, timeout=self._timeout)
            raise ContentSourceTimeoutError(
                self.source,
                f"Request timed out after {self._timeout}s",
                {"endpoint": endpoint},
            ) from e
        except httpx.RequestError as e:
            logger.error("notion_request_error", endpoint=endpoint, error=str(e))
            raise ContentSourceError(
                self.source,
                f"Request failed: {e}",
                {"endpoint": endpoint, "original_error": str(e)},
            ) from e

        status = response.status_code
        if status < 400:
            if not response.content:
                return {}
            try:
                return response.json()
            except ValueError as e:
                raise ContentSourceError(
                    self.source,
                    "Response is not valid JSON",
                    {"endpoint": endpoint, "status_code": status},
                ) from e

        details = {"endpoint": endpoint, "status_code": status}
        message = self._error_message(response)
        if status == 429:
            logger.warning("notion_rate_limited", endpoint=endpoint)
            raise ContentSourceRateLimitError(self.source, "Rate limited by Notion API", details)
        if status in (401, 403):
            raise ContentSourceAuthError(self.source, f"Not authorized: {message}", details)
        if status == 404:
            raise ContentSourceNotFoundError(self.source, f"Not found: {message}", details)

        logger.error(
            "notion_api_error",
            status_code=status,
            error=message,
            endpoint=endpoint,
        )
        raise ContentSourceError(self.source, f"API error {status}: {message}", details)

    # -------------------------------------------------------------------------
    # Public API Methods
    # -------------------------------------------------------------------------

    async def query_database(self, body: dict[str, Any]) -> dict[str, Any]:
        """Query the portfolio database.

        Args:
            body: Filter, sorts and page_size as built by the query module.

        Returns:
            The raw query response; pages are under "results".
        """
        self._require_configuration(database=True)
        return await self._request(
            "POST",
            f"databases/{self._database_id}/query",
            json_data=body,
        )

    async def retrieve_page(self, page_id: str) -> dict[str, Any]:
        """Retrieve a single page by id.

        Args:
            page_id: Page id, hyphenated or not.

        Returns:
            The raw page object.
        """
        self._require_configuration(database=False)
        return await self._request("GET", f"pages/{page_id}")

    async def health_check(self) -> bool:
        """Run a one-row query to check credentials and connectivity."""
        try:
            await self.query_database({"page_size": 1})
        except (ConfigurationError, ContentSourceError) as e:
            logger.warning("notion_health_check_failed", error=str(e))
            return False
        return True
