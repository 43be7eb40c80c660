"""Notion document source."""

import json
from typing import Any

import httpx

from notion2anki_core.schemas.blocks import ContentBlock
from notion2anki_core.schemas.document import DocumentRef
from notion2anki_core.sources.base import BaseDocumentSource, DocumentSourceError
from notion2anki_core.utils.logging import get_logger
from notion2anki_core.utils.retry import (
    RateLimitError,
    raise_for_rate_limit,
    with_retry,
)

logger = get_logger(__name__)

NOTION_API_URL = "https://api.notion.com"
NOTION_VERSION = "2022-06-28"
DEFAULT_TIMEOUT = 30.0
PAGE_SIZE = 100


class NotionSource(BaseDocumentSource):
    """Fetch ready pages and their blocks from a Notion database."""

    def __init__(
        self,
        api_key: str,
        database_id: str,
        status_property: str = "Status",
        status_value: str = "Ready to Import",
        notion_version: str = NOTION_VERSION,
        base_url: str = NOTION_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 3,
        retry_wait: float = 1.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the Notion source.

        Args:
            api_key: Notion integration token
            database_id: Database holding the flashcard pages
            status_property: Select property used to mark pages as ready
            status_value: Select value that marks a page as ready
            notion_version: Value of the Notion-Version header
            base_url: Notion API base URL
            timeout: Request timeout in seconds
            max_retries: Maximum attempts for transient failures
            retry_wait: Minimum wait between attempts in seconds
            client: Optional preconfigured HTTP client
        """
        self.database_id = database_id
        self.status_property = status_property
        self.status_value = status_value
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_wait = retry_wait
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Notion-Version": notion_version,
        }
        self._client = client
        logger.info(
            f"Initialized Notion source (database={database_id}, "
            f"filter={status_property}={status_value!r})"
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        operation_name: str,
        **kwargs: Any,
    ) -> Any:
        """Send a request with retries and return the decoded JSON body.

        A successful response whose body is not JSON gives ``None``.
        """

        async def _make_request() -> Any:
            response = await self.client.request(
                method,
                f"{self.base_url}{path}",
                headers=self._headers,
                **kwargs,
            )
            raise_for_rate_limit(response)
            response.raise_for_status()
            try:
                return response.json()
            except json.JSONDecodeError:
                logger.warning(f"Non-JSON body from {operation_name}")
                return None

        return await with_retry(
            _make_request,
            max_attempts=self.max_retries,
            min_wait=self.retry_wait,
            operation_name=operation_name,
        )

    async def _paginate(
        self,
        method: str,
        path: str,
        operation_name: str,
        body: dict[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Collect ``results`` across all pages of a paginated endpoint.

        A payload without a ``results`` list ends pagination and contributes
        nothing. Non-object entries are skipped.
        """
        results: list[dict[str, Any]] = []
        cursor: str | None = None

        while True:
            if method == "POST":
                payload = dict(body or {})
                payload["page_size"] = PAGE_SIZE
                if cursor:
                    payload["start_cursor"] = cursor
                data = await self._request(method, path, operation_name, json=payload)
            else:
                params: dict[str, Any] = {"page_size": PAGE_SIZE}
                if cursor:
                    params["start_cursor"] = cursor
                data = await self._request(method, path, operation_name, params=params)

            if not isinstance(data, dict) or not isinstance(data.get("results"), list):
                logger.warning(f"Unexpected payload from {operation_name}, ignoring it")
                return results

            for item in data["results"]:
                if isinstance(item, dict):
                    results.append(item)
                else:
                    logger.debug(f"Skipping non-object entry in {operation_name}")

            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                return results

    async def list_ready_documents(self) -> list[DocumentRef]:
        """Query the database for pages marked ready to import."""
        body = {
            "filter": {
                "property": self.status_property,
                "select": {"equals": self.status_value},
            }
        }
        try:
            pages = await self._paginate(
                "POST",
                f"/v1/databases/{self.database_id}/query",
                "notion_query_database",
                body=body,
            )
        except (httpx.HTTPError, RateLimitError, ValueError) as e:
            raise DocumentSourceError(f"Failed to query database: {e}") from e

        documents = [
            DocumentRef.from_notion(page)
            for page in pages
            if isinstance(page.get("id"), str)
        ]
        logger.info(f"Found {len(documents)} pages ready to import")
        return documents

    async def get_blocks(self, document_id: str) -> list[ContentBlock]:
        """Fetch the top-level blocks of a page."""
        try:
            raw_blocks = await self._paginate(
                "GET",
                f"/v1/blocks/{document_id}/children",
                "notion_get_blocks",
            )
        except (httpx.HTTPError, RateLimitError, ValueError) as e:
            raise DocumentSourceError(
                f"Failed to fetch blocks for {document_id}: {e}",
                document_id=document_id,
            ) from e

        blocks = [ContentBlock.from_notion(raw) for raw in raw_blocks]
        logger.debug(f"Fetched {len(blocks)} blocks for {document_id}")
        return blocks
