"""AnkiConnect import sink."""

from collections.abc import Sequence
from typing import Any

import httpx

from notion2anki_core.exporters.apkg import card_field_html
from notion2anki_core.schemas.cards import AddCardResult, Flashcard
from notion2anki_core.sinks.base import BaseCardSink
from notion2anki_core.utils.logging import get_logger
from notion2anki_core.utils.retry import (
    RateLimitError,
    raise_for_rate_limit,
    with_retry,
)

logger = get_logger(__name__)

ANKI_CONNECT_URL = "http://localhost:8765"
ANKI_CONNECT_VERSION = 6
DEFAULT_TIMEOUT = 10.0


class AnkiConnectSink(BaseCardSink):
    """Add notes to a running Anki through the AnkiConnect add-on."""

    def __init__(
        self,
        url: str = ANKI_CONNECT_URL,
        deck_name: str = "Notion Import",
        model_name: str = "Basic",
        tags: Sequence[str] = (),
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 1,
        retry_wait: float = 1.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the sink.

        Args:
            url: AnkiConnect endpoint
            deck_name: Target deck, passed through to Anki
            model_name: Target note type, passed through to Anki
            tags: Tags added to every note besides the card's own tags
            timeout: Request timeout in seconds
            max_retries: Maximum attempts for transient failures
            retry_wait: Minimum wait between attempts in seconds
            client: Optional preconfigured HTTP client
        """
        self.url = url
        self.deck_name = deck_name
        self.model_name = model_name
        self.tags = list(tags)
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_wait = retry_wait
        self._client = client

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

    async def discard(self) -> None:
        await self.close()

    def build_payload(self, card: Flashcard) -> dict[str, Any]:
        """Build the ``addNote`` request body for a card."""
        return {
            "action": "addNote",
            "version": ANKI_CONNECT_VERSION,
            "params": {
                "note": {
                    "deckName": self.deck_name,
                    "modelName": self.model_name,
                    "fields": {
                        "Front": card_field_html(card.question),
                        "Back": card_field_html(card.answer),
                    },
                    "tags": [*self.tags, *card.tags],
                }
            },
        }

    async def add_card(self, card: Flashcard) -> AddCardResult:
        payload = self.build_payload(card)

        async def _make_request() -> Any:
            response = await self.client.post(self.url, json=payload)
            raise_for_rate_limit(response)
            response.raise_for_status()
            return response.json()

        try:
            data = await with_retry(
                _make_request,
                max_attempts=self.max_retries,
                min_wait=self.retry_wait,
                operation_name="anki_add_note",
            )
        except (httpx.HTTPError, RateLimitError, ValueError) as e:
            return AddCardResult.failed(str(e) or type(e).__name__)

        if not isinstance(data, dict):
            return AddCardResult.failed(f"Unexpected response: {data!r}")
        if data.get("error"):
            return AddCardResult.failed(str(data["error"]))

        note_id = data.get("result")
        return AddCardResult.ok(note_id if isinstance(note_id, int) else None)
