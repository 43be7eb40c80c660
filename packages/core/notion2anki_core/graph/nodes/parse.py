"""Parse node: extract flashcards from rendered text."""

from collections.abc import Callable
from typing import Any

from notion2anki_core.graph.config import ImportConfig
from notion2anki_core.parser.flashcards import parse_flashcards
from notion2anki_core.schemas.document import DocumentRef
from notion2anki_core.utils.logging import get_logger

logger = get_logger(__name__)


def create_parse_node(
    config: ImportConfig,
) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Create a parse node for the given import options."""

    def parse_node(state: dict[str, Any]) -> dict[str, Any]:
        document: DocumentRef | None = state.get("document")
        content: str = state.get("content", "")

        cards = parse_flashcards(content, fence_only=config.fence_only)
        source_id = document.id if document else None
        cards = [
            card.model_copy(
                update={"tags": [*config.tags, *card.tags], "source_id": source_id}
            )
            for card in cards
        ]

        logger.info(f"Parsed {len(cards)} flashcards from {source_id}")
        return {
            **state,
            "cards": cards,
            "current_step": "parse",
        }

    return parse_node
