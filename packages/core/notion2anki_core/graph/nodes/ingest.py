"""Ingest node: fetch the blocks of one document."""

from collections.abc import Awaitable, Callable
from typing import Any

from notion2anki_core.schemas.document import DocumentRef
from notion2anki_core.sources.base import BaseDocumentSource, DocumentSourceError
from notion2anki_core.utils.logging import get_logger

logger = get_logger(__name__)


def create_ingest_node(
    source: BaseDocumentSource,
) -> Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]:
    """Create an ingest node bound to a document source.

    Args:
        source: Source to fetch blocks from

    Returns:
        Node function
    """

    async def ingest_node(state: dict[str, Any]) -> dict[str, Any]:
        """Fetch blocks for the document in state.

        Args:
            state: Pipeline state with document

        Returns:
            Updated state with blocks, or an error when the fetch failed
        """
        document: DocumentRef | None = state.get("document")
        if not document:
            return {
                **state,
                "errors": state.get("errors", []) + ["No document to ingest"],
                "current_step": "ingest",
            }

        logger.info(f"Fetching blocks for {document.title or document.id}")
        try:
            blocks = await source.get_blocks(document.id)
        except DocumentSourceError as e:
            error_msg = f"Failed to fetch {document.id}: {e}"
            logger.error(error_msg)
            return {
                **state,
                "errors": state.get("errors", []) + [error_msg],
                "current_step": "ingest",
            }

        return {
            **state,
            "blocks": blocks,
            "current_step": "ingest",
            "errors": state.get("errors", []),
        }

    return ingest_node
