"""Emit node: submit parsed cards to the sink."""

from collections.abc import Awaitable, Callable
from typing import Any

from notion2anki_core.emit import emit_flashcards_detailed
from notion2anki_core.schemas.cards import Flashcard
from notion2anki_core.sinks.base import BaseCardSink


def create_emit_node(
    sink: BaseCardSink,
) -> Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]:
    """Create an emit node bound to an import sink."""

    async def emit_node(state: dict[str, Any]) -> dict[str, Any]:
        cards: list[Flashcard] = state.get("cards", [])
        added, failed = await emit_flashcards_detailed(cards, sink)
        return {
            **state,
            "added": added,
            "failed": failed,
            "current_step": "emit",
        }

    return emit_node
