"""Submit finished flashcards to an import sink."""

from collections.abc import Iterable

from notion2anki_core.schemas.cards import Flashcard
from notion2anki_core.sinks.base import BaseCardSink
from notion2anki_core.utils.logging import get_logger

logger = get_logger(__name__)


async def emit_flashcards_detailed(
    cards: Iterable[Flashcard],
    sink: BaseCardSink,
) -> tuple[int, int]:
    """Submit cards one at a time, in order.

    A rejected card, or one whose submission raises, is logged and counted;
    submission continues with the next card.

    Args:
        cards: Finished flashcards
        sink: Import sink

    Returns:
        Tuple of (added, failed) counts
    """
    added = 0
    failed = 0
    for card in cards:
        card = card.normalized()
        try:
            result = await sink.add_card(card)
        except Exception as e:
            failed += 1
            logger.warning(f"Sink raised while adding card {card.question!r}: {e}")
            continue
        if result.success:
            added += 1
            logger.info(f"Added card: {card.question}")
        else:
            failed += 1
            logger.warning(f"Failed to add card {card.question!r}: {result.error}")
    return added, failed


async def emit_flashcards(cards: Iterable[Flashcard], sink: BaseCardSink) -> int:
    """Submit cards to the sink and return how many were accepted."""
    added, _ = await emit_flashcards_detailed(cards, sink)
    return added
