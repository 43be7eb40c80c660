"""Base import sink interface."""

from abc import ABC, abstractmethod

from notion2anki_core.schemas.cards import AddCardResult, Flashcard


class SinkError(Exception):
    """Error when a sink cannot finish its work (not a single card failure)."""

    pass


class BaseCardSink(ABC):
    """Abstract base class for flashcard import sinks."""

    @abstractmethod
    async def add_card(self, card: Flashcard) -> AddCardResult:
        """Submit a single flashcard.

        Submission failures are reported through the result, not raised.

        Args:
            card: Flashcard to submit

        Returns:
            Success or failure with a reason
        """
        pass

    async def close(self) -> None:
        """Flush pending output and release resources."""
        return None

    async def discard(self) -> None:
        """Release resources without flushing pending output."""
        return None
