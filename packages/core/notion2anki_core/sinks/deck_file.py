"""Sink that writes collected cards to a deck file."""

from pathlib import Path

from notion2anki_core.exporters.apkg import export_apkg
from notion2anki_core.exporters.tsv import export_tsv
from notion2anki_core.schemas.cards import AddCardResult, Flashcard
from notion2anki_core.sinks.base import BaseCardSink, SinkError
from notion2anki_core.utils.logging import get_logger

logger = get_logger(__name__)

SUPPORTED_FORMATS = ("apkg", "tsv")


class DeckFileSink(BaseCardSink):
    """Collect cards in memory and write them out on close."""

    def __init__(
        self,
        output: str | Path,
        deck_name: str = "Notion Import",
        model_name: str = "Basic",
        fmt: str = "apkg",
    ):
        if fmt not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported export format: {fmt}")
        self.output = Path(output)
        self.deck_name = deck_name
        self.model_name = model_name
        self.fmt = fmt
        self.cards: list[Flashcard] = []

    async def add_card(self, card: Flashcard) -> AddCardResult:
        self.cards.append(card)
        return AddCardResult.ok()

    async def close(self) -> None:
        """Write all collected cards to the output file.

        Raises:
            SinkError: If the file cannot be written
        """
        try:
            if self.fmt == "tsv":
                export_tsv(self.cards, output=self.output)
            else:
                export_apkg(
                    self.cards,
                    self.deck_name,
                    self.output,
                    model_name=self.model_name,
                )
        except OSError as e:
            raise SinkError(f"Failed to write {self.output}: {e}") from e
        logger.info(f"Wrote {len(self.cards)} cards to {self.output}")

    async def discard(self) -> None:
        """Drop collected cards, leaving any existing output file untouched."""
        logger.info(f"Discarding {len(self.cards)} cards, {self.output} not written")
        self.cards = []
