"""TSV export for Anki import."""

import csv
from io import StringIO
from pathlib import Path

from notion2anki_core.schemas.cards import Flashcard


def export_tsv(
    cards: list[Flashcard],
    output: str | Path | None = None,
    include_tags: bool = True,
) -> str:
    """Export cards to TSV format for Anki's text importer.

    Args:
        cards: Flashcards to export
        output: Optional output path (if None, only returns the string)
        include_tags: Include a tags column for cards that have tags

    Returns:
        TSV content as string
    """
    buffer = StringIO()
    writer = csv.writer(buffer, delimiter="\t", quoting=csv.QUOTE_MINIMAL)

    for card in cards:
        row = [card.question, card.answer]
        if include_tags and card.tags:
            row.append(" ".join(card.tags))
        writer.writerow(row)

    content = buffer.getvalue()

    if output:
        Path(output).write_text(content, encoding="utf-8")

    return content
