"""APKG export for Anki decks."""

import hashlib
import html
from pathlib import Path

import genanki

from notion2anki_core.schemas.cards import Flashcard
from notion2anki_core.utils.logging import get_logger

logger = get_logger(__name__)


def export_apkg(
    cards: list[Flashcard],
    deck_name: str,
    output: str | Path,
    model_name: str = "Basic",
) -> Path:
    """Export cards to an APKG deck package.

    Args:
        cards: Flashcards to export
        deck_name: Name for the Anki deck
        output: Output file path
        model_name: Name of the note type written into the package

    Returns:
        Path to the created APKG file
    """
    logger.info(f"Exporting APKG: {deck_name} ({len(cards)} cards)")

    # Deterministic IDs so re-exports update the same deck in Anki
    deck_id = _generate_id(deck_name)
    model_id = _generate_id(f"{deck_name}_{model_name}")

    model = _create_basic_model(model_id, model_name)
    deck = genanki.Deck(deck_id, deck_name)

    for card in cards:
        note = genanki.Note(
            model=model,
            fields=[card_field_html(card.question), card_field_html(card.answer)],
            tags=[tag.replace(" ", "_") for tag in card.tags],
        )
        deck.add_note(note)

    output_path = Path(output)
    genanki.Package(deck).write_to_file(str(output_path))

    logger.info(f"Created APKG at {output_path}")
    return output_path


def card_field_html(text: str) -> str:
    """Escape text and keep its line breaks visible on the card."""
    return html.escape(text).replace("\n", "<br>")


def _create_basic_model(model_id: int, model_name: str) -> genanki.Model:
    """Create a basic Anki model with Front/Back fields."""
    return genanki.Model(
        model_id,
        model_name,
        fields=[
            {"name": "Front"},
            {"name": "Back"},
        ],
        templates=[
            {
                "name": "Card 1",
                "qfmt": "{{Front}}",
                "afmt": '{{FrontSide}}<hr id="answer">{{Back}}',
            },
        ],
        css="""
        .card {
            font-family: arial;
            font-size: 20px;
            text-align: left;
            color: black;
            background-color: white;
        }
        """,
    )


def _generate_id(name: str) -> int:
    """Generate a deterministic 31-bit ID from a string."""
    hash_bytes = hashlib.md5(name.encode()).digest()
    return int.from_bytes(hash_bytes[:4], "big") & 0x7FFFFFFF
