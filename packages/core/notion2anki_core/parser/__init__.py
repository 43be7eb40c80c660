"""Marker-driven flashcard parser."""

from notion2anki_core.parser.flashcards import ParserState, parse_flashcards
from notion2anki_core.parser.markers import (
    MARKER_TABLE,
    MarkerKind,
    MarkerLine,
    classify_line,
)

__all__ = [
    "MARKER_TABLE",
    "MarkerKind",
    "MarkerLine",
    "ParserState",
    "classify_line",
    "parse_flashcards",
]
