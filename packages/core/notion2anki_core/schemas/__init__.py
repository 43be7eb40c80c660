"""Data schemas for the import pipeline.

This module exports the block model fetched from the document source, the
flashcard records produced by the parser, and the bookkeeping models used by
sinks and the runner.
"""

from notion2anki_core.schemas.blocks import BlockType, ContentBlock, RichText
from notion2anki_core.schemas.cards import AddCardResult, Flashcard
from notion2anki_core.schemas.document import DocumentRef, ImportSummary

__all__ = [
    # Blocks
    "BlockType",
    "ContentBlock",
    "RichText",
    # Cards
    "AddCardResult",
    "Flashcard",
    # Documents
    "DocumentRef",
    "ImportSummary",
]
