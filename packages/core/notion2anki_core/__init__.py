"""notion2anki-core: Import flashcards written in Notion pages into Anki.

Pages are fetched as typed blocks, rendered to markdown text and scanned for
question/answer marker lines (``问题:``/``Question:`` and
``答案:``/``Answer:``/``回答:``). Finished cards are submitted to an import
sink such as AnkiConnect or a deck file.

    >>> from notion2anki_core import parse_flashcards
    >>> cards = parse_flashcards("问题：What is 2+2?\\n答案：4")
    >>> cards[0].answer
    '4'

Full runs go through the import graph. ``run_import`` is a coroutine that
takes a document source, an import sink and an ``ImportConfig``, and returns
an ``ImportSummary``:

    import asyncio
    from notion2anki_core.graph import ImportConfig, run_import

    summary = asyncio.run(run_import(source, sink, ImportConfig(fence_only=True)))
"""

from notion2anki_core.emit import emit_flashcards
from notion2anki_core.graph import ImportConfig, build_import_graph, run_import
from notion2anki_core.markdown import flatten_rich_text, render_blocks
from notion2anki_core.parser import parse_flashcards
from notion2anki_core.schemas.blocks import BlockType, ContentBlock, RichText
from notion2anki_core.schemas.cards import Flashcard

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "ImportConfig",
    "build_import_graph",
    "run_import",
    # Core steps
    "emit_flashcards",
    "flatten_rich_text",
    "parse_flashcards",
    "render_blocks",
    # Schemas
    "BlockType",
    "ContentBlock",
    "Flashcard",
    "RichText",
]
