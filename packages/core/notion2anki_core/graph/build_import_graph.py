"""Build the per-document import graph."""

from typing import TypedDict

from langgraph.graph import END, StateGraph

from notion2anki_core.graph.config import ImportConfig
from notion2anki_core.schemas.blocks import ContentBlock
from notion2anki_core.schemas.cards import Flashcard
from notion2anki_core.schemas.document import DocumentRef
from notion2anki_core.sinks.base import BaseCardSink
from notion2anki_core.sources.base import BaseDocumentSource


class ImportPipelineState(TypedDict, total=False):
    """State passed through the import pipeline for one document."""

    document: DocumentRef
    blocks: list[ContentBlock]
    content: str
    cards: list[Flashcard]
    added: int
    failed: int
    current_step: str
    errors: list[str]


def _after_ingest(state: ImportPipelineState) -> str:
    """Stop early when the document could not be fetched."""
    if state.get("errors"):
        return END
    return "render"


def build_import_graph(
    source: BaseDocumentSource,
    sink: BaseCardSink,
    config: ImportConfig | None = None,
) -> StateGraph:
    """Build a pipeline that imports the flashcards of one document.

    Args:
        source: Source to fetch document blocks from
        sink: Sink receiving finished flashcards
        config: Optional import configuration

    Returns:
        Compiled StateGraph ready for invocation
    """
    from notion2anki_core.graph.nodes import emit, ingest, parse, render

    resolved_config = config or ImportConfig()

    graph = StateGraph(ImportPipelineState)

    graph.add_node("ingest", ingest.create_ingest_node(source))
    graph.add_node("render", render.render_node)
    graph.add_node("parse", parse.create_parse_node(resolved_config))
    graph.add_node("emit", emit.create_emit_node(sink))

    graph.set_entry_point("ingest")
    graph.add_conditional_edges("ingest", _after_ingest)
    graph.add_edge("render", "parse")
    graph.add_edge("parse", "emit")
    graph.add_edge("emit", END)

    return graph.compile()
