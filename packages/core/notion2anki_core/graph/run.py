"""Run an import over every ready document."""

from notion2anki_core.graph.build_import_graph import build_import_graph
from notion2anki_core.graph.config import ImportConfig
from notion2anki_core.schemas.document import ImportSummary
from notion2anki_core.sinks.base import BaseCardSink
from notion2anki_core.sources.base import BaseDocumentSource
from notion2anki_core.utils.logging import get_logger, log_exceptions

logger = get_logger(__name__)


@log_exceptions(logger)
async def run_import(
    source: BaseDocumentSource,
    sink: BaseCardSink,
    config: ImportConfig | None = None,
) -> ImportSummary:
    """Import flashcards from all ready documents.

    Documents are processed one after another in the order the source lists
    them. A document whose blocks cannot be fetched is recorded as failed and
    the run moves on to the next one.

    Args:
        source: Document source
        sink: Import sink
        config: Optional import configuration

    Returns:
        Summary counters for the run

    Raises:
        DocumentSourceError: If the ready documents cannot be listed
    """
    graph = build_import_graph(source, sink, config)
    summary = ImportSummary()

    documents = await source.list_ready_documents()
    logger.info(f"Found {len(documents)} documents to import")

    for document in documents:
        result = await graph.ainvoke({"document": document, "errors": []})
        summary.documents += 1

        errors = result.get("errors", [])
        if errors:
            summary.failed_documents += 1
            summary.errors.extend(errors)
            continue

        summary.cards_found += len(result.get("cards", []))
        summary.cards_added += result.get("added", 0)
        summary.cards_failed += result.get("failed", 0)

    logger.info(
        f"Successfully imported {summary.cards_added} flashcards "
        f"({summary.cards_failed} failed, {summary.failed_documents} documents failed)"
    )
    return summary
