"""Task that imports flashcards from Notion pages into Anki."""

from __future__ import annotations

import structlog
from notion2anki_core.graph import ImportConfig, run_import
from notion2anki_core.schemas.document import ImportSummary
from notion2anki_core.sinks import AnkiConnectSink, BaseCardSink, DeckFileSink
from notion2anki_core.sources import BaseDocumentSource, NotionSource

from runner.config import Settings

logger = structlog.get_logger()


def build_source(settings: Settings) -> BaseDocumentSource:
    """Create the Notion document source from settings."""
    return NotionSource(
        api_key=settings.notion_api_key,
        database_id=settings.notion_database_id,
        status_property=settings.notion_status_property,
        status_value=settings.notion_status_value,
        notion_version=settings.notion_version,
        timeout=settings.request_timeout,
        max_retries=settings.max_retries,
    )


def build_sink(settings: Settings, config: ImportConfig | None = None) -> BaseCardSink:
    """Create the import sink selected by settings.

    Deck and note type come from the import config so the pipeline and the
    sink agree on where cards go.
    """
    config = config or build_import_config(settings)
    if settings.export_path:
        logger.info(
            "using_deck_file_sink",
            path=settings.export_path,
            format=settings.export_format,
        )
        return DeckFileSink(
            settings.export_path,
            deck_name=config.deck_name,
            model_name=config.model_name,
            fmt=settings.export_format,
        )
    logger.info("using_ankiconnect_sink", url=settings.anki_connect_url)
    return AnkiConnectSink(
        url=settings.anki_connect_url,
        deck_name=config.deck_name,
        model_name=config.model_name,
        timeout=settings.request_timeout,
    )


def build_import_config(settings: Settings) -> ImportConfig:
    """Create the pipeline configuration from settings."""
    return ImportConfig(
        fence_only=settings.fence_only,
        deck_name=settings.anki_deck_name,
        model_name=settings.anki_model_name,
        tags=tuple(settings.anki_tags),
    )


async def run_import_task(
    settings: Settings,
    source: BaseDocumentSource | None = None,
    sink: BaseCardSink | None = None,
) -> ImportSummary:
    """Run one import and release the collaborators afterwards.

    The sink is flushed only when the run completes; a failed run discards
    pending cards so an existing deck file is left as it was.

    Args:
        settings: Runner settings
        source: Optional source override
        sink: Optional sink override

    Returns:
        Summary of the run
    """
    config = build_import_config(settings)
    source = source or build_source(settings)
    sink = sink or build_sink(settings, config)

    logger.info(
        "import_started",
        database_id=settings.notion_database_id,
        fence_only=config.fence_only,
        deck=config.deck_name,
    )
    try:
        try:
            summary = await run_import(source, sink, config)
        except Exception:
            await sink.discard()
            raise
        await sink.close()
    finally:
        await source.close()

    for error in summary.errors:
        logger.warning("document_failed", error=error)

    logger.info(
        "import_finished",
        documents=summary.documents,
        failed_documents=summary.failed_documents,
        cards_found=summary.cards_found,
        cards_added=summary.cards_added,
        cards_failed=summary.cards_failed,
    )
    return summary
