"""Command-line entry point for running an import."""

import argparse
import asyncio
import logging
import signal
import sys
from typing import NoReturn

import structlog
from notion2anki_core.sinks import SinkError
from notion2anki_core.sources import DocumentSourceError
from notion2anki_core.utils import set_log_level
from pydantic import ValidationError
from pydantic_settings import SettingsError

from runner.config import Settings, load_settings
from runner.tasks.import_pages import run_import_task

logger = structlog.get_logger()


def configure_logging(level: str) -> None:
    """Apply the configured level to runner events and core loggers."""
    set_log_level(level)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level.upper())
        ),
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line overrides for settings."""
    parser = argparse.ArgumentParser(
        description="Import question/answer flashcards from Notion into Anki"
    )
    parser.add_argument(
        "--fence-only",
        action="store_true",
        default=None,
        help="Only read markers inside fenced code blocks",
    )
    parser.add_argument(
        "--export",
        dest="export_path",
        help="Write a deck file instead of posting to AnkiConnect",
    )
    parser.add_argument(
        "--format",
        dest="export_format",
        choices=["apkg", "tsv"],
        help="Deck file format used with --export",
    )
    parser.add_argument("--deck", dest="anki_deck_name", help="Target deck name")
    parser.add_argument("--model", dest="anki_model_name", help="Target note type")
    return parser.parse_args(argv)


def handle_shutdown(signum: int, frame) -> NoReturn:
    """Handle shutdown signals gracefully."""
    logger.info("received_shutdown_signal", signal=signum)
    sys.exit(130)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the runner."""
    signal.signal(signal.SIGTERM, handle_shutdown)

    args = parse_args(argv)
    try:
        settings: Settings = load_settings(**vars(args))
    except (ValidationError, SettingsError) as exc:
        logger.error("invalid_settings", error=str(exc))
        return 2

    configure_logging(settings.log_level)

    try:
        summary = asyncio.run(run_import_task(settings))
    except DocumentSourceError as exc:
        logger.error("document_listing_failed", error=str(exc))
        return 1
    except SinkError as exc:
        logger.error("sink_failed", error=str(exc))
        return 1

    print(f"Successfully imported {summary.cards_added} flashcards to Anki")
    return 0


if __name__ == "__main__":
    sys.exit(main())
