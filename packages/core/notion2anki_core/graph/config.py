"""Configuration for the import pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImportConfig:
    """Options for one import run.

    ``deck_name`` and ``model_name`` are opaque to the pipeline; they are only
    passed through to the sink.
    """

    # Only recognise markers inside fenced code regions
    fence_only: bool = False

    # Anki targets
    deck_name: str = "Notion Import"
    model_name: str = "Basic"

    # Tags attached to every parsed card
    tags: tuple[str, ...] = ()
