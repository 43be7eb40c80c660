"""Export formats for flashcards."""

from notion2anki_core.exporters.apkg import export_apkg
from notion2anki_core.exporters.tsv import export_tsv

__all__ = ["export_tsv", "export_apkg"]
