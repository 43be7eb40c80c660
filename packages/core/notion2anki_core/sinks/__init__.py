"""Import sinks for finished flashcards.

Supported sinks:
- AnkiConnect: adds notes to a running Anki instance
- DeckFile: writes an .apkg package or a .tsv file
"""

from notion2anki_core.sinks.ankiconnect import AnkiConnectSink
from notion2anki_core.sinks.base import BaseCardSink, SinkError
from notion2anki_core.sinks.deck_file import DeckFileSink

__all__ = ["AnkiConnectSink", "BaseCardSink", "DeckFileSink", "SinkError"]
