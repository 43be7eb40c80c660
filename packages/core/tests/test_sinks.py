"""Tests for import sinks and the record emitter."""

import json
import zipfile
from pathlib import Path
from typing import Any

import httpx
import pytest

from notion2anki_core.emit import emit_flashcards, emit_flashcards_detailed
from notion2anki_core.schemas.cards import AddCardResult, Flashcard
from notion2anki_core.sinks.ankiconnect import AnkiConnectSink
from notion2anki_core.sinks.base import BaseCardSink
from notion2anki_core.sinks.deck_file import DeckFileSink


class RecordingSink(BaseCardSink):
    """Sink that records cards and rejects selected questions."""

    def __init__(self, reject: set[str] | None = None):
        self.reject = reject or set()
        self.cards: list[Flashcard] = []

    async def add_card(self, card: Flashcard) -> AddCardResult:
        self.cards.append(card)
        if card.question in self.reject:
            return AddCardResult.failed("rejected")
        return AddCardResult.ok(len(self.cards))


def _anki_sink(handler: Any, **kwargs: Any) -> AnkiConnectSink:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AnkiConnectSink(client=client, retry_wait=0, **kwargs)


class TestEmitFlashcards:
    """Tests for the record emitter."""

    @pytest.mark.asyncio
    async def test_counts_successes_and_continues(self) -> None:
        """Test that a rejected card does not stop submission."""
        sink = RecordingSink(reject={"Q2"})
        cards = [
            Flashcard(question="Q1", answer="A1"),
            Flashcard(question="Q2", answer="A2"),
            Flashcard(question="Q3", answer="A3"),
        ]

        added = await emit_flashcards(cards, sink)

        assert added == 2
        assert [c.question for c in sink.cards] == ["Q1", "Q2", "Q3"]

    @pytest.mark.asyncio
    async def test_detailed_counts(self) -> None:
        sink = RecordingSink(reject={"Q1"})
        cards = [Flashcard(question="Q1", answer="A"), Flashcard(question="Q2", answer="B")]

        assert await emit_flashcards_detailed(cards, sink) == (1, 1)

    @pytest.mark.asyncio
    async def test_whitespace_normalized(self) -> None:
        sink = RecordingSink()

        await emit_flashcards([Flashcard(question=" Q ", answer=" A\nB \n")], sink)

        assert sink.cards[0].question == "Q"
        assert sink.cards[0].answer == "A\nB"

    @pytest.mark.asyncio
    async def test_no_cards(self) -> None:
        assert await emit_flashcards([], RecordingSink()) == 0

    @pytest.mark.asyncio
    async def test_raising_sink_counts_failure_and_continues(self) -> None:
        """Test that an exception from the sink does not stop submission."""

        class FlakySink(RecordingSink):
            async def add_card(self, card: Flashcard) -> AddCardResult:
                if not self.cards:
                    self.cards.append(card)
                    raise RuntimeError("socket closed")
                return await super().add_card(card)

        sink = FlakySink()
        cards = [Flashcard(question="Q1", answer="A1"), Flashcard(question="Q2", answer="A2")]

        assert await emit_flashcards_detailed(cards, sink) == (1, 1)
        assert [c.question for c in sink.cards] == ["Q1", "Q2"]


class TestAnkiConnectSink:
    """Tests for the AnkiConnect sink."""

    @pytest.mark.asyncio
    async def test_add_note_payload(self) -> None:
        """Test the addNote request body."""
        seen: list[dict[str, Any]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(json.loads(request.content))
            return httpx.Response(200, json={"result": 1496198395707, "error": None})

        sink = _anki_sink(handler, deck_name="Chinese", tags=["notion"])
        card = Flashcard(question="Q <b>", answer="line 1\nline 2", tags=["week1"])

        result = await sink.add_card(card)

        assert result.success is True
        assert result.note_id == 1496198395707
        payload = seen[0]
        assert payload["action"] == "addNote"
        assert payload["version"] == 6
        note = payload["params"]["note"]
        assert note["deckName"] == "Chinese"
        assert note["modelName"] == "Basic"
        assert note["fields"] == {"Front": "Q &lt;b&gt;", "Back": "line 1<br>line 2"}
        assert note["tags"] == ["notion", "week1"]

    @pytest.mark.asyncio
    async def test_anki_error_is_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, json={"result": None, "error": "cannot create note because it is a duplicate"}
            )

        result = await _anki_sink(handler).add_card(Flashcard(question="Q", answer="A"))

        assert result.success is False
        assert "duplicate" in result.error

    @pytest.mark.asyncio
    async def test_http_error_is_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        result = await _anki_sink(handler).add_card(Flashcard(question="Q", answer="A"))

        assert result.success is False
        assert result.error

    @pytest.mark.asyncio
    async def test_connection_error_is_failure(self) -> None:
        """Test that an unreachable Anki is reported, not raised."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = await _anki_sink(handler).add_card(Flashcard(question="Q", answer="A"))

        assert result.success is False
        assert "connection refused" in result.error


class TestDeckFileSink:
    """Tests for the deck file sink."""

    @pytest.mark.asyncio
    async def test_writes_tsv_on_close(self, tmp_path: Path) -> None:
        output = tmp_path / "cards.tsv"
        sink = DeckFileSink(output, fmt="tsv")

        result = await sink.add_card(Flashcard(question="Q", answer="A"))
        await sink.close()

        assert result.success is True
        assert output.read_text(encoding="utf-8") == "Q\tA\r\n"

    @pytest.mark.asyncio
    async def test_writes_apkg_on_close(self, tmp_path: Path) -> None:
        output = tmp_path / "deck.apkg"
        sink = DeckFileSink(output, deck_name="Notion Import")

        await sink.add_card(Flashcard(question="Q", answer="A"))
        await sink.close()

        assert zipfile.is_zipfile(output)

    def test_unknown_format_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            DeckFileSink(tmp_path / "deck.csv", fmt="csv")

    @pytest.mark.asyncio
    async def test_discard_keeps_existing_file(self, tmp_path: Path) -> None:
        """Test that discarding leaves a previous export untouched."""
        output = tmp_path / "cards.tsv"
        output.write_text("previous\tdeck\n", encoding="utf-8")
        sink = DeckFileSink(output, fmt="tsv")

        await sink.add_card(Flashcard(question="Q", answer="A"))
        await sink.discard()

        assert output.read_text(encoding="utf-8") == "previous\tdeck\n"
        assert sink.cards == []
