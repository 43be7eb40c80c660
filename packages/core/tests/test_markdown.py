"""Tests for rich text flattening, block rendering and line classification."""

from notion2anki_core.markdown.render import render_block, render_blocks
from notion2anki_core.markdown.rich_text import flatten_rich_text
from notion2anki_core.parser.flashcards import parse_flashcards
from notion2anki_core.parser.markers import MarkerKind, classify_line
from notion2anki_core.schemas.blocks import BlockType, ContentBlock, RichText


def _block(
    block_type: BlockType, *texts: str, language: str | None = None
) -> ContentBlock:
    return ContentBlock(
        type=block_type,
        rich_text=[RichText(plain_text=t) for t in texts],
        language=language,
    )


class TestFlattenRichText:
    """Tests for rich text flattening."""

    def test_concatenates_in_order(self) -> None:
        """Test that fragments join without separators."""
        fragments = [
            RichText(plain_text="问题："),
            RichText(plain_text="What "),
            RichText(plain_text="is X?"),
        ]
        assert flatten_rich_text(fragments) == "问题：What is X?"

    def test_empty(self) -> None:
        """Test that no fragments give an empty string."""
        assert flatten_rich_text([]) == ""


class TestRenderBlock:
    """Tests for single block rendering."""

    def test_headings(self) -> None:
        assert render_block(_block(BlockType.HEADING_1, "A")) == ["# A", ""]
        assert render_block(_block(BlockType.HEADING_2, "B")) == ["## B", ""]
        assert render_block(_block(BlockType.HEADING_3, "C")) == ["### C", ""]

    def test_paragraph(self) -> None:
        assert render_block(_block(BlockType.PARAGRAPH, "text")) == ["text", ""]

    def test_bullet(self) -> None:
        assert render_block(_block(BlockType.BULLETED_LIST_ITEM, "item")) == ["- item"]

    def test_code(self) -> None:
        """Test that code keeps its embedded line breaks verbatim."""
        block = _block(BlockType.CODE, "line 1\n  line 2", language="python")
        assert render_block(block) == ["```python", "line 1\n  line 2", "```", ""]

    def test_other(self) -> None:
        assert render_block(ContentBlock(type=BlockType.OTHER)) == [""]


class TestRenderBlocks:
    """Tests for whole-document rendering."""

    def test_document(self) -> None:
        """Test rendering a mixed block sequence."""
        blocks = [
            _block(BlockType.HEADING_1, "Deck"),
            _block(BlockType.PARAGRAPH, "问题：What is 2+2?"),
            _block(BlockType.BULLETED_LIST_ITEM, "note"),
            ContentBlock(type=BlockType.OTHER),
            _block(BlockType.CODE, "x = 1", language=""),
        ]

        assert render_blocks(blocks) == (
            "# Deck\n\n问题：What is 2+2?\n\n- note\n\n```\nx = 1\n```\n"
        )

    def test_empty(self) -> None:
        assert render_blocks([]) == ""

    def test_rendered_paragraphs_parse(self) -> None:
        """Test parsing cards written as consecutive paragraphs."""
        blocks = [
            _block(BlockType.PARAGRAPH, "问题：", "What is 2+2?"),
            _block(BlockType.PARAGRAPH, "答案：4"),
            _block(BlockType.PARAGRAPH, "问题：Name a primary color."),
            _block(BlockType.PARAGRAPH, "答案：Red"),
            _block(BlockType.PARAGRAPH, "It is also a stop-light color."),
        ]

        cards = parse_flashcards(render_blocks(blocks))

        assert [(c.question, c.answer) for c in cards] == [
            ("What is 2+2?", "4"),
            ("Name a primary color.", "Red\nIt is also a stop-light color."),
        ]

    def test_code_block_cards_in_fence_mode(self) -> None:
        """Test that cards written inside a code block survive fence gating."""
        blocks = [
            _block(BlockType.PARAGRAPH, "问题: ignored"),
            _block(
                BlockType.CODE,
                "Question: Q\nAnswer: line 1\nline 2",
                language="text",
            ),
            _block(BlockType.PARAGRAPH, "trailing paragraph"),
        ]

        cards = parse_flashcards(render_blocks(blocks), fence_only=True)

        assert [(c.question, c.answer) for c in cards] == [("Q", "line 1\nline 2")]


class TestClassifyLine:
    """Tests for marker classification."""

    def test_question(self) -> None:
        line = classify_line("  问题：  What?  ")
        assert line.kind == MarkerKind.QUESTION
        assert line.text == "What?"

    def test_answer(self) -> None:
        line = classify_line("回答: because")
        assert line.kind == MarkerKind.ANSWER
        assert line.text == "because"

    def test_fence_carries_language(self) -> None:
        line = classify_line("```python")
        assert line.kind == MarkerKind.FENCE
        assert line.text == "python"

    def test_text(self) -> None:
        line = classify_line("  just text ")
        assert line.kind == MarkerKind.TEXT
        assert line.text == "just text"

    def test_bullet_marker_is_text(self) -> None:
        """Test that markers behind a list prefix are not recognised."""
        assert classify_line("- 问题: Q").kind == MarkerKind.TEXT

    def test_marker_must_be_prefix(self) -> None:
        assert classify_line("The Question: is this").kind == MarkerKind.TEXT
