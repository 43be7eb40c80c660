"""Content block schemas for documents fetched from Notion.

Blocks are immutable snapshots of the source document. Only the block types
that carry flashcard text are modelled explicitly; everything else collapses
to ``BlockType.OTHER`` so that the renderer can keep positional alignment with
the source without inspecting the payload.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BlockType(str, Enum):
    """Block types understood by the renderer."""

    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    PARAGRAPH = "paragraph"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    CODE = "code"
    OTHER = "other"


class RichText(BaseModel):
    """A single inline text run."""

    plain_text: str = Field("", description="Unformatted text of the run")
    model_config = ConfigDict(frozen=True)


class ContentBlock(BaseModel):
    """A typed block of document content."""

    id: str | None = Field(None, description="Source block ID")
    type: BlockType = Field(BlockType.OTHER, description="Block type")
    rich_text: list[RichText] = Field(
        default_factory=list, description="Ordered inline text fragments"
    )
    language: str | None = Field(None, description="Language tag for code blocks")
    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_notion(cls, raw: dict[str, Any]) -> "ContentBlock":
        """Build a block from a raw Notion block object.

        Args:
            raw: Block object as returned by the Notion API

        Returns:
            Parsed content block (``OTHER`` for unsupported types)
        """
        raw_type = raw.get("type")
        try:
            block_type = BlockType(raw_type)
        except ValueError:
            block_type = BlockType.OTHER

        block_id = raw.get("id") if isinstance(raw.get("id"), str) else None
        if block_type == BlockType.OTHER:
            return cls(id=block_id, type=BlockType.OTHER)

        body = raw.get(raw_type)
        if not isinstance(body, dict):
            body = {}

        fragments = [
            RichText(plain_text=item.get("plain_text") or "")
            for item in body.get("rich_text") or []
            if isinstance(item, dict)
        ]

        language = None
        if block_type == BlockType.CODE:
            language = body.get("language") or ""

        return cls(
            id=block_id,
            type=block_type,
            rich_text=fragments,
            language=language,
        )
