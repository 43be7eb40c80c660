"""Render content blocks into line-oriented markdown text."""

from collections.abc import Iterable

from notion2anki_core.markdown.rich_text import flatten_rich_text
from notion2anki_core.schemas.blocks import BlockType, ContentBlock

FENCE = "```"
BULLET_PREFIX = "- "

_HEADING_PREFIXES = {
    BlockType.HEADING_1: "# ",
    BlockType.HEADING_2: "## ",
    BlockType.HEADING_3: "### ",
}


def render_block(block: ContentBlock) -> list[str]:
    """Render a single block into output lines.

    Args:
        block: Block to render

    Returns:
        Lines for the block. Unsupported blocks yield a single blank line.
    """
    text = flatten_rich_text(block.rich_text)

    if block.type in _HEADING_PREFIXES:
        return [f"{_HEADING_PREFIXES[block.type]}{text}", ""]
    if block.type == BlockType.PARAGRAPH:
        return [text, ""]
    if block.type == BlockType.BULLETED_LIST_ITEM:
        return [f"{BULLET_PREFIX}{text}"]
    if block.type == BlockType.CODE:
        return [f"{FENCE}{block.language or ''}", text, FENCE, ""]
    return [""]


def render_blocks(blocks: Iterable[ContentBlock]) -> str:
    """Render blocks into a single markdown document.

    Args:
        blocks: Ordered blocks of one document

    Returns:
        Rendered text, one block boundary per line break
    """
    lines: list[str] = []
    for block in blocks:
        lines.extend(render_block(block))
    return "\n".join(lines)
