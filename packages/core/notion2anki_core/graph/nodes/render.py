"""Render node: flatten blocks into markdown text."""

from typing import Any

from notion2anki_core.markdown.render import render_blocks
from notion2anki_core.schemas.blocks import ContentBlock


def render_node(state: dict[str, Any]) -> dict[str, Any]:
    """Render the fetched blocks.

    Args:
        state: Pipeline state with blocks

    Returns:
        Updated state with rendered content
    """
    blocks: list[ContentBlock] = state.get("blocks", [])
    return {
        **state,
        "content": render_blocks(blocks),
        "current_step": "render",
    }
