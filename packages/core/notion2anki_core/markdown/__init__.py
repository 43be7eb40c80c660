"""Block flattening and markdown rendering."""

from notion2anki_core.markdown.render import FENCE, render_block, render_blocks
from notion2anki_core.markdown.rich_text import flatten_rich_text

__all__ = ["FENCE", "flatten_rich_text", "render_block", "render_blocks"]
