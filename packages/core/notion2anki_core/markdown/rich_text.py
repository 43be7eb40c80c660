"""Rich text flattening."""

from collections.abc import Iterable

from notion2anki_core.schemas.blocks import RichText


def flatten_rich_text(fragments: Iterable[RichText]) -> str:
    """Concatenate inline fragments into one plain string.

    Fragments are joined in order with no separator. An empty sequence
    yields an empty string.
    """
    return "".join(fragment.plain_text for fragment in fragments)
