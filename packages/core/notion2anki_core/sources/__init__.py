"""Document sources.

Supported sources:
- Notion: pages of a database filtered by a status select property
- Static: in-memory documents for tests and dry runs
"""

from notion2anki_core.sources.base import BaseDocumentSource, DocumentSourceError
from notion2anki_core.sources.notion import NotionSource
from notion2anki_core.sources.static import StaticDocumentSource

__all__ = [
    "BaseDocumentSource",
    "DocumentSourceError",
    "NotionSource",
    "StaticDocumentSource",
]
