"""In-memory document source."""

from notion2anki_core.schemas.blocks import ContentBlock
from notion2anki_core.schemas.document import DocumentRef
from notion2anki_core.sources.base import BaseDocumentSource, DocumentSourceError


class StaticDocumentSource(BaseDocumentSource):
    """Serve a fixed set of documents from memory."""

    def __init__(
        self,
        documents: list[tuple[DocumentRef, list[ContentBlock]]],
        failing_ids: set[str] | None = None,
    ):
        """Initialize the source.

        Args:
            documents: Document references paired with their blocks
            failing_ids: Document IDs whose block fetch should fail
        """
        self._documents = list(documents)
        self._failing_ids = set(failing_ids or ())

    async def list_ready_documents(self) -> list[DocumentRef]:
        return [ref for ref, _ in self._documents]

    async def get_blocks(self, document_id: str) -> list[ContentBlock]:
        if document_id in self._failing_ids:
            raise DocumentSourceError(
                f"Failed to fetch blocks for {document_id}", document_id=document_id
            )
        for ref, blocks in self._documents:
            if ref.id == document_id:
                return list(blocks)
        raise DocumentSourceError(
            f"Unknown document: {document_id}", document_id=document_id
        )
