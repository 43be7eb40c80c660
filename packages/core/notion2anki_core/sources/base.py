"""Base document source interface."""

from abc import ABC, abstractmethod

from notion2anki_core.schemas.blocks import ContentBlock
from notion2anki_core.schemas.document import DocumentRef


class DocumentSourceError(Exception):
    """Error when documents or their blocks cannot be fetched."""

    def __init__(self, message: str, document_id: str | None = None):
        super().__init__(message)
        self.document_id = document_id


class BaseDocumentSource(ABC):
    """Abstract base class for document sources."""

    @abstractmethod
    async def list_ready_documents(self) -> list[DocumentRef]:
        """List documents that are ready to be imported.

        Returns:
            Document references in source order

        Raises:
            DocumentSourceError: If the listing cannot be fetched
        """
        pass

    @abstractmethod
    async def get_blocks(self, document_id: str) -> list[ContentBlock]:
        """Fetch the content blocks of one document.

        Args:
            document_id: ID of the document

        Returns:
            Ordered content blocks

        Raises:
            DocumentSourceError: If the blocks cannot be fetched
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None
