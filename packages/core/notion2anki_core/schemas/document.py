"""Document and import summary schemas."""

from typing import Any

from pydantic import BaseModel, Field


class DocumentRef(BaseModel):
    """A document that is ready to be imported."""

    id: str = Field(..., description="Source document ID")
    title: str = Field("", description="Document title")

    @classmethod
    def from_notion(cls, raw: dict[str, Any]) -> "DocumentRef":
        """Build a reference from a Notion page object.

        The title is read from whichever property has type ``title``.
        """
        title = ""
        properties = raw.get("properties")
        if isinstance(properties, dict):
            for prop in properties.values():
                if isinstance(prop, dict) and prop.get("type") == "title":
                    title = "".join(
                        item.get("plain_text") or ""
                        for item in prop.get("title") or []
                        if isinstance(item, dict)
                    )
                    break
        return cls(id=raw["id"], title=title)


class ImportSummary(BaseModel):
    """Counters for one import run."""

    documents: int = Field(0, description="Documents processed")
    failed_documents: int = Field(0, description="Documents that failed to fetch")
    cards_found: int = Field(0, description="Flashcards parsed")
    cards_added: int = Field(0, description="Flashcards accepted by the sink")
    cards_failed: int = Field(0, description="Flashcards rejected by the sink")
    errors: list[str] = Field(default_factory=list, description="Error messages")
