"""Flashcard schemas."""

from pydantic import BaseModel, Field, field_validator


class Flashcard(BaseModel):
    """A completed question/answer pair."""

    question: str = Field(..., description="Question side")
    answer: str = Field(..., description="Answer side")
    tags: list[str] = Field(default_factory=list, description="Card tags")
    source_id: str | None = Field(None, description="ID of the source document")

    @field_validator("question")
    @classmethod
    def _question_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question must not be empty")
        return value

    def normalized(self) -> "Flashcard":
        """Return a copy with surrounding whitespace trimmed from both sides."""
        return self.model_copy(
            update={"question": self.question.strip(), "answer": self.answer.strip()}
        )


class AddCardResult(BaseModel):
    """Outcome of submitting one card to an import sink."""

    success: bool = Field(..., description="Whether the card was accepted")
    note_id: int | None = Field(None, description="Note ID assigned by the sink")
    error: str | None = Field(None, description="Failure reason, if any")

    @classmethod
    def ok(cls, note_id: int | None = None) -> "AddCardResult":
        return cls(success=True, note_id=note_id)

    @classmethod
    def failed(cls, reason: str) -> "AddCardResult":
        return cls(success=False, error=reason)
