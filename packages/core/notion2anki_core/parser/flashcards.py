"""Line-oriented flashcard parser.

The parser folds over the lines of one rendered document. Its accumulator,
``ParserState``, tracks two independent things: whether the current line is
inside a fenced code region, and which question (if any) is open together with
the answer lines collected for it.

Incomplete drafts are dropped rather than reported. A question that is never
followed by answer content produces no card, and an answer without an open
question is ignored.
"""

from dataclasses import dataclass, field

from notion2anki_core.parser.markers import MarkerKind, MarkerLine, classify_line
from notion2anki_core.schemas.cards import Flashcard
from notion2anki_core.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ParserState:
    """Mutable accumulator for a single parsing pass."""

    question: str | None = None
    answer_lines: list[str] = field(default_factory=list)
    in_code_fence: bool = False

    @property
    def question_open(self) -> bool:
        return self.question is not None

    @property
    def answer(self) -> str:
        return "\n".join(self.answer_lines).strip()

    def has_answer(self) -> bool:
        return bool(self.answer)

    def open_question(self, text: str) -> None:
        self.question = text
        self.answer_lines = []

    def finish(self) -> Flashcard | None:
        """Close the open question, returning a card if it is complete."""
        card = None
        if self.question and self.has_answer():
            card = Flashcard(question=self.question, answer=self.answer)
        elif self.question is not None:
            logger.debug(f"Discarding incomplete draft: {self.question!r}")
        self.question = None
        self.answer_lines = []
        return card


def _apply(state: ParserState, line: MarkerLine, fence_only: bool) -> Flashcard | None:
    """Apply one classified line to the state.

    Returns:
        A finished card when the line closes a complete question
    """
    if line.kind == MarkerKind.FENCE:
        state.in_code_fence = not state.in_code_fence
        return None

    if fence_only and not state.in_code_fence:
        return None

    if line.kind == MarkerKind.QUESTION:
        card = state.finish()
        state.open_question(line.text)
        return card

    if not state.question_open:
        return None

    if line.kind == MarkerKind.ANSWER:
        # Kept even when empty so a following line starts on its own row
        state.answer_lines.append(line.text)
    elif line.text:
        state.answer_lines.append(line.text)
    return None


def parse_flashcards(
    content: str,
    fence_only: bool = False,
) -> list[Flashcard]:
    """Extract flashcards from rendered document text.

    Args:
        content: Rendered document text
        fence_only: Only consider lines inside fenced code regions

    Returns:
        Flashcards in the order their questions appear
    """
    state = ParserState()
    cards: list[Flashcard] = []

    for raw_line in content.splitlines():
        card = _apply(state, classify_line(raw_line), fence_only)
        if card is not None:
            cards.append(card)

    last = state.finish()
    if last is not None:
        cards.append(last)

    logger.debug(f"Parsed {len(cards)} flashcards (fence_only={fence_only})")
    return cards
