"""Marker table and line classification.

Markers are literal line prefixes. Lines are trimmed before matching and the
table is checked in order; the first matching prefix decides the kind.
"""

from dataclasses import dataclass
from enum import Enum


class MarkerKind(str, Enum):
    """Kinds of classified lines."""

    QUESTION = "question"
    ANSWER = "answer"
    FENCE = "fence"
    TEXT = "text"


QUESTION_MARKERS = ("问题:", "问题：", "Question:", "Question：")
ANSWER_MARKERS = ("答案:", "答案：", "Answer:", "Answer：", "回答:", "回答：")
FENCE_MARKER = "```"

MARKER_TABLE: tuple[tuple[str, MarkerKind], ...] = (
    *((prefix, MarkerKind.QUESTION) for prefix in QUESTION_MARKERS),
    *((prefix, MarkerKind.ANSWER) for prefix in ANSWER_MARKERS),
    (FENCE_MARKER, MarkerKind.FENCE),
)


@dataclass(frozen=True)
class MarkerLine:
    """A classified line.

    ``text`` is the trimmed remainder after the marker prefix. For fence lines
    it holds the language tag, for free text the whole trimmed line.
    """

    kind: MarkerKind
    text: str


def classify_line(
    line: str,
    table: tuple[tuple[str, MarkerKind], ...] = MARKER_TABLE,
) -> MarkerLine:
    """Classify a rendered line against the marker table.

    Args:
        line: Raw line of rendered text
        table: Ordered ``(prefix, kind)`` pairs

    Returns:
        Classified line
    """
    stripped = line.strip()
    for prefix, kind in table:
        if stripped.startswith(prefix):
            return MarkerLine(kind=kind, text=stripped[len(prefix):].strip())
    return MarkerLine(kind=MarkerKind.TEXT, text=stripped)
