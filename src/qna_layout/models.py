"""
Module: qna_layout.models

Purpose:
    Data models for question/answer layout output.
    Immutable dataclasses representing runs, ruled-line rows and areas.

Key Classes:
    - Rect: Axis-aligned rectangle in box-local coordinates
    - WrappedLine: One line produced by the wrapper
    - TextRun: Styled text fragment positioned at a baseline
    - LinePosition: One ruled-line row (rendered or blank)
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - qna_layout.text.wrapper: Creates WrappedLines
    - qna_layout.layout: Creates TextRuns, LinePositions, LayoutResults
    - qna_layout.hit_test: Reads LayoutResults
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .config import Style


class Region(str, Enum):
    """Semantic region of the box."""

    QUESTION = "question"
    ANSWER = "answer"


class LineKind(str, Enum):
    """Which text a ruled-line row belongs to."""

    QUESTION = "question"
    ANSWER = "answer"
    COMBINED = "combined"  # Question tail and answer head share the row

    @classmethod
    def for_region(cls, region: Region) -> "LineKind":
        return cls.QUESTION if region is Region.QUESTION else cls.ANSWER


@dataclass(frozen=True)
class Rect:
    """
    Rectangle in box-local coordinates (origin top-left).

    Example:
        >>> Rect(10, 10, 100, 50).contains(110, 60)
        True
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, px: float, py: float) -> bool:
        """Point-in-rectangle test, edges inclusive."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def overlaps(self, other: "Rect") -> bool:
        """True when the interiors of the two rectangles intersect."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class WrappedLine:
    """A wrapped line of text and its measured width. Empty text marks a blank line."""

    text: str
    width: float

    @property
    def is_blank(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class TextRun:
    """
    Styled text fragment ready for glyph rendering.

    Attributes:
        text: Non-empty text
        x: Left edge of the text origin
        y: Baseline Y coordinate (not the line top)
        style: Style to draw with
        region: Owning text, or None for runs without a tag
    """

    text: str
    x: float
    y: float
    style: "Style"
    region: Optional[Region] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "x": self.x,
            "y": self.y,
            "style": self.style.to_dict(),
            "region": self.region.value if self.region else None,
        }


@dataclass(frozen=True)
class LinePosition:
    """
    One row for ruled-line placement.

    Attributes:
        y: Ruled line Y (baseline + ruled line offset)
        line_height: Height reserved by the row
        style: Dominant style of the row (answer style on a combined row)
        kind: QUESTION, ANSWER or COMBINED
        blank: Row reserved by an explicit line break, carries no run
        question_style: Question style, set only on the combined row
    """

    y: float
    line_height: float
    style: "Style"
    kind: LineKind = LineKind.ANSWER
    blank: bool = False
    question_style: Optional["Style"] = None

    @property
    def is_combined(self) -> bool:
        return self.kind is LineKind.COMBINED

    def to_dict(self) -> dict[str, Any]:
        return {
            "y": self.y,
            "line_height": self.line_height,
            "style": self.style.to_dict(),
            "kind": self.kind.value,
            "blank": self.blank,
            "question_style": self.question_style.to_dict() if self.question_style else None,
        }


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output.

    Attributes:
        runs: Positioned text runs, question runs first
        content_height: max(box height, vertical extent used)
        line_positions: Ruled-line rows in top-to-bottom order
        question_area: Question rectangle (block mode only)
        answer_area: Answer rectangle (block mode only)

    Example:
        >>> result = LayoutResult(runs=(), content_height=100, line_positions=())
        >>> result.combined_line is None
        True
    """

    runs: tuple[TextRun, ...]
    content_height: float
    line_positions: tuple[LinePosition, ...]
    question_area: Optional[Rect] = None
    answer_area: Optional[Rect] = None

    @property
    def question_runs(self) -> tuple[TextRun, ...]:
        return tuple(run for run in self.runs if run.region is Region.QUESTION)

    @property
    def answer_runs(self) -> tuple[TextRun, ...]:
        return tuple(run for run in self.runs if run.region is Region.ANSWER)

    @property
    def combined_line(self) -> Optional[LinePosition]:
        """The row shared by question and answer, if any."""
        for position in self.line_positions:
            if position.is_combined:
                return position
        return None

    @property
    def is_block(self) -> bool:
        return self.question_area is not None and self.answer_area is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "runs": [run.to_dict() for run in self.runs],
            "content_height": self.content_height,
            "line_positions": [position.to_dict() for position in self.line_positions],
            "question_area": self.question_area.to_dict() if self.question_area else None,
            "answer_area": self.answer_area.to_dict() if self.answer_area else None,
        }
