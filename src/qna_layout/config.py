"""
Module: qna_layout.config

Purpose:
    Immutable styling and layout configuration for question/answer boxes.
    Out-of-range values are clamped on construction, never rejected.

Key Classes:
    - Style: Font styling for one of the two texts
    - LayoutConfig: Layout mode and spacing for a box
    - ParagraphSpacing, Align, LayoutMode, QuestionPosition: String enums

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - qna_layout.text: Measurement and wrapping
    - qna_layout.layout: Inline and block builders
    - qna_layout.hit_test: Region classifier
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from .models import Region
from .thresholds import HIT_TEST_THRESHOLDS, RULED_LINE_THRESHOLDS

_E = TypeVar("_E", bound=Enum)

DEFAULT_FONT_FAMILY = "Arial, sans-serif"


class ParagraphSpacing(str, Enum):
    """Paragraph spacing class, mapped to a line-height multiplier."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def multiplier(self) -> float:
        return _LINE_HEIGHT_MULTIPLIERS[self]


_LINE_HEIGHT_MULTIPLIERS = {
    ParagraphSpacing.SMALL: 1.0,
    ParagraphSpacing.MEDIUM: 1.2,
    ParagraphSpacing.LARGE: 1.5,
}


class Align(str, Enum):
    """Horizontal alignment. JUSTIFY is laid out as LEFT."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    JUSTIFY = "justify"


class LayoutMode(str, Enum):
    INLINE = "inline"
    BLOCK = "block"


class QuestionPosition(str, Enum):
    """Side of the box the question occupies in block mode."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def is_horizontal(self) -> bool:
        """True when question and answer sit side by side."""
        return self in (QuestionPosition.LEFT, QuestionPosition.RIGHT)


def coerce_enum(enum_cls: Type[_E], value: Any, default: _E) -> _E:
    """
    Convert a raw value to an enum member, falling back to a default.

    Args:
        enum_cls: Target enum class
        value: Enum member, its string value, or None
        default: Member returned for None or unknown values

    Returns:
        Matching enum member or default
    """
    if isinstance(value, enum_cls):
        return value
    if value is None:
        return default
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        return default


def _clamp(value: float, low: float, high: Optional[float] = None) -> float:
    value = max(low, float(value))
    if high is not None:
        value = min(high, value)
    return value


@dataclass(frozen=True)
class Style:
    """
    Font styling for one text (immutable).

    Attributes:
        font_family: CSS-like family list, first entry is the preferred font
        font_size: Font size in px (clamped to >= 1)
        bold: Bold weight
        italic: Italic style
        color: Text color string (passed through to the renderer)
        opacity: Text opacity (clamped to 0..1)
        paragraph_spacing: Line-height class
        align: Horizontal alignment

    Example:
        >>> Style(font_size=20).line_height
        24.0
    """

    font_family: str = DEFAULT_FONT_FAMILY
    font_size: float = 16.0
    bold: bool = False
    italic: bool = False
    color: str = "#000000"
    opacity: float = 1.0
    paragraph_spacing: ParagraphSpacing = ParagraphSpacing.MEDIUM
    align: Align = Align.LEFT

    def __post_init__(self) -> None:
        """Clamp numeric values and coerce enum fields."""
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "font_size", _clamp(self.font_size, 1.0))
        object.__setattr__(self, "opacity", _clamp(self.opacity, 0.0, 1.0))
        object.__setattr__(
            self,
            "paragraph_spacing",
            coerce_enum(ParagraphSpacing, self.paragraph_spacing, ParagraphSpacing.MEDIUM),
        )
        object.__setattr__(self, "align", coerce_enum(Align, self.align, Align.LEFT))
        if not self.font_family or not str(self.font_family).strip():
            object.__setattr__(self, "font_family", DEFAULT_FONT_FAMILY)

    @property
    def line_height(self) -> float:
        """Line height in px for this style's paragraph spacing."""
        return self.font_size * self.paragraph_spacing.multiplier

    @property
    def font_descriptor(self) -> str:
        """Font string such as ``"bold 16px Arial, sans-serif"``."""
        from .text.fonts import build_font

        return build_font(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "font_family": self.font_family,
            "font_size": self.font_size,
            "bold": self.bold,
            "italic": self.italic,
            "color": self.color,
            "opacity": self.opacity,
            "paragraph_spacing": self.paragraph_spacing.value,
            "align": self.align.value,
        }


@dataclass(frozen=True)
class LayoutConfig:
    """
    Layout configuration for one question/answer box (immutable).

    Attributes:
        mode: INLINE flows the answer after the question, BLOCK splits the box
        padding: Inner padding in px on every side
        answer_in_new_row: Force the answer below the question (inline mode)
        question_answer_gap: Extra gap between question and answer; horizontal
            on a shared line, vertical when answer_in_new_row is set
        question_position: Side of the question in block mode
        question_width_percent: Question share of the width for LEFT/RIGHT
        block_gap: Gap between the two block areas
        ruled_line_offset: Distance from baseline to ruled line; negative
            values put the line above the baseline (print output)
        ruled_lines_target: Restrict block-mode line positions to one region
        baseline_tolerance: Max distance in px for two runs to share a baseline

    Example:
        >>> LayoutConfig(question_width_percent=150).question_width_percent
        100.0
    """

    mode: LayoutMode = LayoutMode.INLINE
    padding: float = 4.0
    answer_in_new_row: bool = False
    question_answer_gap: float = 0.0
    question_position: QuestionPosition = QuestionPosition.LEFT
    question_width_percent: float = 40.0
    block_gap: float = 10.0
    ruled_line_offset: float = RULED_LINE_THRESHOLDS.screen_baseline_offset_px
    ruled_lines_target: Optional[Region] = None
    baseline_tolerance: float = HIT_TEST_THRESHOLDS.baseline_tolerance_px

    def __post_init__(self) -> None:
        """Clamp out-of-range values instead of rejecting them."""
        object.__setattr__(self, "mode", coerce_enum(LayoutMode, self.mode, LayoutMode.INLINE))
        object.__setattr__(
            self,
            "question_position",
            coerce_enum(QuestionPosition, self.question_position, QuestionPosition.LEFT),
        )
        object.__setattr__(self, "padding", _clamp(self.padding, 0.0))
        object.__setattr__(self, "question_answer_gap", _clamp(self.question_answer_gap, 0.0))
        object.__setattr__(
            self, "question_width_percent", _clamp(self.question_width_percent, 0.0, 100.0)
        )
        object.__setattr__(self, "block_gap", _clamp(self.block_gap, 0.0))
        object.__setattr__(self, "ruled_line_offset", float(self.ruled_line_offset))
        object.__setattr__(self, "baseline_tolerance", _clamp(self.baseline_tolerance, 0.0))
        if self.ruled_lines_target is not None:
            object.__setattr__(
                self, "ruled_lines_target", coerce_enum(Region, self.ruled_lines_target, None)
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "padding": self.padding,
            "answer_in_new_row": self.answer_in_new_row,
            "question_answer_gap": self.question_answer_gap,
            "question_position": self.question_position.value,
            "question_width_percent": self.question_width_percent,
            "block_gap": self.block_gap,
            "ruled_line_offset": self.ruled_line_offset,
            "ruled_lines_target": (
                self.ruled_lines_target.value if self.ruled_lines_target else None
            ),
            "baseline_tolerance": self.baseline_tolerance,
        }
