"""
Module: qna_layout.layout.block

Purpose:
    Block question/answer layout. The box is split into two fixed,
    non-overlapping areas and each text wraps inside its own area.
    No inline combination happens in block mode.

Key Functions:
    - compute_block_areas(): Question and answer rectangles
    - create_block_layout(): Build runs and ruled-line rows

Used By:
    - qna_layout.layout.composer
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Tuple

from qna_layout.config import LayoutConfig, QuestionPosition
from qna_layout.models import LayoutResult, Rect, Region
from qna_layout.text.metrics import TextMeasurer, calculate_text_x
from qna_layout.text.wrapper import wrap

from .emitter import RowEmitter

if TYPE_CHECKING:
    from qna_layout.config import Style

logger = logging.getLogger(__name__)


def compute_block_areas(
    question_text: str,
    question_style: "Style",
    width: float,
    height: float,
    config: LayoutConfig,
    measurer: Optional[TextMeasurer] = None,
) -> Tuple[Rect, Rect]:
    """
    Split the box into question and answer areas.

    LEFT/RIGHT: the question takes question_width_percent of the full
    width and the answer gets the rest minus padding and block_gap; both
    use the full inner height.

    TOP/BOTTOM: the question is only as tall as its wrapped text (at
    least one font size), the answer fills the remainder minus block_gap.

    Returns:
        (question_area, answer_area)
    """
    padding = config.padding
    gap = config.block_gap
    inner_width = max(0.0, width - padding * 2)
    inner_height = max(0.0, height - padding * 2)
    position = config.question_position

    if position.is_horizontal:
        question_width = width * config.question_width_percent / 100
        answer_width = max(0.0, width - question_width - padding * 2 - gap)
        if position is QuestionPosition.LEFT:
            question_area = Rect(padding, padding, question_width, inner_height)
            answer_area = Rect(padding + question_width + gap, padding, answer_width, inner_height)
        else:
            answer_area = Rect(padding, padding, answer_width, inner_height)
            question_area = Rect(padding + answer_width + gap, padding, question_width, inner_height)
        return question_area, answer_area

    if question_text:
        line_count = len(wrap(question_text, question_style, inner_width, measurer))
        question_height = max(line_count * question_style.line_height, question_style.font_size)
    else:
        question_height = question_style.font_size
    answer_height = max(0.0, height - question_height - padding * 2 - gap)

    if position is QuestionPosition.TOP:
        question_area = Rect(padding, padding, inner_width, question_height)
        answer_area = Rect(padding, padding + question_height + gap, inner_width, answer_height)
    else:
        answer_area = Rect(padding, padding, inner_width, answer_height)
        question_area = Rect(padding, padding + answer_height + gap, inner_width, question_height)
    return question_area, answer_area


def _emit_area(
    emitter: RowEmitter,
    text: str,
    style: "Style",
    area: Rect,
    region: Region,
    ruled: bool,
    measurer: Optional[TextMeasurer],
) -> float:
    """Wrap text inside an area and emit its rows. Returns the final cursor Y."""
    cursor_y = area.y
    for line in wrap(text, style, area.width, measurer):
        if line.text:
            x = calculate_text_x(line.text, style, area.x, area.width, measurer)
            emitter.text_row(line.text, x, cursor_y, style, region, ruled=ruled)
        else:
            emitter.blank_row(cursor_y, style, region, ruled=ruled)
        cursor_y += style.line_height
    return cursor_y


def create_block_layout(
    question_text: str,
    answer_text: str,
    question_style: "Style",
    answer_style: "Style",
    width: float,
    height: float,
    config: LayoutConfig,
    measurer: Optional[TextMeasurer] = None,
) -> LayoutResult:
    """
    Lay out question and answer in fixed side-by-side or stacked areas.

    Line positions are emitted for both areas unless
    config.ruled_lines_target restricts them to one region.
    content_height is always the box height: block mode never grows.

    Example:
        >>> config = LayoutConfig(mode="block", question_width_percent=40)
        >>> result = create_block_layout("Q", "A", q, a, 500, 200, config)
        >>> result.question_area.width
        200.0
    """
    question_area, answer_area = compute_block_areas(
        question_text, question_style, width, height, config, measurer
    )
    target = config.ruled_lines_target
    emitter = RowEmitter(ruled_line_offset=config.ruled_line_offset)

    question_bottom = _emit_area(
        emitter, question_text, question_style, question_area, Region.QUESTION,
        ruled=target in (None, Region.QUESTION), measurer=measurer,
    )
    answer_bottom = _emit_area(
        emitter, answer_text, answer_style, answer_area, Region.ANSWER,
        ruled=target in (None, Region.ANSWER), measurer=measurer,
    )

    if question_bottom > question_area.bottom or answer_bottom > answer_area.bottom:
        logger.debug(
            f"Block text overflows its area ({config.question_position.value}): "
            f"question {question_bottom:.1f}/{question_area.bottom:.1f}, "
            f"answer {answer_bottom:.1f}/{answer_area.bottom:.1f}"
        )

    return LayoutResult(
        runs=tuple(emitter.runs),
        content_height=height,
        line_positions=tuple(emitter.line_positions),
        question_area=question_area,
        answer_area=answer_area,
    )
