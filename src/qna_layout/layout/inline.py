"""
Module: qna_layout.layout.inline

Purpose:
    Inline (flowing) question/answer layout. The question is wrapped
    first; the first answer words may continue on the question's last
    line, and the remaining answer text wraps below.

Key Functions:
    - create_inline_layout(): Build runs and ruled-line rows

Algorithm:
    1. Wrap the question into the padded width, one row per line
    2. Try to continue the answer on the last question line
       (skipped for answer_in_new_row or a leading answer break)
    3. Reserve (leading breaks - 1) blank answer rows
    4. Wrap the remaining answer text below
    5. content_height = max(height, last cursor Y)

Dependencies:
    - qna_layout.text: wrap, measure, alignment
    - qna_layout.layout.emitter: RowEmitter

Used By:
    - qna_layout.layout.composer
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, List, Optional

from qna_layout.config import Align, LayoutConfig
from qna_layout.models import LayoutResult, Region, WrappedLine
from qna_layout.thresholds import INLINE_THRESHOLDS
from qna_layout.text.metrics import TextMeasurer, baseline_offset, calculate_text_x, measure
from qna_layout.text.wrapper import split_words, wrap

from .emitter import RowEmitter

if TYPE_CHECKING:
    from qna_layout.config import Style

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InlineCombination:
    """
    Answer words placed on the last question line.

    Attributes:
        text: Answer text on the shared line
        words_used: Number of first-paragraph words consumed
        remaining: Answer text left for the following lines
    """

    text: str
    words_used: int
    remaining: str


def count_leading_breaks(text: str) -> int:
    """Number of ``\\n`` characters before the first other character."""
    return len(text) - len(text.lstrip("\n"))


def inline_gap(answer_style: "Style", config: LayoutConfig) -> float:
    """
    Horizontal gap between question and answer on a shared line.

    The user gap only applies horizontally when the answer is allowed on
    the question line; with answer_in_new_row it is a vertical gap.
    """
    base = min(
        INLINE_THRESHOLDS.inline_gap_max_px,
        answer_style.font_size * INLINE_THRESHOLDS.inline_gap_font_ratio,
    )
    if config.answer_in_new_row:
        return base
    return base + config.question_answer_gap


def split_for_inline(
    answer_text: str,
    answer_style: "Style",
    remaining_width: float,
    measurer: Optional[TextMeasurer] = None,
) -> Optional[InlineCombination]:
    """
    Take the leading answer words that fit in remaining_width.

    Only the first paragraph is considered. Returns None when not even
    the first word fits.
    """
    paragraphs = answer_text.split("\n")
    words = split_words(paragraphs[0].strip())
    if not words:
        return None
    if remaining_width <= measure(words[0], answer_style, measurer):
        return None

    inline_text = ""
    words_used = 0
    for word in words:
        candidate = f"{inline_text} {word}" if inline_text else word
        if measure(candidate, answer_style, measurer) <= remaining_width:
            inline_text = candidate
            words_used += 1
        else:
            break

    if not inline_text:
        return None

    rest_of_paragraph = " ".join(words[words_used:])
    if len(paragraphs) > 1:
        rest = "\n".join(paragraphs[1:])
        remaining = f"{rest_of_paragraph}\n{rest}" if rest_of_paragraph else rest
    else:
        remaining = rest_of_paragraph

    return InlineCombination(text=inline_text, words_used=words_used, remaining=remaining)


def create_inline_layout(
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
    Lay out question and answer as one flowing column.

    Args:
        question_text: Question text, may contain ``\\n`` breaks
        answer_text: Answer text, may start with ``\\n`` breaks
        question_style: Style for the question
        answer_style: Style for the answer
        width: Box width in px
        height: Box height in px
        config: Layout configuration (padding, gaps, answer_in_new_row)
        measurer: Native measurer, or None for the approximation

    Returns:
        LayoutResult without block areas. content_height may exceed height.

    Example:
        >>> result = create_inline_layout("Name?", "Max", q, a, 400, 60, LayoutConfig())
        >>> result.combined_line is not None
        True
    """
    padding = config.padding
    available_width = max(INLINE_THRESHOLDS.min_available_width, width - padding * 2)
    question_line_height = question_style.line_height
    answer_line_height = answer_style.line_height

    emitter = RowEmitter(ruled_line_offset=config.ruled_line_offset)

    # Question rows
    cursor_y = padding
    question_lines: List[WrappedLine] = wrap(question_text, question_style, available_width, measurer)
    for line in question_lines:
        if line.text:
            x = calculate_text_x(line.text, question_style, padding, available_width, measurer)
            emitter.text_row(line.text, x, cursor_y, question_style, Region.QUESTION)
        else:
            emitter.blank_row(cursor_y, question_style, Region.QUESTION)
        cursor_y += question_line_height
    question_bottom = cursor_y

    last_question_text = question_lines[-1].text if question_lines else ""
    last_question_width = measure(last_question_text, question_style, measurer)
    gap = inline_gap(answer_style, config)

    leading_breaks = count_leading_breaks(answer_text)
    if config.answer_in_new_row:
        leading_breaks += 1

    # Inline combination on the last question line
    combination: Optional[InlineCombination] = None
    if (
        not config.answer_in_new_row
        and leading_breaks == 0
        and last_question_text
        and answer_text.strip()
    ):
        remaining_width = available_width - last_question_width - gap
        combination = split_for_inline(answer_text, answer_style, remaining_width, measurer)

    if combination is not None:
        line_top = padding + (len(question_lines) - 1) * question_line_height
        combined_baseline = line_top + max(baseline_offset(question_style), baseline_offset(answer_style))
        answer_width = measure(combination.text, answer_style, measurer)
        combined_width = last_question_width + gap + answer_width

        # Combined line aligns as one unit, using the question alignment
        if question_style.align is Align.CENTER:
            question_x = padding + (available_width - combined_width) / 2
        elif question_style.align is Align.RIGHT:
            question_x = padding + available_width - combined_width
        else:
            question_x = padding

        emitter.runs[-1] = replace(emitter.runs[-1], x=question_x, y=combined_baseline)
        emitter.runs.append(
            replace(
                emitter.runs[-1],
                text=combination.text,
                x=question_x + last_question_width + gap,
                style=answer_style,
                region=Region.ANSWER,
            )
        )
        combined_line_height = max(question_line_height, answer_line_height)
        emitter.combine_last_row(combined_baseline, combined_line_height, answer_style, question_style)

        cursor_y = line_top + combined_line_height
        answer_cursor_y = cursor_y
        remaining = combination.remaining
        answer_lines = wrap(remaining, answer_style, available_width, measurer) if remaining.strip() else []
        logger.debug(
            f"Inline combination: {combination.words_used} answer word(s) on question line "
            f"{len(question_lines)}"
        )
    else:
        vertical_gap = config.question_answer_gap if config.answer_in_new_row else 0.0
        base_spacing = (
            answer_line_height * INLINE_THRESHOLDS.answer_spacing_ratio if question_lines else 0.0
        )
        answer_cursor_y = cursor_y + base_spacing + vertical_gap
        answer_lines = wrap(answer_text.lstrip("\n"), answer_style, available_width, measurer)

    # One break starts the answer on the next row; each further break is a blank row
    for _ in range(max(0, leading_breaks - 1)):
        emitter.blank_row(answer_cursor_y, answer_style, Region.ANSWER)
        answer_cursor_y += answer_line_height

    # Blank lines inside the answer are collected and flushed before the next text row
    pending_blanks = 0
    for line in answer_lines:
        if not line.text:
            pending_blanks += 1
            continue
        answer_cursor_y = _flush_blanks(emitter, pending_blanks, answer_cursor_y, answer_style)
        pending_blanks = 0
        x = calculate_text_x(line.text, answer_style, padding, available_width, measurer)
        emitter.text_row(line.text, x, answer_cursor_y, answer_style, Region.ANSWER)
        answer_cursor_y += answer_line_height
    answer_cursor_y = _flush_blanks(emitter, pending_blanks, answer_cursor_y, answer_style)

    content_height = max(height, question_bottom, cursor_y, answer_cursor_y)

    return LayoutResult(
        runs=tuple(emitter.runs),
        content_height=content_height,
        line_positions=tuple(emitter.line_positions),
    )


def _flush_blanks(emitter: RowEmitter, count: int, cursor_y: float, style: "Style") -> float:
    for _ in range(count):
        emitter.blank_row(cursor_y, style, Region.ANSWER)
        cursor_y += style.line_height
    return cursor_y
