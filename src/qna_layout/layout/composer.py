"""
Module: qna_layout.layout.composer

Purpose:
    Entry point for question/answer layout. Picks the inline or block
    builder from the configuration.

Key Functions:
    - layout(): Main entry point

Used By:
    - qna_layout.cli
    - Rendering and interaction layers
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from qna_layout.config import LayoutConfig, LayoutMode
from qna_layout.models import LayoutResult
from qna_layout.text.metrics import TextMeasurer

from .block import create_block_layout
from .inline import create_inline_layout

if TYPE_CHECKING:
    from qna_layout.config import Style

logger = logging.getLogger(__name__)


def layout(
    question_text: Optional[str],
    answer_text: Optional[str],
    question_style: "Style",
    answer_style: "Style",
    width: float,
    height: float,
    padding: Optional[float] = None,
    config: Optional[LayoutConfig] = None,
    measurer: Optional[TextMeasurer] = None,
) -> LayoutResult:
    """
    Compute runs, ruled-line rows and (block mode) areas for a box.

    Args:
        question_text: Question text (None is treated as empty)
        answer_text: Answer text (None is treated as empty)
        question_style: Style for the question
        answer_style: Style for the answer
        width: Box width in px (callers clamp to >= 1)
        height: Box height in px (callers clamp to >= 1)
        padding: Overrides config.padding when given
        config: Layout configuration, defaults to inline
        measurer: Native measurer, or None for the approximation

    Returns:
        LayoutResult with content_height >= height

    Example:
        >>> result = layout("Name?", "Max", Style(), Style(), 300, 40)
        >>> [run.text for run in result.runs]
        ['Name?', 'Max']
    """
    config = config or LayoutConfig()
    if padding is not None:
        config = replace(config, padding=padding)
    question_text = question_text or ""
    answer_text = answer_text or ""

    if config.mode is LayoutMode.BLOCK:
        result = create_block_layout(
            question_text, answer_text, question_style, answer_style, width, height, config, measurer
        )
    else:
        result = create_inline_layout(
            question_text, answer_text, question_style, answer_style, width, height, config, measurer
        )

    logger.debug(
        f"Laid out {config.mode.value} box {width:g}x{height:g}: "
        f"{len(result.runs)} runs, {len(result.line_positions)} rows, "
        f"content height {result.content_height:.1f}"
    )
    return result
