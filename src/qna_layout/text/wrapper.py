"""
Module: qna_layout.text.wrapper

Purpose:
    Greedy word wrapping for a single style.

Algorithm:
    1. Split on explicit line breaks; each paragraph wraps on its own
    2. Accumulate space-separated words while the line still fits
    3. Flush the line when the next word would exceed max_width
    4. Empty paragraphs become blank lines; over-wide words stay whole

Used By:
    - qna_layout.layout.inline
    - qna_layout.layout.block
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from qna_layout.models import WrappedLine

from .metrics import TextMeasurer, measure, measure_for_wrapping

if TYPE_CHECKING:
    from qna_layout.config import Style


def split_words(paragraph: str) -> List[str]:
    """Words of a paragraph; runs of spaces collapse."""
    return [word for word in paragraph.split(" ") if word]


def wrap(
    text: str,
    style: "Style",
    max_width: float,
    measurer: Optional[TextMeasurer] = None,
) -> List[WrappedLine]:
    """
    Wrap text into lines no wider than max_width.

    Args:
        text: Text with optional ``\\n`` paragraph breaks
        style: Style to measure with
        max_width: Available line width in px
        measurer: Native measurer, or None for the approximation

    Returns:
        Wrapped lines in order. An empty paragraph yields a blank line
        (``text == ""``, ``width == 0``); empty text yields no lines.

    Example:
        >>> [line.text for line in wrap("hello world", Style(font_size=10), 1000)]
        ['hello world']
    """
    lines: List[WrappedLine] = []
    if not text:
        return lines

    for paragraph in text.split("\n"):
        words = split_words(paragraph)
        if not words:
            lines.append(WrappedLine(text="", width=0.0))
            continue

        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if measure_for_wrapping(candidate, style, measurer) > max_width:
                lines.append(WrappedLine(text=current, width=measure(current, style, measurer)))
                current = word
            else:
                current = candidate
        lines.append(WrappedLine(text=current, width=measure(current, style, measurer)))

    return lines
