"""
Module: qna_layout.text.metrics

Purpose:
    Text metrics adapter. Wraps a host-supplied native measurement
    primitive and derives the widths, line heights and baseline offsets
    the layout builders need. Without a measurer, widths fall back to a
    deterministic per-character approximation.

Key Functions:
    - measure(): Width for positioning (right extent when available)
    - measure_for_wrapping(): Width for line-break decisions
    - line_height(): Line height for a style
    - baseline_offset(): Distance from line top to baseline
    - calculate_text_x(): X origin for an aligned line

Key Classes:
    - NativeMetrics: Result of a native measurement
    - PillowMeasurer: FreeType measurement through Pillow
    - ReportLabMeasurer: Type 1 / registered font measurement for PDF output

Dependencies:
    - PIL: FreeType font metrics
    - reportlab: PDF font metrics

Used By:
    - qna_layout.text.wrapper
    - qna_layout.layout
    - qna_layout.hit_test
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from reportlab.pdfbase import pdfmetrics

from qna_layout.config import Align
from qna_layout.thresholds import METRICS_THRESHOLDS

from .fonts import family_names, load_font

if TYPE_CHECKING:
    from qna_layout.config import Style


@dataclass(frozen=True)
class NativeMetrics:
    """
    Native measurement of a string.

    Attributes:
        width: Advance width
        right_extent: Distance from the text origin to the rightmost glyph
            edge, or None when the backend has no glyph bounding boxes
    """

    width: float
    right_extent: Optional[float] = None


# (text, font_descriptor, style) -> NativeMetrics
TextMeasurer = Callable[[str, str, "Style"], NativeMetrics]


def _approximate_width(text: str, style: "Style") -> float:
    return len(text) * style.font_size * METRICS_THRESHOLDS.fallback_char_width_ratio


def _measure(text: str, style: "Style", measurer: Optional[TextMeasurer], safety_ratio: float) -> float:
    if not text:
        return 0.0
    if measurer is None:
        return _approximate_width(text, style)
    metrics = measurer(text, style.font_descriptor, style)
    if metrics.right_extent is not None:
        return max(0.0, float(metrics.right_extent))
    return max(0.0, float(metrics.width) + style.font_size * safety_ratio)


def measure(text: str, style: "Style", measurer: Optional[TextMeasurer] = None) -> float:
    """
    Measure text width for positioning.

    Uses the right extent from the text origin when the measurer reports
    one, so swash and overhang glyphs are accounted for. Ink width is never
    used because it undercounts right-side overhangs.

    Args:
        text: Text to measure
        style: Style to measure with
        measurer: Native measurer, or None for the approximation

    Returns:
        Width in px (>= 0)

    Example:
        >>> measure("abcd", Style(font_size=10))
        24.0
    """
    return _measure(text, style, measurer, METRICS_THRESHOLDS.position_safety_ratio)


def measure_for_wrapping(text: str, style: "Style", measurer: Optional[TextMeasurer] = None) -> float:
    """
    Measure text width for line-break decisions.

    Same as measure() but with a smaller safety margin when no right
    extent is available, so words only move to the next line when they
    really do not fit.
    """
    return _measure(text, style, measurer, METRICS_THRESHOLDS.wrap_safety_ratio)


def line_height(style: "Style") -> float:
    """Line height in px: font size times the paragraph spacing multiplier."""
    return style.line_height


def baseline_offset(style: "Style") -> float:
    """Distance in px from the top of a line to its baseline."""
    return style.font_size * METRICS_THRESHOLDS.baseline_ratio


def calculate_text_x(
    text: str,
    style: "Style",
    start_x: float,
    available_width: float,
    measurer: Optional[TextMeasurer] = None,
) -> float:
    """
    X origin of a line for the style's alignment.

    Justify is treated as left since word spacing is never stretched.
    """
    if style.align is Align.CENTER:
        return start_x + (available_width - measure(text, style, measurer)) / 2
    if style.align is Align.RIGHT:
        return start_x + available_width - measure(text, style, measurer)
    return start_x


class PillowMeasurer:
    """
    Native measurer backed by Pillow's FreeType bindings.

    The advance width comes from ``getlength`` and the right extent from
    the right edge of ``getbbox`` anchored at the text origin.

    Example:
        >>> measurer = PillowMeasurer()
        >>> width = measure("Name?", Style(font_size=24), measurer)
    """

    def __init__(self, strict: bool = False):
        self._strict = strict

    def __call__(self, text: str, font_descriptor: str, style: "Style") -> NativeMetrics:
        font = load_font(
            style.font_family,
            style.font_size,
            bold=style.bold,
            italic=style.italic,
            strict=self._strict,
        )
        width = float(font.getlength(text))
        _, _, right, _ = font.getbbox(text)
        return NativeMetrics(width=width, right_extent=float(right))


_REPORTLAB_FAMILIES = {
    "serif": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "times new roman": ("Times-Roman", "Times-Bold", "Times-Italic", "Times-BoldItalic"),
    "monospace": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
    "courier new": ("Courier", "Courier-Bold", "Courier-Oblique", "Courier-BoldOblique"),
}
_REPORTLAB_DEFAULT = ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique", "Helvetica-BoldOblique")


class ReportLabMeasurer:
    """
    Native measurer for PDF output using ReportLab font metrics.

    Uses a font registered with ``pdfmetrics`` when the preferred family
    name matches one, otherwise the closest standard Type 1 font. ReportLab
    reports advance widths only, so measure() adds the safety margin.
    """

    def font_name(self, style: "Style") -> str:
        """ReportLab font name used for a style."""
        registered = set(pdfmetrics.getRegisteredFontNames())
        names = family_names(style.font_family)
        if names[0] in registered:
            return names[0]

        variants = _REPORTLAB_DEFAULT
        for name in names:
            if name.lower() in _REPORTLAB_FAMILIES:
                variants = _REPORTLAB_FAMILIES[name.lower()]
                break
        index = (1 if style.bold else 0) + (2 if style.italic else 0)
        return variants[index]

    def __call__(self, text: str, font_descriptor: str, style: "Style") -> NativeMetrics:
        width = pdfmetrics.stringWidth(text, self.font_name(style), style.font_size)
        return NativeMetrics(width=float(width))
