"""
Module: qna_layout.text

Purpose:
    Text measurement, font handling and word wrapping.

Key Functions:
    - measure(): Width for positioning
    - wrap(): Greedy word wrap

Key Classes:
    - NativeMetrics, PillowMeasurer, ReportLabMeasurer: Measurement backends
    - MeasurementCache: Caller-owned LRU memo over a measurer
"""

from .fonts import FontLoadError, build_font, load_font, resolve_font_family
from .metrics import (
    NativeMetrics,
    PillowMeasurer,
    ReportLabMeasurer,
    TextMeasurer,
    baseline_offset,
    calculate_text_x,
    line_height,
    measure,
    measure_for_wrapping,
)
from .cache import MeasurementCache
from .wrapper import wrap

__all__ = [
    # Fonts
    "FontLoadError",
    "build_font",
    "load_font",
    "resolve_font_family",
    # Metrics
    "NativeMetrics",
    "PillowMeasurer",
    "ReportLabMeasurer",
    "TextMeasurer",
    "baseline_offset",
    "calculate_text_x",
    "line_height",
    "measure",
    "measure_for_wrapping",
    "MeasurementCache",
    # Wrapping
    "wrap",
]
