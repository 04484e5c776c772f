"""Centralized threshold and magic number configuration.

This module contains the ratios and pixel constants used by the text
metrics, wrapping, layout and hit-testing code. Having these in one
place makes tuning easier and keeps the forward layout and the
hit-test reading the same numbers.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MetricsThresholds:
    """Ratios used when measuring text."""

    baseline_ratio: float = 0.8  # Baseline sits at font_size * 0.8 below line top
    fallback_char_width_ratio: float = 0.6  # Approximate glyph advance without a measurer
    position_safety_ratio: float = 0.12  # Overhang margin for positioning (no right extent)
    wrap_safety_ratio: float = 0.05  # Overhang margin for wrap decisions (no right extent)


@dataclass(frozen=True)
class InlineLayoutThresholds:
    """Thresholds for the inline (flowing) question/answer layout."""

    min_available_width: float = 10.0  # Floor for width - 2 * padding
    inline_gap_max_px: float = 32.0  # Cap for the base question/answer gap
    inline_gap_font_ratio: float = 0.5  # Base gap as a share of answer font size
    answer_spacing_ratio: float = 0.2  # Extra space above a separated answer (x answer line height)


@dataclass(frozen=True)
class HitTestThresholds:
    """Thresholds for mapping pointer positions to regions."""

    baseline_tolerance_px: float = 1.0  # Runs closer than this share a baseline
    combined_split_margin_px: float = 10.0  # Answer starts this far left of its first glyph
    empty_answer_offset_ratio: float = 0.2  # Empty answer band starts below last question line


@dataclass(frozen=True)
class RuledLineThresholds:
    """Defaults for ruled line placement."""

    screen_baseline_offset_px: float = 12.0  # Ruled line below the baseline on screen
    print_baseline_offset_px: float = -20.0  # Printed output moves lines above the baseline


# Global instances for easy import
METRICS_THRESHOLDS = MetricsThresholds()
INLINE_THRESHOLDS = InlineLayoutThresholds()
HIT_TEST_THRESHOLDS = HitTestThresholds()
RULED_LINE_THRESHOLDS = RuledLineThresholds()
