"""
Module: qna_layout.layout.emitter

Purpose:
    Shared run and ruled-line emission for the layout builders.
    Every rendered or blank row appends exactly one LinePosition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from qna_layout.models import LineKind, LinePosition, Region, TextRun
from qna_layout.text.metrics import baseline_offset

if TYPE_CHECKING:
    from qna_layout.config import Style


@dataclass
class RowEmitter:
    """
    Mutable collector for one layout call.

    Attributes:
        ruled_line_offset: Distance from baseline to ruled line
        runs: Runs emitted so far
        line_positions: Rows emitted so far
    """

    ruled_line_offset: float
    runs: List[TextRun] = field(default_factory=list)
    line_positions: List[LinePosition] = field(default_factory=list)

    def text_row(
        self,
        text: str,
        x: float,
        line_top: float,
        style: "Style",
        region: Region,
        *,
        ruled: bool = True,
    ) -> float:
        """
        Emit a run and its ruled-line row.

        Returns:
            Baseline Y of the emitted run
        """
        baseline = line_top + baseline_offset(style)
        self.runs.append(TextRun(text=text, x=x, y=baseline, style=style, region=region))
        if ruled:
            self._row(baseline, style, LineKind.for_region(region), blank=False)
        return baseline

    def blank_row(self, line_top: float, style: "Style", region: Region, *, ruled: bool = True) -> None:
        """Reserve a row for an explicit line break (no run)."""
        if ruled:
            self._row(line_top + baseline_offset(style), style, LineKind.for_region(region), blank=True)

    def combine_last_row(self, baseline: float, line_height: float, answer_style: "Style", question_style: "Style") -> None:
        """Replace the last row with the shared question/answer row."""
        self.line_positions[-1] = LinePosition(
            y=baseline + self.ruled_line_offset,
            line_height=line_height,
            style=answer_style,
            kind=LineKind.COMBINED,
            blank=False,
            question_style=question_style,
        )

    def _row(self, baseline: float, style: "Style", kind: LineKind, blank: bool) -> None:
        self.line_positions.append(
            LinePosition(
                y=baseline + self.ruled_line_offset,
                line_height=style.line_height,
                style=style,
                kind=kind,
                blank=blank,
            )
        )
