"""
Command-line entry point.

Computes a question/answer layout and prints it as JSON. With --point
the region under that point is added to the output.

Example:
    qna-layout --question "Name?" --answer "Max" --width 300 --height 60
    qna-layout --question "Name?" --no-answer --point 150 50 --height 120
    qna-layout --question "Q" --answer "A" --config-json '{"mode": "block"}'
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .config import LayoutConfig, Style
from .hit_test import classify
from .layout import layout
from .serialization import SerializationError, config_from_json, layout_to_json, style_from_json
from .text.fonts import FontLoadError
from .text.metrics import PillowMeasurer, ReportLabMeasurer, TextMeasurer

logger = logging.getLogger(__name__)


def _build_measurer(name: str) -> Optional[TextMeasurer]:
    if name == "pillow":
        return PillowMeasurer(strict=True)
    if name == "reportlab":
        return ReportLabMeasurer()
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qna-layout",
        description="Lay out a question/answer box and print runs and ruled-line rows as JSON",
    )
    parser.add_argument("--question", default="", help="Question text (use \\n for breaks)")
    parser.add_argument("--answer", default="", help="Answer text (use \\n for breaks)")
    parser.add_argument("--width", type=float, default=400.0, help="Box width in px")
    parser.add_argument("--height", type=float, default=100.0, help="Box height in px")
    parser.add_argument("--padding", type=float, default=4.0, help="Inner padding in px")
    parser.add_argument("--mode", choices=["inline", "block"], default="inline")
    parser.add_argument("--question-position", choices=["left", "right", "top", "bottom"], default="left")
    parser.add_argument("--question-width-percent", type=float, default=40.0)
    parser.add_argument("--block-gap", type=float, default=10.0)
    parser.add_argument("--question-answer-gap", type=float, default=0.0)
    parser.add_argument("--answer-in-new-row", action="store_true")
    parser.add_argument("--font-family", default="Arial, sans-serif")
    parser.add_argument("--font-size", type=float, default=16.0, help="Question font size in px")
    parser.add_argument("--answer-font-size", type=float, default=None, help="Answer font size (defaults to --font-size)")
    parser.add_argument("--measurer", choices=["approx", "pillow", "reportlab"], default="approx")
    parser.add_argument(
        "--config-json",
        default=None,
        help="LayoutConfig as a JSON object; replaces the layout flags",
    )
    parser.add_argument("--question-style-json", default=None, help="Question Style as a JSON object")
    parser.add_argument("--answer-style-json", default=None, help="Answer Style as a JSON object")
    parser.add_argument("--point", type=float, nargs=2, metavar=("X", "Y"), help="Classify this point")
    parser.add_argument(
        "--no-answer",
        dest="answer_exists",
        action="store_false",
        help="Treat the answer as not yet written when classifying",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _build_inputs(args: argparse.Namespace) -> Tuple[Style, Style, LayoutConfig]:
    """Styles and config from flags, or from the JSON flags when given."""
    if args.question_style_json is not None:
        question_style = style_from_json(args.question_style_json, "question_style")
    else:
        question_style = Style(font_family=args.font_family, font_size=args.font_size, bold=True)

    if args.answer_style_json is not None:
        answer_style = style_from_json(args.answer_style_json, "answer_style")
    else:
        answer_style = Style(
            font_family=args.font_family,
            font_size=args.answer_font_size if args.answer_font_size is not None else args.font_size,
        )

    if args.config_json is not None:
        config = config_from_json(args.config_json)
    else:
        config = LayoutConfig(
            mode=args.mode,
            padding=args.padding,
            answer_in_new_row=args.answer_in_new_row,
            question_answer_gap=args.question_answer_gap,
            question_position=args.question_position,
            question_width_percent=args.question_width_percent,
            block_gap=args.block_gap,
        )
    return question_style, answer_style, config


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    try:
        question_style, answer_style, config = _build_inputs(args)
    except SerializationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    question_text = args.question.replace("\\n", "\n")
    answer_text = args.answer.replace("\\n", "\n")
    logger.debug(f"Measuring with {args.measurer}, config {config.to_dict()}")

    try:
        measurer = _build_measurer(args.measurer)
        result = layout(
            question_text,
            answer_text,
            question_style,
            answer_style,
            args.width,
            args.height,
            config=config,
            measurer=measurer,
        )
    except FontLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    extra = None
    if args.point is not None:
        region = classify(
            (args.point[0], args.point[1]),
            result,
            config,
            question_style,
            answer_style,
            args.width,
            args.height,
            answer_exists=args.answer_exists and bool(answer_text),
        )
        extra = {"region": region.value if region is not None else None}

    print(layout_to_json(result, extra=extra))
    return 0


if __name__ == "__main__":
    sys.exit(main())
