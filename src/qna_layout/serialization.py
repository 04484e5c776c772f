"""
Serialization Utilities

Provides to/from JSON utilities for layout models.

- All models have `to_dict()`; this module adds the matching
  `*_from_dict()` readers and JSON helpers
- Enums serialize to their string values
- Malformed payloads raise SerializationError instead of producing
  half-built models
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from .config import Align, LayoutConfig, ParagraphSpacing, Style, coerce_enum
from .models import LayoutResult, LineKind, LinePosition, Rect, Region, TextRun


class SerializationError(ValueError):
    """Raised when a payload cannot be turned into a model."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


def _require(data: Mapping[str, Any], key: str, path: str) -> Any:
    if not isinstance(data, Mapping):
        raise SerializationError(f"expected an object, got {type(data).__name__}", path)
    if key not in data:
        raise SerializationError(f"missing key {key!r}", path)
    return data[key]


def _enum(enum_cls, value: Any, path: str):
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise SerializationError(f"invalid {enum_cls.__name__} value {value!r}", path) from exc


def _number(data: Mapping[str, Any], key: str, path: str) -> float:
    value = _require(data, key, path)
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"{key!r} is not a number: {value!r}", path) from exc


def _optional_region(value: Any, path: str) -> Optional[Region]:
    return None if value is None else _enum(Region, value, path)


# ─────────────────────────────────────────────────────────────────────────────
# Styles and configuration
# ─────────────────────────────────────────────────────────────────────────────

def style_from_dict(data: Mapping[str, Any], path: str = "style") -> Style:
    """
    Build a Style from a dictionary.

    Missing keys take Style defaults. Unknown spacing/alignment values
    fall back to the defaults, matching Style's clamping behavior.
    """
    if not isinstance(data, Mapping):
        raise SerializationError(f"expected an object, got {type(data).__name__}", path)
    defaults = Style()
    try:
        return Style(
            font_family=str(data.get("font_family", defaults.font_family)),
            font_size=float(data.get("font_size", defaults.font_size)),
            bold=bool(data.get("bold", defaults.bold)),
            italic=bool(data.get("italic", defaults.italic)),
            color=str(data.get("color", defaults.color)),
            opacity=float(data.get("opacity", defaults.opacity)),
            paragraph_spacing=coerce_enum(
                ParagraphSpacing, data.get("paragraph_spacing"), defaults.paragraph_spacing
            ),
            align=coerce_enum(Align, data.get("align"), defaults.align),
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc), path) from exc


def config_from_dict(data: Mapping[str, Any], path: str = "config") -> LayoutConfig:
    """Build a LayoutConfig from a dictionary; missing keys take defaults."""
    if not isinstance(data, Mapping):
        raise SerializationError(f"expected an object, got {type(data).__name__}", path)
    known = set(LayoutConfig.__dataclass_fields__)
    unknown = set(data) - known
    if unknown:
        raise SerializationError(f"unknown keys {sorted(unknown)}", path)
    try:
        return LayoutConfig(**dict(data))
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc), path) from exc


# ─────────────────────────────────────────────────────────────────────────────
# Layout results
# ─────────────────────────────────────────────────────────────────────────────

def rect_from_dict(data: Optional[Mapping[str, Any]], path: str = "rect") -> Optional[Rect]:
    if data is None:
        return None
    return Rect(
        x=_number(data, "x", path),
        y=_number(data, "y", path),
        width=_number(data, "width", path),
        height=_number(data, "height", path),
    )


def run_from_dict(data: Mapping[str, Any], path: str = "run") -> TextRun:
    return TextRun(
        text=str(_require(data, "text", path)),
        x=_number(data, "x", path),
        y=_number(data, "y", path),
        style=style_from_dict(_require(data, "style", path), f"{path}.style"),
        region=_optional_region(data.get("region"), f"{path}.region"),
    )


def line_position_from_dict(data: Mapping[str, Any], path: str = "line_position") -> LinePosition:
    question_style = data.get("question_style") if isinstance(data, Mapping) else None
    return LinePosition(
        y=_number(data, "y", path),
        line_height=_number(data, "line_height", path),
        style=style_from_dict(_require(data, "style", path), f"{path}.style"),
        kind=_enum(LineKind, data.get("kind", LineKind.ANSWER.value), f"{path}.kind"),
        blank=bool(data.get("blank", False)),
        question_style=(
            style_from_dict(question_style, f"{path}.question_style") if question_style else None
        ),
    )


def layout_from_dict(data: Mapping[str, Any]) -> LayoutResult:
    """
    Deserialize a LayoutResult.

    Raises:
        SerializationError: If required keys are missing or values are invalid
    """
    runs = _require(data, "runs", "layout")
    positions = _require(data, "line_positions", "layout")
    return LayoutResult(
        runs=tuple(run_from_dict(run, f"layout.runs[{i}]") for i, run in enumerate(runs)),
        content_height=_number(data, "content_height", "layout"),
        line_positions=tuple(
            line_position_from_dict(position, f"layout.line_positions[{i}]")
            for i, position in enumerate(positions)
        ),
        question_area=rect_from_dict(data.get("question_area"), "layout.question_area"),
        answer_area=rect_from_dict(data.get("answer_area"), "layout.answer_area"),
    )


def layout_to_json(
    result: LayoutResult,
    *,
    indent: Optional[int] = 2,
    extra: Optional[Mapping[str, Any]] = None,
) -> str:
    """
    Serialize a LayoutResult to a JSON string.

    Keys in extra (e.g. a classified region) are added at the top level.
    """
    data = result.to_dict()
    if extra:
        data.update(extra)
    return json.dumps(data, indent=indent)


def _load_json(payload: str, path: str) -> Any:
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"invalid JSON: {exc}", path) from exc


def layout_from_json(payload: str) -> LayoutResult:
    """Parse a JSON string produced by layout_to_json()."""
    return layout_from_dict(_load_json(payload, ""))


def style_from_json(payload: str, path: str = "style") -> Style:
    return style_from_dict(_load_json(payload, path), path)


def config_from_json(payload: str, path: str = "config") -> LayoutConfig:
    return config_from_dict(_load_json(payload, path), path)
