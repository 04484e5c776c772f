"""Top-level package for the question/answer layout engine.

Provides subpackages:
- qna_layout.text – measurement, fonts and word wrapping
- qna_layout.layout – inline and block question/answer layout
- qna_layout.hit_test – point to question/answer region classifier
"""

from .config import (
    Align,
    LayoutConfig,
    LayoutMode,
    ParagraphSpacing,
    QuestionPosition,
    Style,
)
from .models import LayoutResult, LineKind, LinePosition, Rect, Region, TextRun, WrappedLine
from .text import (
    MeasurementCache,
    NativeMetrics,
    PillowMeasurer,
    ReportLabMeasurer,
    measure,
    wrap,
)
from .layout import layout
from .hit_test import classify
from .serialization import (
    SerializationError,
    config_from_dict,
    layout_from_dict,
    layout_from_json,
    layout_to_json,
    style_from_dict,
)


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("qna-layout")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__ = [
    "__version__",
    # Config
    "Align",
    "LayoutConfig",
    "LayoutMode",
    "ParagraphSpacing",
    "QuestionPosition",
    "Style",
    # Models
    "LayoutResult",
    "LineKind",
    "LinePosition",
    "Rect",
    "Region",
    "TextRun",
    "WrappedLine",
    # Measurement
    "MeasurementCache",
    "NativeMetrics",
    "PillowMeasurer",
    "ReportLabMeasurer",
    # Operations
    "measure",
    "wrap",
    "layout",
    "classify",
    # Serialization
    "SerializationError",
    "config_from_dict",
    "layout_from_dict",
    "layout_from_json",
    "layout_to_json",
    "style_from_dict",
]
