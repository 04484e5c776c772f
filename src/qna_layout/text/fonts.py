"""
Module: qna_layout.text.fonts

Purpose:
    Font family resolution and font loading.
    Turns a CSS-like family list plus weight/style into a font descriptor
    string and a Pillow FreeType font for measurement.

Key Functions:
    - resolve_font_family(): Normalize a family string
    - build_font(): Font descriptor for a Style
    - load_font(): Load a Pillow font with fallbacks

Dependencies:
    - PIL: TrueType font loading

Used By:
    - qna_layout.config: Style.font_descriptor
    - qna_layout.text.metrics: PillowMeasurer
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import TYPE_CHECKING, List, Union

from PIL import ImageFont

if TYPE_CHECKING:
    from qna_layout.config import Style

logger = logging.getLogger(__name__)

DEFAULT_FAMILY = "Arial, sans-serif"

# Generic CSS families mapped to font files commonly installed on each platform
_GENERIC_FAMILIES = {
    "sans-serif": ["Arial", "DejaVuSans", "LiberationSans-Regular"],
    "serif": ["Times New Roman", "DejaVuSerif", "LiberationSerif-Regular"],
    "monospace": ["Courier New", "DejaVuSansMono", "LiberationMono-Regular"],
    "cursive": ["Comic Sans MS", "DejaVuSans"],
}

_FALLBACK_FILES = [
    "arial.ttf",
    "Arial.ttf",
    "DejaVuSans.ttf",
    "LiberationSans-Regular.ttf",
]

_QUOTES = re.compile(r"['\"]")

PillowFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class FontLoadError(Exception):
    """Raised when no candidate font file can be opened in strict mode."""

    def __init__(self, message: str, candidates: List[str] | None = None):
        super().__init__(message)
        self.candidates = candidates or []


def resolve_font_family(font_family: str | None) -> str:
    """
    Normalize a font family string.

    Strips quotes and normalizes the spacing around commas. Empty input
    resolves to the default family.

    Args:
        font_family: Raw family string, e.g. ``"'Times New Roman', serif"``

    Returns:
        Normalized family list, e.g. ``"Times New Roman, serif"``

    Example:
        >>> resolve_font_family("'Times New Roman',serif")
        'Times New Roman, serif'
    """
    if not font_family:
        return DEFAULT_FAMILY
    parts = [_QUOTES.sub("", part).strip() for part in font_family.split(",")]
    parts = [part for part in parts if part]
    if not parts:
        return DEFAULT_FAMILY
    return ", ".join(parts)


def family_names(font_family: str | None) -> List[str]:
    """Split a family list into individual names, preferred first."""
    return [name.strip() for name in resolve_font_family(font_family).split(",")]


def build_font(style: "Style") -> str:
    """
    Build the font descriptor string for a style.

    Format matches CSS shorthand: ``"[bold ][italic ]<size>px <family>"``.
    The descriptor is what native measurers receive and what measurement
    caches key on.
    """
    weight = "bold " if style.bold else ""
    italic = "italic " if style.italic else ""
    size = f"{style.font_size:g}"
    return f"{weight}{italic}{size}px {resolve_font_family(style.font_family)}"


def _candidate_files(font_family: str | None, bold: bool, italic: bool) -> List[str]:
    """Font file names to try, most specific first."""
    names: List[str] = []
    for name in family_names(font_family):
        names.extend(_GENERIC_FAMILIES.get(name.lower(), [name]))

    if bold and italic:
        suffixes = [" Bold Italic", "-BoldItalic", "bi", "z"]
    elif bold:
        suffixes = [" Bold", "-Bold", "bd"]
    elif italic:
        suffixes = [" Italic", "-Italic", "i"]
    else:
        suffixes = []

    candidates: List[str] = []
    for name in names:
        compact = name.replace(" ", "")
        for suffix in suffixes:
            candidates.append(f"{name}{suffix}.ttf")
            candidates.append(f"{compact}{suffix}.ttf")
        candidates.append(f"{name}.ttf")
        candidates.append(f"{compact}.ttf")
        candidates.append(f"{compact.lower()}.ttf")
    candidates.extend(_FALLBACK_FILES)
    # Preserve order, drop duplicates
    return list(dict.fromkeys(candidates))


@lru_cache(maxsize=64)
def load_font(
    font_family: str | None,
    size: float,
    bold: bool = False,
    italic: bool = False,
    strict: bool = False,
) -> PillowFont:
    """
    Load a TrueType font for measurement.

    Tries the requested family (with weight/style variants), then common
    system fonts. Falls back to Pillow's default font if nothing loads.

    Args:
        font_family: CSS-like family list
        size: Font size in px
        bold: Prefer bold variants
        italic: Prefer italic variants
        strict: Raise FontLoadError instead of using the default font

    Returns:
        Font object

    Raises:
        FontLoadError: strict=True and no candidate could be opened
    """
    candidates = _candidate_files(font_family, bold, italic)
    for font_name in candidates:
        try:
            return ImageFont.truetype(font_name, size)
        except (IOError, OSError):
            continue

    if strict:
        raise FontLoadError(
            f"No TrueType font found for {resolve_font_family(font_family)!r}",
            candidates=candidates,
        )

    logger.warning(f"Could not load TrueType font for {font_family!r}, using default")
    return ImageFont.load_default(size)
