import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import qna_layout
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from qna_layout.config import LayoutConfig, Style  # noqa: E402
from qna_layout.text.metrics import NativeMetrics  # noqa: E402


class FakeMeasurer:
    """
    Deterministic native measurer.

    Advance width is half the font size per character; the right extent
    adds a fixed overhang so tests can tell the two apart.
    """

    def __init__(self, overhang: float | None = 1.0):
        self.overhang = overhang
        self.calls: list[tuple[str, str]] = []

    def __call__(self, text, font_descriptor, style):
        self.calls.append((text, font_descriptor))
        width = len(text) * style.font_size * 0.5
        right = None if self.overhang is None else width + self.overhang
        return NativeMetrics(width=width, right_extent=right)


# Common test fixtures
@pytest.fixture
def question_style():
    """Question style: 10px, small spacing (line height 10)."""
    return Style(font_size=10, bold=True, paragraph_spacing="small")


@pytest.fixture
def answer_style():
    """Answer style: 10px, small spacing (line height 10)."""
    return Style(font_size=10, paragraph_spacing="small", color="#1a4")


@pytest.fixture
def inline_config():
    """Inline config with round numbers."""
    return LayoutConfig(padding=10)


@pytest.fixture
def fake_measurer():
    return FakeMeasurer()


@pytest.fixture
def make_measurer():
    """Factory for FakeMeasurer with a custom overhang (None = no right extent)."""
    return FakeMeasurer
