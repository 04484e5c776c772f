"""
Module: qna_layout.layout

Purpose:
    Question/answer box layout.
    Converts two texts and their styles into positioned runs and ruled-line rows.

Key Functions:
    - layout(): Main entry point
    - create_inline_layout(): Flowing layout with inline combination
    - create_block_layout(): Fixed question/answer areas

Used By:
    - qna_layout.hit_test
    - qna_layout.cli
"""

from .block import compute_block_areas, create_block_layout
from .composer import layout
from .inline import create_inline_layout

__all__ = [
    "layout",
    "create_inline_layout",
    "create_block_layout",
    "compute_block_areas",
]
