"""
Tests for qna_layout.layout.block

Boxes are 500x200 with padding 10, block gap 10 and a 40% question width.
"""

import pytest

from qna_layout.config import LayoutConfig
from qna_layout.layout.block import compute_block_areas, create_block_layout
from qna_layout.models import LineKind, Rect, Region


def _config(position="left", **overrides):
    values = dict(
        mode="block",
        padding=10,
        block_gap=10,
        question_position=position,
        question_width_percent=40,
    )
    values.update(overrides)
    return LayoutConfig(**values)


class TestComputeBlockAreas:

    @pytest.mark.parametrize(
        "position, question_area, answer_area",
        [
            ("left", Rect(10, 10, 200, 180), Rect(220, 10, 270, 180)),
            ("right", Rect(290, 10, 200, 180), Rect(10, 10, 270, 180)),
            ("top", Rect(10, 10, 480, 10), Rect(10, 30, 480, 160)),
            ("bottom", Rect(10, 180, 480, 10), Rect(10, 10, 480, 160)),
        ],
    )
    def test_areas_when_position_then_expected_rectangles(
        self, question_style, position, question_area, answer_area
    ):
        # Act
        areas = compute_block_areas("Q", question_style, 500, 200, _config(position))

        # Assert
        assert areas == (question_area, answer_area)

    @pytest.mark.parametrize("position", ["left", "right", "top", "bottom"])
    def test_areas_when_any_position_then_disjoint(self, question_style, position):
        # Act
        question_area, answer_area = compute_block_areas(
            "What is the capital of France?", question_style, 500, 200, _config(position)
        )

        # Assert
        assert not question_area.overlaps(answer_area)

    def test_areas_when_percent_above_hundred_then_clamped(self, question_style):
        # Act
        question_area, answer_area = compute_block_areas(
            "Q", question_style, 500, 200, _config(question_width_percent=150)
        )

        # Assert
        assert question_area.width == 500
        assert answer_area.width == 0

    def test_areas_when_top_and_question_wraps_then_question_grows(self, question_style):
        """Three wrapped lines of 10px each."""
        # Act
        question_area, answer_area = compute_block_areas(
            "aaaa bbbb cccc", question_style, 50, 200, _config("top")
        )

        # Assert
        assert question_area.height == pytest.approx(30)
        assert answer_area.y == pytest.approx(50)
        assert answer_area.height == pytest.approx(140)

    def test_areas_when_top_and_question_empty_then_one_font_size_tall(self, question_style):
        # Act
        question_area, _ = compute_block_areas("", question_style, 500, 200, _config("top"))

        # Assert
        assert question_area.height == pytest.approx(10)


class TestCreateBlockLayout:

    def test_block_when_left_then_runs_inside_their_areas(self, question_style, answer_style):
        # Act
        result = create_block_layout("Q", "A", question_style, answer_style, 500, 200, _config())

        # Assert
        assert [(run.text, run.x, run.y, run.region) for run in result.runs] == [
            ("Q", 10, 18, Region.QUESTION),
            ("A", 220, 18, Region.ANSWER),
        ]
        assert result.is_block
        assert result.content_height == 200

    def test_block_when_answer_long_then_never_combined(self, question_style, answer_style):
        # Act
        result = create_block_layout(
            "Name?", "a b c d e f g", question_style, answer_style, 500, 200, _config()
        )

        # Assert
        assert result.combined_line is None
        assert all(position.kind is not LineKind.COMBINED for position in result.line_positions)

    @pytest.mark.parametrize("position", ["right", "bottom"])
    def test_block_when_question_after_answer_then_question_rows_first(
        self, question_style, answer_style, position
    ):
        # Act
        result = create_block_layout("Q", "A", question_style, answer_style, 500, 200, _config(position))

        # Assert
        assert [row.kind for row in result.line_positions] == [
            LineKind.QUESTION,
            LineKind.ANSWER,
        ]

    def test_block_when_ruled_lines_target_answer_then_only_answer_rows(self, question_style, answer_style):
        # Act
        result = create_block_layout(
            "Q", "A", question_style, answer_style, 500, 200,
            _config(ruled_lines_target=Region.ANSWER),
        )

        # Assert
        assert len(result.runs) == 2
        assert [position.kind for position in result.line_positions] == [LineKind.ANSWER]

    def test_block_when_text_overflows_then_content_height_unchanged(self, question_style, answer_style):
        # Act
        result = create_block_layout(
            "Q", "a\nb\nc\nd\ne", question_style, answer_style, 500, 40, _config()
        )

        # Assert
        assert result.content_height == 40
        assert len(result.answer_runs) == 5

    def test_block_when_answer_has_blank_line_then_blank_row(self, question_style, answer_style):
        # Act
        result = create_block_layout("Q", "a\n\nb", question_style, answer_style, 500, 200, _config())

        # Assert
        answer_rows = [position for position in result.line_positions if position.kind is LineKind.ANSWER]
        assert [row.blank for row in answer_rows] == [False, True, False]
        assert result.answer_runs[1].y == pytest.approx(38)
