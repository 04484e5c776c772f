"""
Tests for qna_layout.layout.inline

All boxes use padding 10 and 10px fonts with small spacing, so every
line is 10px tall and the baseline sits 8px below the line top. Widths
use the approximation of 6px per character.
"""

import pytest

from qna_layout.config import LayoutConfig, Style
from qna_layout.layout.inline import (
    count_leading_breaks,
    create_inline_layout,
    inline_gap,
    split_for_inline,
)
from qna_layout.models import LineKind, Region


def _layout(question, answer, q_style, a_style, width=300, height=50, **config):
    config.setdefault("padding", 10)
    return create_inline_layout(
        question, answer, q_style, a_style, width, height, LayoutConfig(**config)
    )


class TestInlineCombination:
    """Answer continuing on the last question line."""

    def test_inline_when_answer_fits_then_shares_question_line(self, question_style, answer_style):
        """'Name?' is 30px wide, gap 5px, so 'Max' starts at 10 + 30 + 5."""
        # Act
        result = _layout("Name?", "Max", question_style, answer_style)

        # Assert
        assert [(run.text, run.x, run.y) for run in result.runs] == [
            ("Name?", 10, 18),
            ("Max", 45, 18),
        ]
        assert [run.region for run in result.runs] == [Region.QUESTION, Region.ANSWER]
        assert len(result.line_positions) == 1
        combined = result.line_positions[0]
        assert combined.kind is LineKind.COMBINED
        assert combined.y == pytest.approx(30)
        assert combined.line_height == pytest.approx(10)
        assert combined.question_style == question_style
        assert result.content_height == 50

    @pytest.mark.parametrize(
        "align, question_x, answer_x",
        [("center", 123.5, 158.5), ("right", 237.0, 272.0)],
    )
    def test_inline_when_question_aligned_then_combined_line_aligned_as_unit(
        self, answer_style, align, question_x, answer_x
    ):
        """The shared line (30 + 5 + 18 = 53px) is aligned inside 280px."""
        # Arrange
        question_style = Style(font_size=10, bold=True, paragraph_spacing="small", align=align)

        # Act
        result = _layout("Name?", "Max", question_style, answer_style)

        # Assert
        assert result.runs[0].x == pytest.approx(question_x)
        assert result.runs[1].x == pytest.approx(answer_x)

    def test_inline_when_answer_partly_fits_then_rest_wraps_below(self, question_style, answer_style):
        """Width 100: 45px remain, so 'aa bb' (30px) fits and 'cc dd' moves down."""
        # Act
        result = _layout("Name?", "aa bb cc dd", question_style, answer_style, width=100)

        # Assert
        assert [(run.text, run.y) for run in result.runs] == [
            ("Name?", 18),
            ("aa bb", 18),
            ("cc dd", 28),
        ]
        kinds = [position.kind for position in result.line_positions]
        assert kinds == [LineKind.COMBINED, LineKind.ANSWER]

    def test_inline_when_first_word_does_not_fit_then_answer_below(self, question_style, answer_style):
        """Width 60: only 5px remain after the question."""
        # Act
        result = _layout("Name?", "Max", question_style, answer_style, width=60)

        # Assert
        assert result.combined_line is None
        assert result.runs[1].x == 10
        assert result.runs[1].y == pytest.approx(30)  # 20 + 0.2 * 10 + 8

    def test_inline_when_question_wraps_then_combines_on_last_line(self, question_style, answer_style):
        """Width 70: 'one two' / 'three', then 15px remain for 'ok' (12px)."""
        # Act
        result = _layout("one two three", "ok", question_style, answer_style, width=70)

        # Assert
        assert [(run.text, run.y) for run in result.runs] == [
            ("one two", 18),
            ("three", 28),
            ("ok", 28),
        ]
        assert [position.kind for position in result.line_positions] == [
            LineKind.QUESTION,
            LineKind.COMBINED,
        ]

    def test_inline_when_answer_font_larger_then_combined_line_uses_larger_metrics(self, question_style):
        """20px answer: baseline 10 + 16, gap min(32, 10) = 10, row height 20."""
        # Arrange
        answer_style = Style(font_size=20, paragraph_spacing="small")

        # Act
        result = _layout("Name?", "Max More", question_style, answer_style, width=100)

        # Assert
        question_run, answer_run = result.runs[0], result.runs[1]
        assert question_run.y == pytest.approx(26)
        assert answer_run.y == pytest.approx(26)
        assert answer_run.x == pytest.approx(50)
        assert result.line_positions[0].line_height == pytest.approx(20)
        # 'More' continues at cursor 30
        assert result.runs[2].y == pytest.approx(46)

    def test_inline_when_gap_configured_then_added_horizontally(self, question_style, answer_style):
        # Act
        result = _layout("Name?", "Max", question_style, answer_style, question_answer_gap=7)

        # Assert
        assert result.runs[1].x == pytest.approx(52)


class TestLeadingBreaks:
    """Answers starting with explicit line breaks."""

    def test_inline_when_single_leading_break_then_next_row_without_blank(
        self, question_style, answer_style
    ):
        # Act
        result = _layout("Name?", "\nMax", question_style, answer_style)

        # Assert
        assert result.runs[1].y == pytest.approx(30)
        assert [position.blank for position in result.line_positions] == [False, False]

    def test_inline_when_two_leading_breaks_then_one_blank_row(self, question_style, answer_style):
        # Act
        result = _layout("Name?", "\n\nMax", question_style, answer_style)

        # Assert
        assert [run.text for run in result.runs] == ["Name?", "Max"]
        assert result.runs[1].y == pytest.approx(40)
        rows = [(position.kind, position.y, position.blank) for position in result.line_positions]
        assert rows == [
            (LineKind.QUESTION, pytest.approx(30), False),
            (LineKind.ANSWER, pytest.approx(42), True),
            (LineKind.ANSWER, pytest.approx(52), False),
        ]

    def test_inline_when_answer_in_new_row_then_vertical_gap_applied(self, question_style, answer_style):
        """20 + 2 (spacing) + 6 (gap) + 8 (baseline)."""
        # Act
        result = _layout(
            "Name?", "Max", question_style, answer_style,
            answer_in_new_row=True, question_answer_gap=6,
        )

        # Assert
        assert result.combined_line is None
        assert result.runs[1].y == pytest.approx(36)

    def test_inline_when_blank_line_inside_answer_then_blank_row_kept(self, question_style, answer_style):
        # Act
        result = _layout("Name?", "Max\n\nfoo", question_style, answer_style)

        # Assert
        assert [(run.text, run.y) for run in result.runs] == [
            ("Name?", 18),
            ("Max", 18),
            ("foo", 38),
        ]
        blank_rows = [position for position in result.line_positions if position.blank]
        assert len(blank_rows) == 1
        assert blank_rows[0].y == pytest.approx(40)


class TestEdgeCases:

    def test_inline_when_question_empty_then_answer_starts_at_padding(self, question_style, answer_style):
        # Act
        result = _layout("", "Max", question_style, answer_style)

        # Assert
        assert [(run.text, run.x, run.y) for run in result.runs] == [("Max", 10, 18)]
        assert result.combined_line is None

    def test_inline_when_both_empty_then_nothing_emitted(self, question_style, answer_style):
        # Act
        result = _layout("", "", question_style, answer_style)

        # Assert
        assert result.runs == ()
        assert result.line_positions == ()
        assert result.content_height == 50

    def test_inline_when_answer_whitespace_only_then_no_combination(self, question_style, answer_style):
        # Act
        result = _layout("Name?", "   ", question_style, answer_style)

        # Assert
        assert [run.text for run in result.runs] == ["Name?"]
        assert result.combined_line is None

    def test_inline_when_last_question_line_blank_then_no_combination(self, question_style, answer_style):
        # Act
        result = _layout("Name?\n", "Max", question_style, answer_style)

        # Assert
        assert result.combined_line is None
        assert result.runs[-1].y == pytest.approx(40)  # 30 + 2 + 8

    def test_inline_when_text_overflows_then_content_height_grows(self, question_style, answer_style):
        # Act
        result = _layout("Name?", "a\nb\nc\nd\ne", question_style, answer_style, height=30)

        # Assert
        assert result.content_height == pytest.approx(60)  # "a" inline, four rows below

    def test_inline_when_box_narrow_then_available_width_has_floor(self, question_style, answer_style):
        """A box narrower than its padding still wraps one word per line."""
        # Act
        result = _layout("a b", "", question_style, answer_style, width=5)

        # Assert
        assert [run.text for run in result.runs] == ["a", "b"]


class TestHelpers:

    @pytest.mark.parametrize("text, expected", [("", 0), ("abc", 0), ("\nabc", 1), ("\n\n\n", 3)])
    def test_count_leading_breaks_when_text_then_breaks_before_content(self, text, expected):
        assert count_leading_breaks(text) == expected

    def test_inline_gap_when_answer_in_new_row_then_user_gap_not_horizontal(self, answer_style):
        assert inline_gap(answer_style, LayoutConfig(question_answer_gap=6)) == pytest.approx(11)
        assert inline_gap(
            answer_style, LayoutConfig(question_answer_gap=6, answer_in_new_row=True)
        ) == pytest.approx(5)

    def test_inline_gap_when_large_font_then_capped(self):
        assert inline_gap(Style(font_size=100), LayoutConfig()) == pytest.approx(32)

    def test_split_for_inline_when_later_paragraphs_then_kept_in_remaining(self, answer_style):
        # Act
        combination = split_for_inline("aa bb cc\nnext", answer_style, remaining_width=31)

        # Assert
        assert combination.text == "aa bb"
        assert combination.words_used == 2
        assert combination.remaining == "cc\nnext"

    def test_split_for_inline_when_first_word_too_wide_then_none(self, answer_style):
        assert split_for_inline("wide", answer_style, remaining_width=24) is None
