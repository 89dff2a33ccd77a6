"""
Unit tests for display formatting and legacy equation parsing.
"""

import pytest

from worksheet_toolkit.core.models import (
    AlgebraEquation,
    BasicEquation,
    FillBlanks,
    MultipleChoice,
    WordProblem,
)
from worksheet_toolkit.core.utils.formatting import (
    ANSWER_LINE,
    format_for_display,
    format_lines,
    format_vertical,
    is_number,
    is_valid_operator,
    normalize_operator,
    option_label,
    parse_legacy_equation,
)


class TestOperators:
    """Tests for operator normalization."""

    @pytest.mark.parametrize("raw, expected", [
        ("*", "×"),
        ("x", "×"),
        ("/", "÷"),
        ("−", "-"),
        (" + ", "+"),
        ("÷", "÷"),
    ])
    def test_normalize_operator_when_alias_then_symbol(self, raw, expected):
        assert normalize_operator(raw) == expected

    def test_is_valid_operator_when_unknown_then_false(self):
        assert is_valid_operator("^") is False
        assert is_valid_operator("") is False

    @pytest.mark.parametrize("value, expected", [
        ("12", True),
        ("-3.5", True),
        ("", False),
        ("  ", False),
        ("abc", False),
        ("nan", False),
        ("inf", False),
        (None, False),
    ])
    def test_is_number_when_value_then_expected(self, value, expected):
        assert is_number(value) is expected


class TestFormatLines:
    """Tests for format_lines() and format_for_display()."""

    def test_format_lines_when_basic_equation_then_blank_answer(self):
        assert format_lines(BasicEquation("12", "*", "5")) == ["12 × 5 = ____"]

    def test_format_lines_when_fill_blanks_then_blank_first(self):
        assert format_lines(FillBlanks("+", "5", "17")) == ["____ + 5 = 17"]

    def test_format_lines_when_multiple_choice_then_lettered_options(self):
        lines = format_lines(MultipleChoice("Pick one", ("1", "2", "3")))

        assert lines == ["Pick one", "A) 1", "B) 2", "C) 3"]

    def test_format_lines_when_word_problem_then_answer_line(self):
        assert format_lines(WordProblem("How many?")) == ["How many?", ANSWER_LINE]

    def test_format_lines_when_algebra_then_variable_line(self):
        lines = format_lines(AlgebraEquation("3y = 9", variable="y"))

        assert lines == ["3y = 9", "y = ____"]

    def test_format_for_display_when_multiline_then_joined(self):
        text = format_for_display(AlgebraEquation("2x = 4"))

        assert text == "2x = 4\nx = ____"

    def test_format_lines_when_unsupported_then_raises(self):
        with pytest.raises(TypeError):
            format_lines("5 + 3")

    def test_option_label_when_index_then_letter(self):
        assert option_label(0) == "A)"
        assert option_label(3) == "D)"


class TestFormatVertical:
    """Tests for two-line grid-cell text."""

    def test_format_vertical_when_basic_equation_then_expression_over_answer(self):
        assert format_vertical(BasicEquation("12", "*", "5")) == ["12 × 5", "= ____"]

    def test_format_vertical_when_fill_blanks_then_blank_in_expression(self):
        assert format_vertical(FillBlanks("-", "4", "9")) == ["____ - 4", "= 9"]


class TestParseLegacyEquation:
    """Tests for parse_legacy_equation()."""

    def test_parse_when_standard_text_then_basic_equation(self):
        # Act
        problem = parse_legacy_equation("5 + 3 = ____")

        # Assert
        assert isinstance(problem, BasicEquation)
        assert (problem.left_operand, problem.operator, problem.right_operand) == ("5", "+", "3")

    def test_parse_when_keyboard_operator_then_normalized(self):
        problem = parse_legacy_equation("7 x 8 =")

        assert problem.operator == "×"

    def test_parse_when_negative_left_operand_then_kept(self):
        problem = parse_legacy_equation("-4 - 2 = ____")

        assert problem.left_operand == "-4"
        assert problem.operator == "-"
        assert problem.right_operand == "2"

    @pytest.mark.parametrize("text", [
        "",
        "hello world",
        "5 + = ____",
        "a + b = ____",
        "5 + 3 = 8",
    ])
    def test_parse_when_not_an_equation_then_none(self, text):
        assert parse_legacy_equation(text) is None
