"""
Unit tests for the height model and content budget.
"""

import pytest

from worksheet_toolkit.builder.layout.config import LayoutConfig
from worksheet_toolkit.builder.layout.heights import (
    content_budget,
    estimate_height,
    estimate_word_lines,
    footnote_reserve,
    header_height,
    problem_cost,
)
from worksheet_toolkit.builder.layout.units import PageGeometry
from worksheet_toolkit.core.models import (
    AlgebraEquation,
    BasicEquation,
    FillBlanks,
    MultipleChoice,
    WordProblem,
    WorksheetLayout,
    WorksheetSettings,
)

SINGLE = WorksheetLayout.SINGLE_COLUMN
TWO = WorksheetLayout.TWO_COLUMN
GRID = WorksheetLayout.COMPACT_GRID

HEADER_IN = 20 / 72 + 0.3 + 0.2 + 0.5 + 0.4


class TestLayoutConfig:
    """Tests for LayoutConfig validation."""

    def test_init_when_defaults_then_valid(self):
        config = LayoutConfig()

        assert config.problem_spacing == 0.2
        assert config.grid_columns == 10

    def test_init_when_zero_spacing_then_allowed(self):
        assert LayoutConfig(problem_spacing=0).problem_spacing == 0

    @pytest.mark.parametrize("kwargs", [
        {"problem_spacing": -0.1},
        {"equation_height": 0},
        {"chars_per_line": 0},
        {"grid_columns": -1},
    ])
    def test_init_when_invalid_then_raises(self, kwargs):
        with pytest.raises(ValueError):
            LayoutConfig(**kwargs)


class TestEstimateHeight:
    """Tests for estimate_height()."""

    @pytest.mark.parametrize("layout, expected", [(SINGLE, 0.3), (GRID, 0.3), (TWO, 0.25)])
    def test_estimate_when_basic_equation_then_layout_constant(self, layout, expected):
        assert estimate_height(BasicEquation("1", "+", "2"), layout) == pytest.approx(expected)

    def test_estimate_when_fill_blanks_then_same_as_equation(self):
        assert estimate_height(FillBlanks("+", "1", "2"), TWO) == pytest.approx(0.25)

    def test_estimate_when_multiple_choice_then_question_plus_options(self):
        problem = MultipleChoice("Q", ("a", "b", "c", "d"))

        assert estimate_height(problem, SINGLE) == pytest.approx(0.25 + 4 * 0.2)

    def test_estimate_when_multiple_choice_no_options_then_question_only(self):
        assert estimate_height(MultipleChoice("Q", ()), SINGLE) == pytest.approx(0.25)

    def test_estimate_when_short_word_problem_then_one_line(self):
        assert estimate_height(WordProblem("short"), SINGLE) == pytest.approx(0.25 + 0.4)

    def test_estimate_when_long_word_problem_then_extra_lines(self):
        # 200 chars at 80 per line = 3 lines
        problem = WordProblem("a" * 200)

        assert estimate_height(problem, TWO) == pytest.approx(0.25 + 2 * 0.2 + 0.4)

    def test_estimate_when_algebra_then_two_lines(self):
        assert estimate_height(AlgebraEquation("2x = 4"), SINGLE) == pytest.approx(0.6)

    def test_estimate_when_fields_missing_then_finite_height(self):
        """Missing text counts as empty and missing options as none."""
        assert estimate_height(WordProblem(None), SINGLE) == pytest.approx(0.65)
        assert estimate_height(MultipleChoice("Q", None), TWO) == pytest.approx(0.25)

    def test_estimate_when_unknown_type_then_raises(self):
        with pytest.raises(TypeError):
            estimate_height("5 + 3", SINGLE)

    def test_estimate_word_lines_when_exact_multiple_then_no_extra_line(self):
        assert estimate_word_lines("a" * 80, 80) == 1
        assert estimate_word_lines(None, 80) == 1

    def test_problem_cost_when_scaled_then_height_plus_spacing_times_scale(self):
        cost = problem_cost(BasicEquation("1", "+", "2"), SINGLE, scale=2.0)

        assert cost == pytest.approx((0.3 + 0.2) * 2.0)


class TestContentBudget:
    """Tests for header_height() and content_budget()."""

    def test_header_height_when_unscaled_then_sum_of_parts(self):
        assert header_height() == pytest.approx(HEADER_IN)

    def test_header_height_when_scaled_then_proportional(self):
        assert header_height(1.5) == pytest.approx(HEADER_IN * 1.5)

    def test_content_budget_when_letter_page_then_expected(self):
        budget = content_budget(WorksheetSettings(), PageGeometry())

        assert budget == pytest.approx(9.5 - HEADER_IN)

    def test_content_budget_when_footnote_then_reserve_subtracted(self):
        plain = content_budget(WorksheetSettings(), PageGeometry())
        with_note = content_budget(WorksheetSettings(footnote="Show work"), PageGeometry())

        assert plain - with_note == pytest.approx(0.3)

    def test_footnote_reserve_when_blank_footnote_then_zero(self):
        assert footnote_reserve(WorksheetSettings(footnote=" ")) == 0.0

    def test_content_budget_when_scaled_then_header_grows(self):
        budget = content_budget(WorksheetSettings(), PageGeometry(), scale=2.0)

        assert budget == pytest.approx(9.5 - 2 * HEADER_IN)
