"""
Unit tests for problem and settings models.
"""

import dataclasses

import pytest

from worksheet_toolkit.core.models import (
    AlgebraEquation,
    BasicEquation,
    FillBlanks,
    MultipleChoice,
    ProblemKind,
    WordProblem,
    WorksheetLayout,
    WorksheetSettings,
    is_grid_eligible,
    new_problem_id,
)


class TestProblemModels:
    """Tests for the Problem variants."""

    def test_kind_when_each_variant_then_matches_discriminator(self, mixed_problems):
        """Each variant should expose its kind as a class attribute."""
        kinds = [problem.kind for problem in mixed_problems]

        assert kinds == [
            ProblemKind.BASIC_EQUATION,
            ProblemKind.MULTIPLE_CHOICE,
            ProblemKind.WORD_PROBLEM,
            ProblemKind.FILL_BLANKS,
            ProblemKind.ALGEBRA_EQUATION,
        ]

    def test_id_when_not_given_then_generated_and_unique(self):
        """Problems get an opaque id by default."""
        a = BasicEquation("1", "+", "2")
        b = BasicEquation("1", "+", "2")

        assert a.id and b.id
        assert a.id != b.id

    def test_new_problem_id_when_called_then_short_hex(self):
        """Ids are 9 hex characters."""
        problem_id = new_problem_id()

        assert len(problem_id) == 9
        int(problem_id, 16)

    def test_problem_when_mutated_then_raises(self):
        """Problems are immutable."""
        problem = WordProblem("text")

        with pytest.raises(dataclasses.FrozenInstanceError):
            problem.problem_text = "other"

    def test_algebra_variable_when_not_given_then_x(self):
        assert AlgebraEquation("2x = 4").variable == "x"

    def test_kind_str_when_formatted_then_wire_value(self):
        assert str(ProblemKind.FILL_BLANKS) == "fill-blanks"


class TestGridEligibility:
    """Tests for is_grid_eligible()."""

    @pytest.mark.parametrize("problem, expected", [
        (BasicEquation("1", "+", "2"), True),
        (FillBlanks("-", "2", "5"), True),
        (MultipleChoice("Q", ("a", "b")), False),
        (WordProblem("text"), False),
        (AlgebraEquation("x + 1 = 2"), False),
    ])
    def test_is_grid_eligible_when_variant_then_expected(self, problem, expected):
        assert is_grid_eligible(problem) is expected


class TestWorksheetSettings:
    """Tests for WorksheetSettings and WorksheetLayout."""

    def test_init_when_defaults_then_single_column_without_footnote(self):
        settings = WorksheetSettings()

        assert settings.title == "Math Worksheet"
        assert settings.layout is WorksheetLayout.SINGLE_COLUMN
        assert settings.has_footnote is False

    def test_has_footnote_when_whitespace_only_then_false(self):
        """A blank footnote reserves no space."""
        assert WorksheetSettings(footnote="   ").has_footnote is False
        assert WorksheetSettings(footnote="Show your work").has_footnote is True

    def test_init_when_layout_is_string_then_raises(self):
        with pytest.raises(ValueError, match="WorksheetLayout"):
            WorksheetSettings(layout="two-column")

    @pytest.mark.parametrize("value, expected", [
        ("two-column", WorksheetLayout.TWO_COLUMN),
        ("compact_grid", WorksheetLayout.COMPACT_GRID),
        (" Single-Column ", WorksheetLayout.SINGLE_COLUMN),
        (WorksheetLayout.TWO_COLUMN, WorksheetLayout.TWO_COLUMN),
    ])
    def test_parse_when_known_name_then_resolves(self, value, expected):
        assert WorksheetLayout.parse(value) is expected

    def test_parse_when_unknown_name_then_raises(self):
        with pytest.raises(ValueError, match="Unknown layout"):
            WorksheetLayout.parse("three-column")
