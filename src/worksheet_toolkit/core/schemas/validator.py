"""
Schema Validation Utilities

Validates worksheet payloads before deserialization, and decides whether
an in-memory Problem is complete enough to print.

Payload validation fails fast with ValidationError. Problem validity is a
plain boolean: invalid problems are filtered out before pagination, never
raised on.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List

from ..models.problems import (
    AlgebraEquation,
    BasicEquation,
    FillBlanks,
    MultipleChoice,
    Problem,
    ProblemKind,
    WordProblem,
)
from ..utils.formatting import is_number, is_valid_operator

logger = logging.getLogger(__name__)


# Schema version written by save_worksheet_json
WORKSHEET_SCHEMA_VERSION = 1

# Payload keys required per problem kind (camelCase, as editors emit them)
REQUIRED_FIELDS: dict[ProblemKind, tuple[str, ...]] = {
    ProblemKind.BASIC_EQUATION: ("leftOperand", "operator", "rightOperand"),
    ProblemKind.MULTIPLE_CHOICE: ("question", "options"),
    ProblemKind.WORD_PROBLEM: ("problemText",),
    ProblemKind.FILL_BLANKS: ("operator", "rightOperand", "result"),
    ProblemKind.ALGEBRA_EQUATION: ("equation",),
}


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_problem_payload(data: Any, *, path: str = "") -> ProblemKind:
    """
    Validate the shape of a problem dictionary.

    Only structure is checked here (known kind, required keys present,
    options is a list). Content checks such as numeric operands belong to
    is_valid_problem().

    Args:
        data: Problem dictionary from JSON
        path: Location used in error messages, e.g. "problems[3]"

    Returns:
        The problem's kind

    Raises:
        ValidationError: If data is not a valid problem payload
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Problem must be an object, got {type(data).__name__}",
            path=path,
        )

    raw_kind = data.get("type")
    try:
        kind = ProblemKind(raw_kind)
    except ValueError:
        valid = ", ".join(k.value for k in ProblemKind)
        raise ValidationError(
            f"Unknown problem type: {raw_kind!r} (expected one of {valid})",
            path=f"{path}.type" if path else "type",
        ) from None

    missing = [key for key in REQUIRED_FIELDS[kind] if key not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields for {kind.value}: {missing}",
            path=path,
            errors=[f"Missing field: {key}" for key in missing],
        )

    if kind is ProblemKind.MULTIPLE_CHOICE and not isinstance(data["options"], list):
        raise ValidationError(
            "options must be a list",
            path=f"{path}.options" if path else "options",
        )

    return kind


def is_valid_problem(problem: Problem) -> bool:
    """
    Check that a problem's required fields are present and well formed.

    Rules:
        - basic-equation: numeric operands, operator in +, -, ×, ÷
        - fill-blanks: numeric right operand and result, valid operator
        - multiple-choice: non-empty question, >= 2 non-empty options
        - word-problem: non-empty text
        - algebra-equation: non-empty equation and variable

    Example:
        >>> is_valid_problem(BasicEquation("2", "+", "3"))
        True
        >>> is_valid_problem(BasicEquation("2", "?", "3"))
        False
    """
    if isinstance(problem, BasicEquation):
        return (
            is_number(problem.left_operand)
            and is_valid_operator(problem.operator)
            and is_number(problem.right_operand)
        )
    if isinstance(problem, FillBlanks):
        return (
            is_valid_operator(problem.operator)
            and is_number(problem.right_operand)
            and is_number(problem.result)
        )
    if isinstance(problem, MultipleChoice):
        options = problem.options or ()
        return (
            _has_text(problem.question)
            and len(options) >= 2
            and all(_has_text(option) for option in options)
        )
    if isinstance(problem, WordProblem):
        return _has_text(problem.problem_text)
    if isinstance(problem, AlgebraEquation):
        return _has_text(problem.equation) and _has_text(problem.variable)
    return False


def filter_valid_problems(problems: Iterable[Problem]) -> List[Problem]:
    """
    Drop problems that are not ready to print, preserving order.

    Args:
        problems: Problems in worksheet order

    Returns:
        Only the valid problems, same relative order
    """
    valid: List[Problem] = []
    dropped = 0
    for problem in problems:
        if is_valid_problem(problem):
            valid.append(problem)
        else:
            dropped += 1
            logger.debug(f"Skipping incomplete {problem.kind.value} problem {problem.id}")

    if dropped:
        logger.warning(f"Skipped {dropped} incomplete problem(s)")

    return valid


def _has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())
