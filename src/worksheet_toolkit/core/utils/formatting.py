"""
Formatting Utilities

Operator normalization, numeric checks and the display text renderers
print for each problem variant.

Display text is shared by the PDF exporter and the preview rasterizer so
both show exactly the same strings.
"""

from __future__ import annotations

import math
import re
from typing import List, Optional

from ..models.problems import (
    AlgebraEquation,
    BasicEquation,
    FillBlanks,
    MultipleChoice,
    Problem,
    WordProblem,
)

BLANK = "____"
ANSWER_LINE = "_" * 20

OPERATORS = ("+", "-", "×", "÷")

# Keyboard spellings accepted from editors and legacy data
OPERATOR_ALIASES = {
    "x": "×",
    "X": "×",
    "*": "×",
    "/": "÷",
    "−": "-",
}

_LEGACY_EQUATION_RE = re.compile(
    r"^\s*(?P<left>[^=]+?)\s*(?P<op>[+\-−*/×÷xX])\s*(?P<right>[^=]+?)\s*=\s*_*\s*$"
)


def normalize_operator(operator: str) -> str:
    """Map an alias like "*" or "/" to its printed symbol."""
    operator = (operator or "").strip()
    return OPERATOR_ALIASES.get(operator, operator)


def is_valid_operator(operator: str) -> bool:
    """Check operator is one of +, -, ×, ÷ (after normalization)."""
    return normalize_operator(operator) in OPERATORS


def is_number(value: Optional[str]) -> bool:
    """
    Check that text parses as a finite number.

    Example:
        >>> is_number("3.5"), is_number(""), is_number("inf")
        (True, False, False)
    """
    if value is None or not str(value).strip():
        return False
    try:
        number = float(str(value).strip())
    except ValueError:
        return False
    return math.isfinite(number)


def option_label(index: int) -> str:
    """Letter label for a multiple-choice option: 0 -> "A)"."""
    return f"{chr(ord('A') + index)})"


def format_lines(problem: Problem) -> List[str]:
    """
    Display lines for a problem, top to bottom.

    Missing fields render as empty text rather than failing.

    Args:
        problem: Any Problem variant

    Returns:
        List of text lines (at least one)
    """
    if isinstance(problem, BasicEquation):
        return [
            f"{problem.left_operand or ''} {normalize_operator(problem.operator)} "
            f"{problem.right_operand or ''} = {BLANK}"
        ]
    if isinstance(problem, FillBlanks):
        return [
            f"{BLANK} {normalize_operator(problem.operator)} "
            f"{problem.right_operand or ''} = {problem.result or ''}"
        ]
    if isinstance(problem, MultipleChoice):
        options = problem.options or ()
        return [problem.question or ""] + [
            f"{option_label(i)} {option}" for i, option in enumerate(options)
        ]
    if isinstance(problem, WordProblem):
        return [problem.problem_text or "", ANSWER_LINE]
    if isinstance(problem, AlgebraEquation):
        variable = problem.variable or "x"
        return [problem.equation or "", f"{variable} = {BLANK}"]
    raise TypeError(f"Unsupported problem type: {type(problem).__name__}")


def format_for_display(problem: Problem) -> str:
    """Display text for a problem as a single newline-joined string."""
    return "\n".join(format_lines(problem))


def format_vertical(problem: Problem) -> List[str]:
    """
    Two-line form for compact-grid cells: the expression, then "= answer".

    Example:
        >>> format_vertical(BasicEquation("12", "+", "5"))
        ['12 + 5', '= ____']
    """
    if isinstance(problem, BasicEquation):
        return [
            f"{problem.left_operand or ''} {normalize_operator(problem.operator)} {problem.right_operand or ''}",
            f"= {BLANK}",
        ]
    if isinstance(problem, FillBlanks):
        return [
            f"{BLANK} {normalize_operator(problem.operator)} {problem.right_operand or ''}",
            f"= {problem.result or ''}",
        ]
    return format_lines(problem)


def parse_legacy_equation(text: str) -> Optional[BasicEquation]:
    """
    Parse a plain equation string like "5 + 3 = ____".

    Args:
        text: Equation text with an "=" and a trailing blank

    Returns:
        BasicEquation, or None if the text is not a two-operand equation
        with numeric operands
    """
    cleaned = re.sub(r"\s+", " ", text or "").strip()
    match = _LEGACY_EQUATION_RE.match(cleaned)
    if match is None:
        return None

    left = match.group("left").strip()
    right = match.group("right").strip()
    if not is_number(left) or not is_number(right):
        return None

    return BasicEquation(
        left_operand=left,
        operator=normalize_operator(match.group("op")),
        right_operand=right,
    )
