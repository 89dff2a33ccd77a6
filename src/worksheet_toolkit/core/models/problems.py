"""
Module: problems

Purpose:
    Provides the Problem variants - immutable content blocks that make up
    a worksheet. Each variant carries only its own fields; the union type
    `Problem` is what the layout engine and renderers dispatch on.

Key Classes:
    - ProblemKind: Discriminator values used in JSON payloads
    - BasicEquation: "12 + 5 = ____"
    - MultipleChoice: Question with lettered options
    - WordProblem: Free text with an answer line
    - FillBlanks: "____ + 5 = 17" (blank is the left operand)
    - AlgebraEquation: Equation plus "x = ____" answer line

Dependencies:
    - dataclasses (std)
    - uuid (std)

Used By:
    - core.schemas.validator
    - core.utils.serialization
    - builder.layout.heights
    - builder.layout.paginator
    - builder.output (renderers)
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Tuple, Union


def new_problem_id() -> str:
    """Opaque identity used by editors for list diffing."""
    return uuid.uuid4().hex[:9]


class ProblemKind(str, Enum):
    """Discriminator for the Problem union."""
    BASIC_EQUATION = "basic-equation"
    MULTIPLE_CHOICE = "multiple-choice"
    WORD_PROBLEM = "word-problem"
    FILL_BLANKS = "fill-blanks"
    ALGEBRA_EQUATION = "algebra-equation"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class BasicEquation:
    """
    Two-operand arithmetic problem with the answer left blank.

    Attributes:
        left_operand: Numeric text, e.g. "12"
        operator: One of +, -, ×, ÷
        right_operand: Numeric text
        id: Opaque identity (not used by layout)

    Example:
        >>> BasicEquation("12", "+", "5").kind
        <ProblemKind.BASIC_EQUATION: 'basic-equation'>
    """

    left_operand: str
    operator: str
    right_operand: str
    id: str = field(default_factory=new_problem_id)

    kind: ClassVar[ProblemKind] = ProblemKind.BASIC_EQUATION


@dataclass(frozen=True, slots=True)
class MultipleChoice:
    """
    Question followed by two or more lettered options.

    Attributes:
        question: Question text
        options: Ordered option texts (rendered as A), B), ...)
        id: Opaque identity
    """

    question: str
    options: Tuple[str, ...]
    id: str = field(default_factory=new_problem_id)

    kind: ClassVar[ProblemKind] = ProblemKind.MULTIPLE_CHOICE


@dataclass(frozen=True, slots=True)
class WordProblem:
    """Free-text problem; always rendered full width with an answer line."""

    problem_text: str
    id: str = field(default_factory=new_problem_id)

    kind: ClassVar[ProblemKind] = ProblemKind.WORD_PROBLEM


@dataclass(frozen=True, slots=True)
class FillBlanks:
    """
    Equation whose left operand is the blank.

    Attributes:
        operator: One of +, -, ×, ÷
        right_operand: Numeric text
        result: Numeric text shown after "="
        id: Opaque identity
    """

    operator: str
    right_operand: str
    result: str
    id: str = field(default_factory=new_problem_id)

    kind: ClassVar[ProblemKind] = ProblemKind.FILL_BLANKS


@dataclass(frozen=True, slots=True)
class AlgebraEquation:
    """Equation to solve for `variable`, e.g. "2x + 3 = 11"."""

    equation: str
    variable: str = "x"
    id: str = field(default_factory=new_problem_id)

    kind: ClassVar[ProblemKind] = ProblemKind.ALGEBRA_EQUATION


Problem = Union[BasicEquation, MultipleChoice, WordProblem, FillBlanks, AlgebraEquation]

PROBLEM_TYPES: dict[ProblemKind, type] = {
    ProblemKind.BASIC_EQUATION: BasicEquation,
    ProblemKind.MULTIPLE_CHOICE: MultipleChoice,
    ProblemKind.WORD_PROBLEM: WordProblem,
    ProblemKind.FILL_BLANKS: FillBlanks,
    ProblemKind.ALGEBRA_EQUATION: AlgebraEquation,
}

# Variants simple enough to render in a compact-grid cell
GRID_ELIGIBLE_KINDS = frozenset({ProblemKind.BASIC_EQUATION, ProblemKind.FILL_BLANKS})


def is_grid_eligible(problem: Problem) -> bool:
    """Check whether a problem can occupy a compact-grid cell."""
    return problem.kind in GRID_ELIGIBLE_KINDS
