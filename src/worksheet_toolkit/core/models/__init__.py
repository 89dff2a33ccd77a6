"""
Core Models Package

Immutable data models shared by the layout engine and the renderers.

All models in this package are frozen dataclasses, so a pagination pass
can never mutate the problems or settings it was handed.
"""

from .problems import (
    AlgebraEquation,
    BasicEquation,
    FillBlanks,
    GRID_ELIGIBLE_KINDS,
    MultipleChoice,
    Problem,
    PROBLEM_TYPES,
    ProblemKind,
    WordProblem,
    is_grid_eligible,
    new_problem_id,
)
from .settings import WorksheetLayout, WorksheetSettings

__all__ = [
    "AlgebraEquation",
    "BasicEquation",
    "FillBlanks",
    "GRID_ELIGIBLE_KINDS",
    "MultipleChoice",
    "Problem",
    "PROBLEM_TYPES",
    "ProblemKind",
    "WordProblem",
    "is_grid_eligible",
    "new_problem_id",
    "WorksheetLayout",
    "WorksheetSettings",
]
