"""
Worksheet Toolkit Core Package

Shared data models and utilities. These models are the single source of
truth for the layout engine and both renderers.
"""

from .models import (
    AlgebraEquation,
    BasicEquation,
    FillBlanks,
    MultipleChoice,
    Problem,
    ProblemKind,
    WordProblem,
    WorksheetLayout,
    WorksheetSettings,
)

__all__ = [
    "AlgebraEquation",
    "BasicEquation",
    "FillBlanks",
    "MultipleChoice",
    "Problem",
    "ProblemKind",
    "WordProblem",
    "WorksheetLayout",
    "WorksheetSettings",
]
