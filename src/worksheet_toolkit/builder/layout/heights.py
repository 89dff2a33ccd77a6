"""
Module: builder.layout.heights

Purpose:
    Height model: the vertical footprint of each problem variant under a
    layout mode, plus the header/footnote reservations that determine the
    content budget of a page. All values are canonical inches.

Key Functions:
    - estimate_height(): Unscaled height of one problem (no spacing)
    - problem_cost(): Scaled height plus the spacing that follows it
    - header_height(): Title + Name/Date line + rule
    - content_budget(): Vertical space left for problems on one page

Algorithm:
    Fixed heuristic constants stand in for real font metrics. Word
    problems estimate their line count from character count only.

Dependencies:
    - builder.layout.config: LayoutConfig constants
    - builder.layout.units: PageGeometry, points_to_inches

Used By:
    - builder.layout.paginator
    - builder.output (cell positioning)
"""

from __future__ import annotations

import math

from worksheet_toolkit.core.models import (
    AlgebraEquation,
    BasicEquation,
    FillBlanks,
    MultipleChoice,
    Problem,
    WordProblem,
    WorksheetLayout,
    WorksheetSettings,
)

from .config import LayoutConfig
from .units import PageGeometry, points_to_inches

DEFAULT_LAYOUT_CONFIG = LayoutConfig()


def estimate_word_lines(text: str | None, chars_per_line: int) -> int:
    """
    Coarse line count for a block of text.

    Example:
        >>> estimate_word_lines("", 80), estimate_word_lines("a" * 81, 80)
        (1, 2)
    """
    return max(1, math.ceil(len(text or "") / chars_per_line))


def estimate_height(
    problem: Problem,
    layout: WorksheetLayout,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> float:
    """
    Estimate the vertical footprint of a problem, excluding spacing.

    Rules:
        - basic-equation / fill-blanks: one equation line; a smaller
          constant under two-column
        - multiple-choice: question line + one line per option
        - word-problem: first line + extra estimated lines + answer line
        - algebra-equation: equation line + "x = ____" line

    Missing fields count as empty text / zero options, so the result is
    always finite and positive.

    Args:
        problem: Any Problem variant
        layout: Active layout mode
        config: Layout constants

    Returns:
        Height in canonical inches (unscaled)

    Example:
        >>> estimate_height(BasicEquation("1", "+", "2"), WorksheetLayout.SINGLE_COLUMN)
        0.3
    """
    if isinstance(problem, (BasicEquation, FillBlanks)):
        if layout is WorksheetLayout.TWO_COLUMN:
            return config.two_column_equation_height
        return config.equation_height

    if isinstance(problem, MultipleChoice):
        option_count = len(problem.options or ())
        return config.question_height + option_count * config.option_height

    if isinstance(problem, WordProblem):
        lines = estimate_word_lines(problem.problem_text, config.chars_per_line)
        return (
            config.word_base_height
            + (lines - 1) * config.word_line_height
            + config.word_answer_height
        )

    if isinstance(problem, AlgebraEquation):
        return 2 * config.algebra_line_height

    raise TypeError(f"Unsupported problem type: {type(problem).__name__}")


def problem_cost(
    problem: Problem,
    layout: WorksheetLayout,
    scale: float = 1.0,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> float:
    """Scaled height of a problem plus the spacing that follows it."""
    return (estimate_height(problem, layout, config) + config.problem_spacing) * scale


def header_height(scale: float = 1.0, config: LayoutConfig = DEFAULT_LAYOUT_CONFIG) -> float:
    """
    Height of the page header: title, Name/Date line and rule.

    Args:
        scale: Font-scale factor
        config: Layout constants

    Returns:
        Header height in inches
    """
    title = points_to_inches(config.title_font_size) + config.header_spacing
    name_line = config.name_line_spacing + config.name_line_height
    return (title + name_line + config.rule_spacing) * scale


def footnote_reserve(
    settings: WorksheetSettings,
    scale: float = 1.0,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> float:
    """Space reserved above the bottom margin for the footnote (0 if none)."""
    if not settings.has_footnote:
        return 0.0
    return config.footnote_height * scale


def content_budget(
    settings: WorksheetSettings,
    geometry: PageGeometry,
    scale: float = 1.0,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> float:
    """
    Vertical space available for problems on one page.

    height - 2*margin - header(scale) - footnote(scale)

    Example:
        >>> round(content_budget(WorksheetSettings(), PageGeometry()), 4)
        7.8222
    """
    return (
        geometry.content_height
        - header_height(scale, config)
        - footnote_reserve(settings, scale, config)
    )
