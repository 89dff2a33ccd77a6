"""
Module: builder.layout.font_scale

Purpose:
    Font-scale heuristic for sparse worksheets. A handful of problems on
    one page are printed larger so the page is not mostly blank.

Key Functions:
    - compute_font_scale(): Scale factor for (problem_count, layout)

Algorithm:
    Step tables keyed by problem count. Two-column scales more gently
    since it already packs twice as much per page. Counts above
    SPARSE_PROBLEM_LIMIT always get 1.0.

Dependencies:
    - core.models: WorksheetLayout

Used By:
    - builder.layout.paginator: Second pagination pass
    - builder.output: Font sizes in both renderers
"""

from __future__ import annotations

from worksheet_toolkit.core.models import WorksheetLayout

NEUTRAL_SCALE = 1.0

# Above this many problems the heuristic never applies
SPARSE_PROBLEM_LIMIT = 15

# (max problem count, scale), ascending by count
_SINGLE_COLUMN_STEPS: tuple[tuple[int, float], ...] = (
    (1, 3.5),
    (2, 2.8),
    (3, 2.4),
    (4, 2.1),
    (5, 1.9),
    (6, 1.7),
    (7, 1.6),
    (8, 1.5),
    (9, 1.4),
    (10, 1.3),
    (12, 1.2),
    (15, 1.1),
)

_TWO_COLUMN_STEPS: tuple[tuple[int, float], ...] = (
    (1, 2.2),
    (2, 2.0),
    (3, 1.8),
    (4, 1.6),
    (5, 1.5),
    (6, 1.4),
    (8, 1.3),
    (10, 1.2),
    (15, 1.1),
)


def compute_font_scale(problem_count: int, layout: WorksheetLayout) -> float:
    """
    Scale factor for a worksheet of `problem_count` problems.

    Non-increasing in problem_count; 1.0 above SPARSE_PROBLEM_LIMIT.
    Counts below 1 use the first step.

    Args:
        problem_count: Number of problems on the worksheet
        layout: Active layout mode

    Returns:
        Scale factor >= 1.0

    Example:
        >>> compute_font_scale(3, WorksheetLayout.SINGLE_COLUMN)
        2.4
        >>> compute_font_scale(16, WorksheetLayout.TWO_COLUMN)
        1.0
    """
    if problem_count > SPARSE_PROBLEM_LIMIT:
        return NEUTRAL_SCALE

    steps = _TWO_COLUMN_STEPS if layout is WorksheetLayout.TWO_COLUMN else _SINGLE_COLUMN_STEPS
    for max_count, scale in steps:
        if problem_count <= max_count:
            return scale
    return NEUTRAL_SCALE
