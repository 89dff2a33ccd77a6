"""
Module: builder.layout.paginator

Purpose:
    Split an ordered list of problems into pages and position each problem
    on its page. Problems are never reordered, duplicated or split across
    pages.

Key Functions:
    - paginate(): Pages as ordered problem lists
    - layout_worksheet(): Full LayoutResult with placements and font scale
    - remaining_capacity(): Free space and extra problems that fit on the last page

Algorithm:
    Two passes:
    1. Lay out at scale 1.0.
    2. If that fits on one page, lay out again at the font-scale heuristic's
       factor (stepping down by SCALE_STEP until the page still fits).
       Multi-page worksheets keep scale 1.0.

    Per layout:
    - single-column: running height; start a new page when the next
      problem (plus spacing) would exceed the content budget.
    - two-column: strict left/right alternation within a page. A problem
      that doesn't fit its target column closes the page, even when the
      other column has room. Word problems span both columns and push
      both cursors below the lower column; alternation restarts on the left.
    - compact-grid: eligible problems fill 10-cell rows. Any other problem
      closes the open row and is placed full width below it; a fresh grid
      starts under that block.

    A problem taller than the whole budget gets a page to itself.

Dependencies:
    - builder.layout.heights: Height model and content budget
    - builder.layout.font_scale: Scale heuristic
    - builder.layout.models: Placement, PagePlan, LayoutResult

Used By:
    - builder.controller: Build pipeline
    - builder.output: Renderers consume LayoutResult
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from worksheet_toolkit.core.models import (
    BasicEquation,
    MultipleChoice,
    Problem,
    WordProblem,
    WorksheetLayout,
    WorksheetSettings,
    is_grid_eligible,
)

from .config import LayoutConfig
from .font_scale import NEUTRAL_SCALE, compute_font_scale
from .heights import (
    DEFAULT_LAYOUT_CONFIG,
    content_budget,
    estimate_height,
    header_height,
    problem_cost,
)
from .models import LayoutResult, PagePlan, Placement, Region
from .units import PageGeometry

logger = logging.getLogger(__name__)

DEFAULT_GEOMETRY = PageGeometry()

# Step used when a heuristic scale would push a single page over budget
SCALE_STEP = 0.1

# Absorbs float drift when a page is filled exactly to the budget
_FIT_TOLERANCE = 1e-9


def paginate(
    problems: Sequence[Problem],
    settings: WorksheetSettings,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> List[List[Problem]]:
    """
    Split problems into pages.

    Args:
        problems: Valid problems in worksheet order
        settings: Worksheet settings (layout, footnote)
        geometry: Page geometry in inches
        config: Layout constants

    Returns:
        Ordered pages; concatenated they equal `problems`. An empty input
        yields [[]].

    Example:
        >>> pages = paginate(problems, WorksheetSettings())
        >>> sum(len(page) for page in pages) == len(problems)
        True
    """
    return layout_worksheet(problems, settings, geometry, config).page_problems()


def layout_worksheet(
    problems: Sequence[Problem],
    settings: WorksheetSettings,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> LayoutResult:
    """
    Paginate and position problems, applying the font-scale heuristic.

    Args:
        problems: Valid problems in worksheet order
        settings: Worksheet settings
        geometry: Page geometry in inches
        config: Layout constants

    Returns:
        LayoutResult with placements in canonical inches
    """
    problems = list(problems)
    result = _layout_pass(problems, settings, geometry, NEUTRAL_SCALE, config)

    if problems and result.page_count == 1 and not result.warnings:
        scale = compute_font_scale(len(problems), settings.layout)
        while scale > NEUTRAL_SCALE + _FIT_TOLERANCE:
            scaled = _layout_pass(problems, settings, geometry, scale, config)
            if scaled.page_count == 1 and not scaled.warnings:
                result = scaled
                break
            logger.debug(f"Scale {scale:.2f} overflows one page, stepping down")
            scale = round(scale - SCALE_STEP, 2)

    logger.info(
        f"Paginated {len(problems)} problems onto {result.page_count} pages "
        f"({settings.layout.value}, scale {result.font_scale:.2f})"
    )
    for warning in result.warnings:
        logger.warning(warning)

    return result


# ─────────────────────────────────────────────────────────────────────────────
# Remaining Capacity
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RemainingCapacity:
    """
    Free space on the last page at neutral scale.

    Attributes:
        remaining_space: Unused content budget (in)
        basic_equations: How many more basic equations would fit
        multiple_choice: How many more 4-option multiple-choice items would fit
    """

    remaining_space: float
    basic_equations: int
    multiple_choice: int


def remaining_capacity(
    problems: Sequence[Problem],
    settings: WorksheetSettings,
    geometry: PageGeometry = DEFAULT_GEOMETRY,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> RemainingCapacity:
    """
    Report how much more content fits on the last page.

    Measured at scale 1.0, since adding problems changes the scale anyway.
    The counts come from re-running the layout with extra problems
    appended, so they agree with paginate() in every layout mode: grid
    rows hold grid_columns equations and two-column pages fill both
    columns.

    Example:
        >>> capacity = remaining_capacity(problems, settings)
        >>> extra = [BasicEquation("0", "+", "0")] * capacity.basic_equations
        >>> len(paginate(problems + extra, settings)) == len(paginate(problems, settings))
        True
    """
    problems = list(problems)
    result = _layout_pass(problems, settings, geometry, NEUTRAL_SCALE, config)
    remaining = max(0.0, result.content_budget - result.pages[-1].height_used)

    return RemainingCapacity(
        remaining_space=remaining,
        basic_equations=_extra_fitting(
            problems, BasicEquation("0", "+", "0"), result, geometry, config
        ),
        multiple_choice=_extra_fitting(
            problems, MultipleChoice("?", ("A", "B", "C", "D")), result, geometry, config
        ),
    )


def _extra_fitting(
    problems: List[Problem],
    filler: Problem,
    base: LayoutResult,
    geometry: PageGeometry,
    config: LayoutConfig,
) -> int:
    """Largest count of `filler` that can be appended without adding a page."""
    settings = base.settings

    def fits(count: int) -> bool:
        extended = _layout_pass(problems + [filler] * count, settings, geometry, NEUTRAL_SCALE, config)
        return extended.page_count == base.page_count and len(extended.warnings) == len(base.warnings)

    # Upper bound: a whole empty page of fillers
    cost = problem_cost(filler, settings.layout, config=config)
    per_column = math.floor(base.content_budget / cost + _FIT_TOLERANCE)
    if settings.layout is WorksheetLayout.TWO_COLUMN and not isinstance(filler, WordProblem):
        slots = 2
    elif settings.layout is WorksheetLayout.COMPACT_GRID and is_grid_eligible(filler):
        slots = config.grid_columns
    else:
        slots = 1

    # fits(low) holds and fits(high) does not
    low, high = 0, per_column * slots + 1
    while high - low > 1:
        middle = (low + high) // 2
        if fits(middle):
            low = middle
        else:
            high = middle
    return low


# ─────────────────────────────────────────────────────────────────────────────
# Layout Pass
# ─────────────────────────────────────────────────────────────────────────────

class _PageBuilder:
    """
    Accumulates placements for one layout pass.

    Y positions handed to place() are relative to the top of the content
    area; placements store absolute page coordinates.
    """

    def __init__(
        self,
        settings: WorksheetSettings,
        geometry: PageGeometry,
        scale: float,
        config: LayoutConfig,
    ) -> None:
        self.settings = settings
        self.geometry = geometry
        self.scale = scale
        self.config = config
        self.layout = settings.layout
        self.budget = content_budget(settings, geometry, scale, config)
        self.content_top = geometry.margin + header_height(scale, config)

        self.pages: List[PagePlan] = []
        self.warnings: List[str] = []
        self._placements: List[Placement] = []
        self._height_used = 0.0

    @property
    def is_empty(self) -> bool:
        return not self._placements

    def cost(self, problem: Problem) -> float:
        return problem_cost(problem, self.layout, self.scale, self.config)

    def fits(self, y: float, cost: float) -> bool:
        return y + cost <= self.budget + _FIT_TOLERANCE

    def is_oversized(self, cost: float) -> bool:
        return not self.fits(0.0, cost)

    def place(
        self,
        problem: Problem,
        number: int,
        region: Region,
        left: float,
        y: float,
        width: float,
    ) -> None:
        height = estimate_height(problem, self.layout, self.config) * self.scale
        self._placements.append(Placement(
            problem=problem,
            number=number,
            region=region,
            left=left,
            top=self.content_top + y,
            width=width,
            height=height,
        ))
        self._height_used = max(self._height_used, y + self.cost(problem))

    def place_alone(self, problem: Problem, number: int, cost: float) -> None:
        """Oversized problem: its own page, full width."""
        if not self.is_empty:
            self.close_page()
        self.warnings.append(
            f"Problem {number} ({problem.kind.value}) overflows page {len(self.pages) + 1}: "
            f"{cost:.2f}in needed, {self.budget:.2f}in available"
        )
        self.place(problem, number, Region.FULL_WIDTH, self.geometry.margin, 0.0, self.geometry.content_width)
        self.close_page()

    def close_page(self) -> None:
        self.pages.append(PagePlan(
            index=len(self.pages),
            placements=tuple(self._placements),
            height_used=self._height_used,
        ))
        logger.debug(
            f"Closed page {len(self.pages)}: {len(self._placements)} problems, "
            f"{self._height_used:.2f}/{self.budget:.2f}in"
        )
        self._placements = []
        self._height_used = 0.0

    def finish(self) -> LayoutResult:
        if not self.is_empty or not self.pages:
            self.close_page()
        return LayoutResult(
            pages=tuple(self.pages),
            settings=self.settings,
            geometry=self.geometry,
            font_scale=self.scale,
            content_budget=self.budget,
            warnings=self.warnings,
        )


def _layout_pass(
    problems: List[Problem],
    settings: WorksheetSettings,
    geometry: PageGeometry,
    scale: float,
    config: LayoutConfig,
) -> LayoutResult:
    """Lay out all problems at a fixed scale."""
    builder = _PageBuilder(settings, geometry, scale, config)

    if settings.layout is WorksheetLayout.TWO_COLUMN:
        _layout_two_column(problems, builder)
    elif settings.layout is WorksheetLayout.COMPACT_GRID:
        _layout_compact_grid(problems, builder)
    else:
        _layout_single_column(problems, builder)

    return builder.finish()


def _layout_single_column(problems: List[Problem], builder: _PageBuilder) -> None:
    geometry = builder.geometry
    y = 0.0

    for number, problem in enumerate(problems, start=1):
        cost = builder.cost(problem)

        if builder.is_oversized(cost):
            builder.place_alone(problem, number, cost)
            y = 0.0
            continue

        if not builder.fits(y, cost) and not builder.is_empty:
            builder.close_page()
            y = 0.0

        builder.place(problem, number, Region.FULL_WIDTH, geometry.margin, y, geometry.content_width)
        y += cost


def _layout_two_column(problems: List[Problem], builder: _PageBuilder) -> None:
    geometry = builder.geometry
    column_width = (geometry.content_width - builder.config.column_gutter) / 2
    column_left = (geometry.margin, geometry.margin + column_width + builder.config.column_gutter)
    column_region = (Region.LEFT_COLUMN, Region.RIGHT_COLUMN)

    column_y = [0.0, 0.0]
    turn = 0

    for number, problem in enumerate(problems, start=1):
        cost = builder.cost(problem)

        if builder.is_oversized(cost):
            builder.place_alone(problem, number, cost)
            column_y = [0.0, 0.0]
            turn = 0
            continue

        if isinstance(problem, WordProblem):
            # Full-width block below the deeper column
            y = max(column_y)
            if not builder.fits(y, cost) and not builder.is_empty:
                builder.close_page()
                y = 0.0
            builder.place(problem, number, Region.FULL_WIDTH, geometry.margin, y, geometry.content_width)
            column_y = [y + cost, y + cost]
            turn = 0
            continue

        if not builder.fits(column_y[turn], cost) and not builder.is_empty:
            builder.close_page()
            column_y = [0.0, 0.0]
            turn = 0

        builder.place(problem, number, column_region[turn], column_left[turn], column_y[turn], column_width)
        column_y[turn] += cost
        turn = 1 - turn


def _layout_compact_grid(problems: List[Problem], builder: _PageBuilder) -> None:
    geometry = builder.geometry
    columns = builder.config.grid_columns
    cell_width = geometry.content_width / columns

    y = 0.0
    row_top: Optional[float] = None
    row_cost = 0.0
    row_count = 0

    for number, problem in enumerate(problems, start=1):
        cost = builder.cost(problem)

        if builder.is_oversized(cost):
            builder.place_alone(problem, number, cost)
            y, row_top = 0.0, None
            continue

        if not is_grid_eligible(problem):
            # Flush the grid; the problem goes full width underneath it
            row_top = None
            if not builder.fits(y, cost) and not builder.is_empty:
                builder.close_page()
                y = 0.0
            builder.place(problem, number, Region.FULL_WIDTH, geometry.margin, y, geometry.content_width)
            y += cost
            continue

        if row_top is not None and row_count < columns and builder.fits(row_top, max(row_cost, cost)):
            row_cost = max(row_cost, cost)
        else:
            # Start a new row at the cursor
            if not builder.fits(y, cost) and not builder.is_empty:
                builder.close_page()
                y = 0.0
            row_top, row_cost, row_count = y, cost, 0

        builder.place(
            problem,
            number,
            Region.GRID_CELL,
            geometry.margin + row_count * cell_width,
            row_top,
            cell_width,
        )
        row_count += 1
        y = row_top + row_cost
