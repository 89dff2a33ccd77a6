"""
Module: builder.layout.models

Purpose:
    Data models for page layout.
    Immutable dataclasses representing placements, pages and the final
    layout handed to the renderers.

Key Classes:
    - Region: Where on the page a placement sits
    - Placement: Problem positioned on a page (canonical inches)
    - PagePlan: Complete page layout
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)
    - core.models: Problem, WorksheetSettings

Used By:
    - builder.layout.paginator: Creates PagePlans
    - builder.output: Draws placements
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from worksheet_toolkit.core.models import Problem, WorksheetSettings

from .units import PageGeometry


class Region(str, Enum):
    """Page region a placement occupies."""
    FULL_WIDTH = "full-width"
    LEFT_COLUMN = "left-column"
    RIGHT_COLUMN = "right-column"
    GRID_CELL = "grid-cell"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Placement:
    """
    A problem positioned on a page.

    Coordinates are canonical inches from the page's top-left corner,
    margins and header included, already multiplied by the font scale.

    Attributes:
        problem: The problem to draw
        number: 1-based position in the whole worksheet
        region: Page region (full width, column, grid cell)
        left: X offset from page left
        top: Y offset from page top
        width: Box width
        height: Box height (excluding trailing spacing)

    Example:
        >>> placement.bottom
        2.3  # top + height
    """

    problem: Problem
    number: int
    region: Region
    left: float
    top: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        """Bottom Y coordinate (top + height)."""
        return self.top + self.height


@dataclass(frozen=True)
class PagePlan:
    """
    Complete layout plan for a single page.

    Attributes:
        index: Page number (0-indexed)
        placements: Placements in worksheet order
        height_used: Deepest content extent below the header (in)
    """

    index: int
    placements: tuple[Placement, ...]
    height_used: float

    @property
    def problems(self) -> List[Problem]:
        """Problems on this page in worksheet order."""
        return [placement.problem for placement in self.placements]

    @property
    def placement_count(self) -> int:
        """Number of problems on this page."""
        return len(self.placements)

    @property
    def is_empty(self) -> bool:
        """Check if page has no placements."""
        return len(self.placements) == 0


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: PagePlans (never empty; an empty worksheet has one empty page)
        settings: Settings the layout was computed for
        geometry: Page geometry in inches
        font_scale: Scale applied to every height and font size
        content_budget: Space for problems on each page at font_scale
        warnings: Warning messages (oversized problems)

    Example:
        >>> result.page_count
        2
    """

    pages: tuple[PagePlan, ...]
    settings: WorksheetSettings
    geometry: PageGeometry
    font_scale: float
    content_budget: float
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)

    @property
    def total_placements(self) -> int:
        """Total number of problems across all pages."""
        return sum(p.placement_count for p in self.pages)

    def page_problems(self) -> List[List[Problem]]:
        """Pages as ordered problem lists."""
        return [page.problems for page in self.pages]
