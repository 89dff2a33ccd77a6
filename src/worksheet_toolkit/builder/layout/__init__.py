"""
Module: builder.layout

Purpose:
    Worksheet layout engine.
    Measures problems, splits them into pages and positions them so the
    preview and the exported PDF agree.

Key Functions:
    - estimate_height(): Height model
    - compute_font_scale(): Font-scale heuristic
    - paginate(): Problems onto pages
    - layout_worksheet(): Pages with positioned placements

Key Classes:
    - PageGeometry: Page size and margin in inches
    - LayoutConfig: Height and spacing constants
    - Placement / PagePlan / LayoutResult: Layout output

Used By:
    - builder.controller: Build pipeline
    - builder.output: PDF and preview renderers
"""

from .config import LayoutConfig
from .font_scale import compute_font_scale
from .heights import content_budget, estimate_height, header_height
from .models import LayoutResult, PagePlan, Placement, Region
from .paginator import RemainingCapacity, layout_worksheet, paginate, remaining_capacity
from .units import DOCUMENT, SCREEN, PageGeometry, UnitSpace

__all__ = [
    # Config
    "LayoutConfig",
    "PageGeometry",
    "UnitSpace",
    "SCREEN",
    "DOCUMENT",
    # Models
    "Placement",
    "PagePlan",
    "LayoutResult",
    "Region",
    "RemainingCapacity",
    # Functions
    "estimate_height",
    "header_height",
    "content_budget",
    "compute_font_scale",
    "paginate",
    "layout_worksheet",
    "remaining_capacity",
]
