"""
Module: builder

Purpose:
    Worksheet building pipeline: paginates problems onto fixed-size pages
    and renders them to PDF and preview images.

Key Functions:
    - build_worksheet(): Main entry point for worksheet generation
    - paginate(): Problems onto pages
    - layout_worksheet(): Pages with positioned placements

Key Classes:
    - BuilderConfig: Configuration for building
    - BuildResult / BuildError: Pipeline result and failure

Dependencies:
    - reportlab: PDF generation
    - PIL: Preview rendering
    - worksheet_toolkit.core.models: Problem and settings models

Used By:
    - worksheet_toolkit.cli
"""

from .config import BuilderConfig
from .controller import BuildError, BuildResult, build_worksheet
from .layout import compute_font_scale, estimate_height, layout_worksheet, paginate

__all__ = [
    # Config
    "BuilderConfig",
    # Controller
    "build_worksheet",
    "BuildResult",
    "BuildError",
    # Layout
    "estimate_height",
    "compute_font_scale",
    "paginate",
    "layout_worksheet",
]
