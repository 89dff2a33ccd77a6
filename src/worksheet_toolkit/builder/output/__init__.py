"""
Module: builder.output

Purpose:
    PDF export and preview rendering.
    Both renderers draw the same primitives from a LayoutResult; only the
    unit space differs (points vs. 96-DPI pixels).

Key Functions:
    - render_to_pdf(): Render layout to PDF
    - render_preview_page(): Render one page to a PIL image
    - save_preview_pngs(): Render all pages to PNG files
    - page_primitives(): Positioned text and rules for one page

Dependencies:
    - reportlab: PDF generation
    - PIL: Preview rasterizing

Used By:
    - builder.controller: Pipeline orchestration
"""

from .pdf_renderer import render_to_pdf
from .preview import render_preview_page, save_preview_pngs
from .primitives import Align, Rule, TextRun, page_primitives

__all__ = [
    "render_to_pdf",
    "render_preview_page",
    "save_preview_pngs",
    "page_primitives",
    "Align",
    "Rule",
    "TextRun",
]
