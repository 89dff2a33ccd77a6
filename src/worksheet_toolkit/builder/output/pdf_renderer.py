"""
Module: builder.output.pdf_renderer

Purpose:
    Render LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page; every coordinate is converted
    from canonical inches to points through builder.layout.units.

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - builder.layout.units: DOCUMENT unit space
    - builder.output.primitives: Positioned text and rules

Used By:
    - builder.controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
from pathlib import Path

from reportlab.pdfgen import canvas

from worksheet_toolkit.builder.layout.config import LayoutConfig
from worksheet_toolkit.builder.layout.heights import DEFAULT_LAYOUT_CONFIG
from worksheet_toolkit.builder.layout.models import LayoutResult, PagePlan
from worksheet_toolkit.builder.layout.units import DOCUMENT

from .primitives import Align, Rule, TextRun, page_primitives

logger = logging.getLogger(__name__)

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


def render_to_pdf(
    layout: LayoutResult,
    output_path: Path,
    *,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> None:
    """
    Render layout result to PDF file.

    Args:
        layout: Layout result from layout_worksheet()
        output_path: Path to write PDF
        config: Layout constants used for pagination

    Raises:
        OSError: If PDF cannot be written

    Example:
        >>> render_to_pdf(layout, Path("output/worksheet.pdf"))
    """
    if layout.total_placements == 0:
        logger.warning("Empty layout, creating PDF with a blank worksheet page")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    page_width_pt, page_height_pt = layout.geometry.size_in(DOCUMENT)
    c = canvas.Canvas(str(output_path), pagesize=(page_width_pt, page_height_pt))
    c.setTitle(layout.settings.title)

    for page in layout.pages:
        _render_page(c, layout, page, page_height_pt, config)
        c.showPage()

    c.save()

    logger.info(f"Rendered {layout.page_count} pages to {output_path}")


def _render_page(
    c: canvas.Canvas,
    layout: LayoutResult,
    page: PagePlan,
    page_height_pt: float,
    config: LayoutConfig,
) -> None:
    """Draw one page's primitives onto the canvas."""
    for primitive in page_primitives(layout, page, config):
        if isinstance(primitive, TextRun):
            _draw_text(c, primitive, page_height_pt)
        elif isinstance(primitive, Rule):
            _draw_rule(c, primitive, page_height_pt)


def _draw_text(c: canvas.Canvas, run: TextRun, page_height_pt: float) -> None:
    x_pt = DOCUMENT.to_units(run.x)
    y_pt = _transform_y(page_height_pt, run.baseline)

    c.saveState()
    c.setFont(FONT_BOLD if run.bold else FONT_REGULAR, run.font_size)
    c.setFillColorRGB(0, 0, 0)
    if run.align is Align.CENTER:
        c.drawCentredString(x_pt, y_pt, run.text)
    elif run.align is Align.RIGHT:
        c.drawRightString(x_pt, y_pt, run.text)
    else:
        c.drawString(x_pt, y_pt, run.text)
    c.restoreState()


def _draw_rule(c: canvas.Canvas, rule: Rule, page_height_pt: float) -> None:
    c.saveState()
    c.setLineWidth(rule.thickness)
    c.setStrokeColorRGB(0.8, 0.8, 0.8)
    c.line(
        DOCUMENT.to_units(rule.x1),
        _transform_y(page_height_pt, rule.y1),
        DOCUMENT.to_units(rule.x2),
        _transform_y(page_height_pt, rule.y2),
    )
    c.restoreState()


def _transform_y(page_height_pt: float, y_in_from_top: float) -> float:
    """
    Convert a top-down inch coordinate to bottom-up PDF points.

    Args:
        page_height_pt: Page height in points
        y_in_from_top: Y position from page top in inches

    Returns:
        Y position from page bottom in points
    """
    return page_height_pt - DOCUMENT.to_units(y_in_from_top)
