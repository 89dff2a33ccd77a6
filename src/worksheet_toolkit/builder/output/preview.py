"""
Module: builder.output.preview

Purpose:
    Rasterize worksheet pages for on-screen preview with Pillow.
    Coordinates go through the SCREEN unit space (96 DPI, optionally
    zoomed), so a preview page is the exported PDF page at screen density.

Key Functions:
    - render_preview_page(): One page as a PIL image
    - save_preview_pngs(): Every page as page-NNN.png

Dependencies:
    - PIL: Image drawing
    - builder.layout.units: SCREEN unit space
    - builder.output.primitives: Positioned text and rules

Used By:
    - builder.controller: Optional preview export
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from PIL import Image, ImageDraw, ImageFont

from worksheet_toolkit.builder.layout.config import LayoutConfig
from worksheet_toolkit.builder.layout.heights import DEFAULT_LAYOUT_CONFIG
from worksheet_toolkit.builder.layout.models import LayoutResult
from worksheet_toolkit.builder.layout.units import SCREEN, UnitSpace, points_to_inches

from .primitives import Align, Rule, TextRun, page_primitives

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "white"
DEFAULT_TEXT_COLOR = "black"
RULE_COLOR = (204, 204, 204)

# Fraction of the font size above the baseline (cap height + accents)
_ASCENT_RATIO = 0.8


def render_preview_page(
    layout: LayoutResult,
    page_index: int,
    *,
    zoom: float = 1.0,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> Image.Image:
    """
    Render one page of a layout as an RGB image.

    Args:
        layout: Layout result from layout_worksheet()
        page_index: 0-based page index
        zoom: Multiplier on the 96 DPI screen density
        config: Layout constants used for pagination

    Returns:
        PIL image sized to the page at the preview density

    Raises:
        IndexError: If page_index is out of range

    Example:
        >>> image = render_preview_page(layout, 0)
        >>> image.size
        (816, 1056)  # 8.5 x 11 in at 96 DPI
    """
    if not 0 <= page_index < layout.page_count:
        raise IndexError(f"Page {page_index} out of range (0-{layout.page_count - 1})")

    space = SCREEN if zoom == 1.0 else SCREEN.scaled(zoom)
    width_px, height_px = layout.geometry.size_in(space)
    image = Image.new("RGB", (round(width_px), round(height_px)), color=DEFAULT_BACKGROUND)
    draw = ImageDraw.Draw(image)

    page = layout.pages[page_index]
    for primitive in page_primitives(layout, page, config):
        if isinstance(primitive, TextRun):
            _draw_text(draw, primitive, space)
        elif isinstance(primitive, Rule):
            _draw_rule(draw, primitive, space)

    logger.debug(f"Rendered preview page {page_index + 1} at {space.units_per_inch:g} DPI")
    return image


def save_preview_pngs(
    layout: LayoutResult,
    output_dir: Path,
    *,
    zoom: float = 1.0,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> List[Path]:
    """
    Save every page as a PNG.

    Args:
        layout: Layout result
        output_dir: Directory for page-001.png, page-002.png, ...
        zoom: Multiplier on the 96 DPI screen density
        config: Layout constants used for pagination

    Returns:
        Paths written, in page order
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    paths: List[Path] = []
    for index in range(layout.page_count):
        image = render_preview_page(layout, index, zoom=zoom, config=config)
        path = output_dir / f"page-{index + 1:03d}.png"
        image.save(path, format="PNG")
        paths.append(path)

    logger.info(f"Saved {len(paths)} preview pages to {output_dir}")
    return paths


def _draw_text(draw: ImageDraw.ImageDraw, run: TextRun, space: UnitSpace) -> None:
    size_px = max(1, round(space.to_units(points_to_inches(run.font_size))))
    font = _load_font(size_px, run.bold)

    text_width = draw.textlength(run.text, font=font)
    x = space.to_units(run.x)
    if run.align is Align.CENTER:
        x -= text_width / 2
    elif run.align is Align.RIGHT:
        x -= text_width

    # Pillow positions text by its top edge
    top = space.to_units(run.baseline) - size_px * _ASCENT_RATIO
    draw.text((x, top), run.text, fill=DEFAULT_TEXT_COLOR, font=font)


def _draw_rule(draw: ImageDraw.ImageDraw, rule: Rule, space: UnitSpace) -> None:
    width_px = max(1, round(space.to_units(points_to_inches(rule.thickness))))
    draw.line(
        [
            (space.to_units(rule.x1), space.to_units(rule.y1)),
            (space.to_units(rule.x2), space.to_units(rule.y2)),
        ],
        fill=RULE_COLOR,
        width=width_px,
    )


@lru_cache(maxsize=64)
def _load_font(size: int, bold: bool) -> ImageFont.FreeTypeFont:
    """
    Load a sans-serif font matching the PDF's Helvetica.

    Falls back to Pillow's bundled font if none is installed.

    Args:
        size: Font size in pixels
        bold: Prefer a bold face

    Returns:
        Font object
    """
    regular = ["arial.ttf", "Arial.ttf", "Helvetica.ttc", "DejaVuSans.ttf", "LiberationSans-Regular.ttf"]
    bold_faces = ["arialbd.ttf", "Arial Bold.ttf", "DejaVuSans-Bold.ttf", "LiberationSans-Bold.ttf"]
    font_options = bold_faces + regular if bold else regular

    for font_name in font_options:
        try:
            return ImageFont.truetype(font_name, size)
        except (IOError, OSError):
            continue

    logger.debug("Could not load TrueType font, using default")
    return ImageFont.load_default(size=size)
