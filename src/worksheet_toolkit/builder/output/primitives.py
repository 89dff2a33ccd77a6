"""
Module: builder.output.primitives

Purpose:
    Turn a PagePlan into positioned drawing primitives (text runs and
    rules) in canonical inches. The PDF exporter and the preview
    rasterizer both draw from this list, converting coordinates through
    builder.layout.units, so neither renderer makes its own layout
    decisions.

Key Classes:
    - TextRun: Text at a baseline position
    - Rule: Straight line

Key Functions:
    - page_primitives(): Everything drawn on one page

Dependencies:
    - textwrap (std)
    - builder.layout: LayoutResult, LayoutConfig, heights
    - core.utils.formatting: Display text

Used By:
    - builder.output.pdf_renderer
    - builder.output.preview
"""

from __future__ import annotations

import textwrap
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from worksheet_toolkit.builder.layout.config import LayoutConfig
from worksheet_toolkit.builder.layout.heights import (
    DEFAULT_LAYOUT_CONFIG,
    estimate_word_lines,
    header_height,
)
from worksheet_toolkit.builder.layout.models import LayoutResult, PagePlan, Placement, Region
from worksheet_toolkit.builder.layout.units import points_to_inches, to_document_units
from worksheet_toolkit.core.models import (
    AlgebraEquation,
    MultipleChoice,
    WordProblem,
)
from worksheet_toolkit.core.utils.formatting import (
    ANSWER_LINE,
    format_lines,
    format_vertical,
)

NAME_LINE_TEXT = "Name: ____________________"
DATE_LINE_TEXT = "Date: ____________________"

# Baseline sits this far into a line box (fraction of the box)
_BASELINE_RATIO = 0.75
# Grid cell text is capped so both lines fit the cell height
_GRID_FONT_RATIO = 0.8
# Inset for number labels and right-aligned grid text (in)
_LABEL_GAP = 0.35
_CELL_PADDING = 0.05
# Average glyph advance as a fraction of the font size (no real metrics)
_AVG_CHAR_WIDTH = 0.5


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class TextRun:
    """
    Text anchored at a baseline point.

    Attributes:
        text: Text to draw
        x: Anchor X in inches (meaning depends on align)
        baseline: Baseline Y in inches from page top
        font_size: Size in points (already scaled)
        align: Which edge (or center) x refers to
        bold: Bold face
    """

    text: str
    x: float
    baseline: float
    font_size: float
    align: Align = Align.LEFT
    bold: bool = False


@dataclass(frozen=True)
class Rule:
    """Line from (x1, y1) to (x2, y2), inches from page top-left."""

    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float = 1.0  # points


Primitive = Union[TextRun, Rule]


def page_primitives(
    layout: LayoutResult,
    page: PagePlan,
    config: LayoutConfig = DEFAULT_LAYOUT_CONFIG,
) -> List[Primitive]:
    """
    Build the drawing primitives for one page.

    Args:
        layout: Layout result the page belongs to
        page: Page to draw
        config: Layout constants (must match the ones used to paginate)

    Returns:
        Primitives in drawing order: header, problems, footnote, page number
    """
    primitives: List[Primitive] = []
    primitives.extend(_header(layout, config))
    for placement in page.placements:
        primitives.extend(_problem(placement, layout.font_scale, config))
    primitives.extend(_footer(layout, page, config))
    return primitives


def _header(layout: LayoutResult, config: LayoutConfig) -> List[Primitive]:
    geometry = layout.geometry
    scale = layout.font_scale

    title_size = _fit_font([layout.settings.title], geometry.content_width, config.title_font_size * scale)
    title_baseline = geometry.margin + points_to_inches(title_size)

    # Name and Date share one line
    name_size = _fit_font([NAME_LINE_TEXT + "  " + DATE_LINE_TEXT], geometry.content_width, config.name_font_size * scale)
    name_top = geometry.margin + (
        points_to_inches(config.title_font_size) + config.header_spacing + config.name_line_spacing
    ) * scale
    name_baseline = name_top + points_to_inches(name_size)

    rule_y = geometry.margin + header_height(scale, config) - config.rule_spacing * scale / 2

    return [
        TextRun(layout.settings.title, geometry.width / 2, title_baseline, title_size, Align.CENTER, bold=True),
        TextRun(NAME_LINE_TEXT, geometry.margin, name_baseline, name_size),
        TextRun(DATE_LINE_TEXT, geometry.width - geometry.margin, name_baseline, name_size, Align.RIGHT),
        Rule(geometry.margin, rule_y, geometry.width - geometry.margin, rule_y, thickness=1.5),
    ]


def _footer(layout: LayoutResult, page: PagePlan, config: LayoutConfig) -> List[Primitive]:
    geometry = layout.geometry
    primitives: List[Primitive] = []

    if layout.settings.has_footnote:
        reserve = config.footnote_height * layout.font_scale
        baseline = geometry.height - geometry.margin - reserve * (1 - _BASELINE_RATIO)
        primitives.append(TextRun(
            layout.settings.footnote.strip(),
            geometry.width / 2,
            baseline,
            config.footnote_font_size * layout.font_scale,
            Align.CENTER,
        ))

    # Page number sits in the bottom margin, outside the content budget
    primitives.append(TextRun(
        f"Page {page.index + 1} of {layout.page_count}",
        geometry.width / 2,
        geometry.height - geometry.margin / 2,
        config.page_number_font_size,
        Align.CENTER,
    ))
    return primitives


def _line_boxes(placement: Placement, scale: float, config: LayoutConfig) -> List[float]:
    """Height of each display line, matching the height model."""
    problem = placement.problem
    if isinstance(problem, MultipleChoice):
        return [config.question_height * scale] + [
            config.option_height * scale for _ in problem.options or ()
        ]
    if isinstance(problem, AlgebraEquation):
        return [config.algebra_line_height * scale] * 2
    return [placement.height]


def _problem(placement: Placement, scale: float, config: LayoutConfig) -> List[Primitive]:
    if placement.region is Region.GRID_CELL:
        return _grid_cell(placement, scale, config)
    if isinstance(placement.problem, WordProblem):
        return _word_problem(placement, scale, config)

    label_gap = _LABEL_GAP * scale
    lines = format_lines(placement.problem)
    font_size = _fit_font(lines, placement.width - label_gap, config.problem_font_size * scale)
    primitives: List[Primitive] = []

    top = placement.top
    for index, (text, box) in enumerate(zip(lines, _line_boxes(placement, scale, config))):
        baseline = top + box * _BASELINE_RATIO
        if index == 0:
            primitives.append(TextRun(f"{placement.number}.", placement.left, baseline, font_size, bold=True))
        primitives.append(TextRun(text, placement.left + label_gap, baseline, font_size))
        top += box
    return primitives


def _word_problem(placement: Placement, scale: float, config: LayoutConfig) -> List[Primitive]:
    problem = placement.problem
    label_gap = _LABEL_GAP * scale

    # Exactly as many text lines as the height model reserved
    line_count = estimate_word_lines(problem.problem_text, config.chars_per_line)
    wrapped = _wrap_within(problem.problem_text or "", line_count, config.chars_per_line)
    font_size = _fit_font(wrapped + [ANSWER_LINE], placement.width - label_gap, config.problem_font_size * scale)
    boxes = [config.word_base_height * scale] + [config.word_line_height * scale] * (line_count - 1)

    primitives: List[Primitive] = [
        TextRun(f"{placement.number}.", placement.left, placement.top + boxes[0] * _BASELINE_RATIO, font_size, bold=True)
    ]
    top = placement.top
    for text, box in zip(wrapped, boxes):
        primitives.append(TextRun(text, placement.left + label_gap, top + box * _BASELINE_RATIO, font_size))
        top += box

    answer_top = placement.top + sum(boxes)
    answer_box = config.word_answer_height * scale
    primitives.append(TextRun(ANSWER_LINE, placement.left + label_gap, answer_top + answer_box * _BASELINE_RATIO, font_size))
    return primitives


def _wrap_within(text: str, max_lines: int, chars_per_line: int) -> List[str]:
    """
    Word-wrap text into at most max_lines lines.

    Lines are widened one character at a time until the text fits; the
    caller shrinks the font so the wider lines still fit the box.
    """
    width = chars_per_line
    while True:
        lines = textwrap.wrap(text, width=width) or [""]
        if len(lines) <= max_lines:
            return lines
        width += 1


def _grid_cell(placement: Placement, scale: float, config: LayoutConfig) -> List[Primitive]:
    lines = format_vertical(placement.problem)
    pitch = placement.height / len(lines)
    label = f"{placement.number}."
    right = placement.left + placement.width - _CELL_PADDING

    font_size = min(config.problem_font_size * scale, to_document_units(pitch) * _GRID_FONT_RATIO)
    # Label and the longest line share the cell width
    longest = max(lines, key=len)
    font_size = _fit_font([f"{label} {longest}"], placement.width - _CELL_PADDING, font_size)

    primitives: List[Primitive] = [
        TextRun(label, placement.left, placement.top + pitch * _BASELINE_RATIO, font_size, bold=True)
    ]
    for index, text in enumerate(lines):
        baseline = placement.top + pitch * index + pitch * _BASELINE_RATIO
        primitives.append(TextRun(text, right, baseline, font_size, Align.RIGHT))
    return primitives


def _fit_font(lines: List[str], width: float, font_size: float) -> float:
    """Shrink font_size so the longest line fits `width` inches."""
    longest = max((len(line) for line in lines), default=0)
    if longest == 0 or width <= 0:
        return font_size
    fitting = to_document_units(width) / (longest * _AVG_CHAR_WIDTH)
    return min(font_size, fitting)
