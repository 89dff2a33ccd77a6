"""
Module: builder.layout.config

Purpose:
    Configuration for the worksheet layout engine.
    Holds every height, spacing and font-size constant. Heights are in
    canonical inches, font sizes in points.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.heights: Height model
    - builder.layout.paginator: Page arrangement
    - builder.output: Font sizes and column geometry
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for worksheet layout (immutable).

    All height constants are unscaled; the font-scale factor multiplies
    them at pagination time.

    Attributes:
        problem_spacing: Vertical gap added after every problem (in)
        equation_height: basic-equation / fill-blanks line (in)
        two_column_equation_height: Same, under two-column layout (in)
        question_height: Multiple-choice question line (in)
        option_height: Multiple-choice option line (in)
        word_base_height: First line of a word problem (in)
        word_line_height: Each additional estimated line (in)
        word_answer_height: Answer line under a word problem (in)
        chars_per_line: Characters per line for word-problem estimates
        algebra_line_height: Each of the two algebra lines (in)
        title_font_size: Title size (pt)
        header_spacing: Gap below the title (in)
        name_line_spacing: Gap above the Name/Date line (in)
        name_line_height: Name/Date line (in)
        rule_spacing: Horizontal rule plus its gap (in)
        footnote_height: Reserved when a footnote is set (in)
        column_gutter: Gap between the two columns (in)
        grid_columns: Cells per compact-grid row

    Example:
        >>> config = LayoutConfig()
        >>> round(config.problem_spacing + config.equation_height, 2)
        0.5
    """

    # Spacing
    problem_spacing: float = 0.2

    # Equations
    equation_height: float = 0.3
    two_column_equation_height: float = 0.25

    # Multiple choice
    question_height: float = 0.25
    option_height: float = 0.2

    # Word problems
    word_base_height: float = 0.25
    word_line_height: float = 0.2
    word_answer_height: float = 0.4
    chars_per_line: int = 80

    # Algebra
    algebra_line_height: float = 0.3

    # Header
    title_font_size: float = 20.0
    header_spacing: float = 0.3
    name_line_spacing: float = 0.2
    name_line_height: float = 0.5
    rule_spacing: float = 0.4

    # Footer
    footnote_height: float = 0.3

    # Columns
    column_gutter: float = 0.3
    grid_columns: int = 10

    # Font sizes (pt), before scaling
    problem_font_size: float = 14.0
    name_font_size: float = 12.0
    footnote_font_size: float = 8.0
    page_number_font_size: float = 8.0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "problem_spacing":
                if value < 0:
                    raise ValueError(f"problem_spacing must be non-negative: {value}")
            elif value <= 0:
                raise ValueError(f"{f.name} must be positive: {value}")
