"""
Module: builder.layout.units

Purpose:
    Canonical page geometry and the conversions both renderers use.
    Every layout constant is authored once in inches; the preview works in
    96-DPI screen pixels and the PDF exporter in 72-per-inch points. Both
    convert through this module only, so a problem that fills a quarter of
    the page in one rendering fills a quarter of it in the other.

Key Classes:
    - UnitSpace: A target unit system (units per inch)
    - PageGeometry: Page width, height and margin in inches

Key Functions:
    - to_screen_units() / from_screen_units()
    - to_document_units() / from_document_units()
    - points_to_inches()

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.heights: Content budget
    - builder.output.pdf_renderer: Points
    - builder.output.preview: Pixels
"""

from __future__ import annotations

from dataclasses import dataclass

# Reference unit: inches
POINTS_PER_INCH = 72.0
SCREEN_DPI = 96.0

# US Letter with 0.75in margins
DEFAULT_PAGE_WIDTH_IN = 8.5
DEFAULT_PAGE_HEIGHT_IN = 11.0
DEFAULT_MARGIN_IN = 0.75


@dataclass(frozen=True)
class UnitSpace:
    """
    A unit system expressed as units per canonical inch.

    Example:
        >>> SCREEN.to_units(1.0)
        96.0
        >>> DOCUMENT.from_units(36.0)
        0.5
    """

    name: str
    units_per_inch: float

    def __post_init__(self) -> None:
        if self.units_per_inch <= 0:
            raise ValueError(f"units_per_inch must be positive: {self.units_per_inch}")

    def to_units(self, inches: float) -> float:
        """Convert canonical inches into this space."""
        return inches * self.units_per_inch

    def from_units(self, value: float) -> float:
        """Convert a value in this space back to canonical inches."""
        return value / self.units_per_inch

    def scaled(self, zoom: float) -> UnitSpace:
        """Same space at a different density (e.g. a zoomed preview)."""
        if zoom <= 0:
            raise ValueError(f"zoom must be positive: {zoom}")
        return UnitSpace(name=f"{self.name}@{zoom:g}x", units_per_inch=self.units_per_inch * zoom)


SCREEN = UnitSpace(name="screen", units_per_inch=SCREEN_DPI)
DOCUMENT = UnitSpace(name="document", units_per_inch=POINTS_PER_INCH)


def to_screen_units(inches: float) -> float:
    """Inches to preview pixels at 96 DPI."""
    return SCREEN.to_units(inches)


def from_screen_units(pixels: float) -> float:
    """Preview pixels at 96 DPI to inches."""
    return SCREEN.from_units(pixels)


def to_document_units(inches: float) -> float:
    """Inches to PDF points."""
    return DOCUMENT.to_units(inches)


def from_document_units(points: float) -> float:
    """PDF points to inches."""
    return DOCUMENT.from_units(points)


def points_to_inches(points: float) -> float:
    """Font sizes are authored in points; layout works in inches."""
    return points / POINTS_PER_INCH


@dataclass(frozen=True)
class PageGeometry:
    """
    Page size and uniform margin in canonical inches (immutable).

    Attributes:
        width: Page width
        height: Page height
        margin: Margin applied on all four sides

    Example:
        >>> geometry = PageGeometry()
        >>> geometry.content_width
        7.0
    """

    width: float = DEFAULT_PAGE_WIDTH_IN
    height: float = DEFAULT_PAGE_HEIGHT_IN
    margin: float = DEFAULT_MARGIN_IN

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        if self.width <= 0:
            raise ValueError(f"width must be positive: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive: {self.height}")
        if self.margin < 0:
            raise ValueError(f"margin must be non-negative: {self.margin}")
        if self.content_width <= 0:
            raise ValueError("Margins exceed page width")
        if self.content_height <= 0:
            raise ValueError("Margins exceed page height")

    @property
    def content_width(self) -> float:
        """Width inside the left and right margins."""
        return self.width - 2 * self.margin

    @property
    def content_height(self) -> float:
        """Height inside the top and bottom margins."""
        return self.height - 2 * self.margin

    def size_in(self, space: UnitSpace) -> tuple[float, float]:
        """Page (width, height) converted into a unit space."""
        return space.to_units(self.width), space.to_units(self.height)
