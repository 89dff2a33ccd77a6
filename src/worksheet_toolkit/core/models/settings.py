"""
Module: settings

Purpose:
    Worksheet-wide settings passed into every pagination pass.

Key Classes:
    - WorksheetLayout: Layout mode (single-column, two-column, compact-grid)
    - WorksheetSettings: Title, footnote and layout (immutable)

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.layout.heights: Per-layout height constants
    - builder.layout.paginator: Column assignment algorithm
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WorksheetLayout(str, Enum):
    """How problems are arranged on a page."""
    SINGLE_COLUMN = "single-column"
    TWO_COLUMN = "two-column"
    COMPACT_GRID = "compact-grid"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str | WorksheetLayout) -> WorksheetLayout:
        """
        Resolve a layout name like "two-column" (or "two_column").

        Raises:
            ValueError: If the name is not a known layout
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(layout.value for layout in cls)
            raise ValueError(f"Unknown layout: {value!r} (expected one of {valid})") from None


@dataclass(frozen=True)
class WorksheetSettings:
    """
    Settings for one worksheet (immutable).

    Attributes:
        title: Heading printed at the top of every page
        footnote: Optional text centered above the bottom margin;
            reserves vertical space only when non-empty
        layout: Layout mode for the whole pagination pass

    Example:
        >>> settings = WorksheetSettings(title="Week 3", layout=WorksheetLayout.TWO_COLUMN)
        >>> settings.has_footnote
        False
    """

    title: str = "Math Worksheet"
    footnote: str = ""
    layout: WorksheetLayout = WorksheetLayout.SINGLE_COLUMN

    def __post_init__(self) -> None:
        """Validate settings on construction."""
        if not isinstance(self.layout, WorksheetLayout):
            raise ValueError(f"layout must be a WorksheetLayout: {self.layout!r}")

    @property
    def has_footnote(self) -> bool:
        """Whether a footnote is printed (and space reserved for it)."""
        return bool(self.footnote and self.footnote.strip())
