"""
Module: builder.config

Purpose:
    Configuration dataclass for the worksheet build pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - BuilderConfig: Main configuration for building a worksheet

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main build controller
    - cli: Command-line entry point
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from worksheet_toolkit.core.models import WorksheetLayout

from .layout.units import PageGeometry


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for building a worksheet (immutable).

    Attributes:
        input_path: Worksheet JSON file
        output_dir: Directory for generated files (default: <input dir>/output)
        pdf_name: File name of the exported PDF
        layout: Overrides the layout stored in the worksheet file
        title: Overrides the title stored in the worksheet file
        geometry: Page size and margins in inches
        export_previews: Also write page-NNN.png previews
        preview_zoom: Multiplier on the 96 DPI preview density
        write_metadata: Write build_metadata.json next to the PDF

    Example:
        >>> config = BuilderConfig(
        ...     input_path=Path("week3.json"),
        ...     layout=WorksheetLayout.TWO_COLUMN,
        ... )
    """

    # Required
    input_path: Path

    # Output
    output_dir: Optional[Path] = None
    pdf_name: str = "worksheet.pdf"
    export_previews: bool = False
    preview_zoom: float = 1.0
    write_metadata: bool = True

    # Overrides
    layout: Optional[WorksheetLayout] = None
    title: Optional[str] = None

    # Page
    geometry: PageGeometry = field(default_factory=PageGeometry)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.pdf_name or not self.pdf_name.lower().endswith(".pdf"):
            raise ValueError(f"pdf_name must end with .pdf: {self.pdf_name!r}")
        if self.preview_zoom <= 0:
            raise ValueError(f"preview_zoom must be positive: {self.preview_zoom}")
        if self.layout is not None and not isinstance(self.layout, WorksheetLayout):
            raise ValueError(f"layout must be a WorksheetLayout: {self.layout!r}")

    @property
    def resolved_output_dir(self) -> Path:
        """Output directory, defaulting to an "output" folder beside the input."""
        if self.output_dir is not None:
            return Path(self.output_dir)
        return Path(self.input_path).parent / "output"
