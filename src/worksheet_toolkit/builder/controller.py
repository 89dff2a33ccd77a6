"""
Module: builder.controller

Purpose:
    Orchestrate the complete worksheet building pipeline.
    Load → Filter → Paginate → Render

Key Functions:
    - build_worksheet(): Main entry point for building a worksheet

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - core.utils.serialization: Worksheet loading
    - core.schemas.validator: Filtering incomplete problems
    - builder.layout: Pagination
    - builder.output: PDF and preview rendering

Used By:
    - worksheet_toolkit.cli: Command-line builds
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, replace
from datetime import datetime
from pathlib import Path
from typing import List

from worksheet_toolkit.core.schemas.validator import ValidationError, filter_valid_problems
from worksheet_toolkit.core.utils.serialization import load_worksheet_json, settings_to_dict

from .config import BuilderConfig
from .layout import LayoutResult, layout_worksheet
from .output.pdf_renderer import render_to_pdf
from .output.preview import save_preview_pngs

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        worksheet_pdf: Path to generated PDF
        preview_paths: PNG previews (empty unless requested)
        layout: Layout the PDF was rendered from
        problem_count: Problems printed (after filtering)
        skipped_count: Incomplete problems left out
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_worksheet(config)
        >>> print(f"Generated {result.page_count} pages")
    """

    worksheet_pdf: Path
    preview_paths: tuple[Path, ...]
    layout: LayoutResult
    problem_count: int
    skipped_count: int
    metadata: dict
    warnings: tuple[str, ...]

    @property
    def page_count(self) -> int:
        """Number of pages generated."""
        return self.layout.page_count


def build_worksheet(config: BuilderConfig) -> BuildResult:
    """
    Build a worksheet from start to finish.

    Pipeline:
    1. Load settings and problems from the worksheet file
    2. Apply layout/title overrides
    3. Drop incomplete problems
    4. Paginate (with font scaling for sparse single pages)
    5. Render PDF
    6. (Optional) Render PNG previews
    7. (Optional) Write build metadata

    Args:
        config: Build configuration

    Returns:
        BuildResult with paths and layout

    Raises:
        BuildError: If loading or rendering fails

    Example:
        >>> result = build_worksheet(BuilderConfig(input_path=Path("week3.json")))
    """
    warnings: List[str] = []
    start_time = time.perf_counter()

    logger.info(f"Starting worksheet build from {config.input_path}")

    # 1. Load worksheet
    try:
        settings, problems = load_worksheet_json(Path(config.input_path))
    except (FileNotFoundError, ValidationError) as e:
        raise BuildError(f"Failed to load worksheet: {e}") from e

    # 2. Overrides
    if config.layout is not None:
        settings = replace(settings, layout=config.layout)
    if config.title is not None:
        settings = replace(settings, title=config.title)

    # 3. Filter
    printable = filter_valid_problems(problems)
    skipped = len(problems) - len(printable)
    if skipped:
        warnings.append(f"Skipped {skipped} incomplete problem(s)")
    logger.info(f"Loaded {len(problems)} problems, {len(printable)} printable")

    # 4. Paginate
    layout = layout_worksheet(printable, settings, config.geometry)
    warnings.extend(layout.warnings)

    # 5. Render PDF
    output_dir = config.resolved_output_dir
    worksheet_pdf = output_dir / config.pdf_name
    try:
        render_to_pdf(layout, worksheet_pdf)
    except OSError as e:
        raise BuildError(f"Failed to write PDF: {e}") from e

    # 6. Previews
    preview_paths: List[Path] = []
    if config.export_previews:
        try:
            preview_paths = save_preview_pngs(layout, output_dir / "preview", zoom=config.preview_zoom)
        except OSError as e:
            raise BuildError(f"Failed to write previews: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Worksheet generation completed in {elapsed:.2f}s")

    # 7. Metadata
    metadata = _build_metadata(config, layout, len(printable), skipped)
    if config.write_metadata:
        _write_metadata(output_dir, metadata)

    return BuildResult(
        worksheet_pdf=worksheet_pdf,
        preview_paths=tuple(preview_paths),
        layout=layout,
        problem_count=len(printable),
        skipped_count=skipped,
        metadata=metadata,
        warnings=tuple(warnings),
    )


def _build_metadata(
    config: BuilderConfig,
    layout: LayoutResult,
    problem_count: int,
    skipped_count: int = 0,
) -> dict:
    """
    Build metadata dictionary for a generated worksheet.

    Contains settings, page breakdown and timestamp.

    Example:
        >>> metadata = _build_metadata(config, layout, 12)
        >>> metadata["page_count"]
        1
    """
    from worksheet_toolkit import __version__

    pages = [
        {
            "page": page.index + 1,
            "problem_ids": [problem.id for problem in page.problems],
            "height_used_in": round(page.height_used, 4),
        }
        for page in layout.pages
    ]

    return {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "generator_version": __version__,
        "source": str(config.input_path),
        "settings": settings_to_dict(layout.settings),
        "page_size_in": [layout.geometry.width, layout.geometry.height],
        "margin_in": layout.geometry.margin,
        "font_scale": layout.font_scale,
        "content_budget_in": round(layout.content_budget, 4),
        "problem_count": problem_count,
        "skipped_count": skipped_count,
        "page_count": layout.page_count,
        "pages": pages,
    }


def _write_metadata(output_dir: Path, metadata: dict) -> None:
    """
    Write metadata JSON file to output directory.

    Raises:
        BuildError: If writing fails

    Example:
        >>> _write_metadata(Path("output"), metadata)
        # Creates output/build_metadata.json
    """
    metadata_path = output_dir / "build_metadata.json"

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        with open(metadata_path, "w", encoding="utf-8") as f:
            json.dump(metadata, f, indent=2, ensure_ascii=False)
        logger.debug(f"Wrote metadata to {metadata_path}")
    except OSError as e:
        raise BuildError(f"Failed to write metadata: {e}") from e
