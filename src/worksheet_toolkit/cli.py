"""Command-line entry point: build a worksheet PDF from a worksheet JSON file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from worksheet_toolkit.builder import BuilderConfig, BuildError, build_worksheet
from worksheet_toolkit.builder.layout.units import PageGeometry
from worksheet_toolkit.core.models import WorksheetLayout


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="worksheet-builder",
        description="Paginate a worksheet JSON file and export it as PDF",
    )
    parser.add_argument("input", type=Path, help="Worksheet JSON file")
    parser.add_argument("-o", "--output-dir", type=Path, help="Output directory (default: <input dir>/output)")
    parser.add_argument(
        "--layout",
        choices=[layout.value for layout in WorksheetLayout],
        help="Override the layout stored in the file",
    )
    parser.add_argument("--title", type=str, help="Override the worksheet title")
    parser.add_argument("--page-size", nargs=2, type=float, metavar=("WIDTH", "HEIGHT"),
                        help="Page size in inches (default: 8.5 11)")
    parser.add_argument("--margin", type=float, default=0.75, help="Page margin in inches")
    parser.add_argument("--previews", action="store_true", help="Also export PNG page previews")
    parser.add_argument("--zoom", type=float, default=1.0, help="Preview zoom (1.0 = 96 DPI)")
    parser.add_argument("--no-metadata", action="store_true", help="Skip build_metadata.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        width, height = args.page_size if args.page_size else (8.5, 11.0)
        config = BuilderConfig(
            input_path=args.input,
            output_dir=args.output_dir,
            export_previews=args.previews,
            preview_zoom=args.zoom,
            write_metadata=not args.no_metadata,
            layout=WorksheetLayout.parse(args.layout) if args.layout else None,
            title=args.title,
            geometry=PageGeometry(width=width, height=height, margin=args.margin),
        )
    except ValueError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return 2

    try:
        result = build_worksheet(config)
    except BuildError as e:
        print(f"Build failed: {e}", file=sys.stderr)
        return 1

    print(
        f"Wrote {result.worksheet_pdf} "
        f"({result.page_count} page(s), {result.problem_count} problem(s), "
        f"font scale {result.layout.font_scale:g}, "
        f"{len(result.warnings)} warning(s))"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
