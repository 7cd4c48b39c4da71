"""
Paginate an HTML document and report where the page breaks fall.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from autopage.exceptions import PaginationError
from autopage.ingest import blocks_from_file
from autopage.layout.layout_constants import (
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_HEIGHT,
    DEFAULT_MIN_LINES,
    DEFAULT_TOLERANCE,
)
from autopage.layout.layout_pagination import (
    Geometry,
    ReportLabOracle,
    build_styles,
    paginate,
)
from autopage.models import Document, block_kind

_PREVIEW_CHARS = 60


def _parse_args() -> argparse.Namespace:
    """Return CLI arguments for the pagination script."""

    parser = argparse.ArgumentParser(
        description="Split an HTML document into fixed-height pages."
    )
    parser.add_argument("input", type=Path, help="HTML file to paginate.")
    parser.add_argument(
        "--height",
        type=float,
        default=None,
        help="Content height per page in px (default: A4 minus margins).",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=None,
        help="Content width in px (default: A4 minus margins).",
    )
    parser.add_argument(
        "--line-height", type=float, default=DEFAULT_LINE_HEIGHT, help="Body line height in px."
    )
    parser.add_argument(
        "--font-name", default=DEFAULT_FONT_NAME, help="Registered reportlab font name."
    )
    parser.add_argument(
        "--font-size", type=float, default=DEFAULT_FONT_SIZE, help="Body font size in px."
    )
    parser.add_argument(
        "--min-lines-before",
        type=int,
        default=DEFAULT_MIN_LINES,
        help="Fewest paragraph lines left at the bottom of a page.",
    )
    parser.add_argument(
        "--min-lines-after",
        type=int,
        default=DEFAULT_MIN_LINES,
        help="Fewest paragraph lines carried to the top of a page.",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=DEFAULT_TOLERANCE,
        help="Rounding allowance in px for the page fit test.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the pages as JSON instead of a text summary.",
    )
    return parser.parse_args()


def _geometry(*, args: argparse.Namespace) -> Geometry:
    """Return page geometry from CLI arguments.

    Args:
        args: Parsed CLI arguments.
    Returns:
        Geometry with A4 defaults for any size not given.
    """

    page = Geometry.from_page(
        line_height=args.line_height,
        min_lines_before=args.min_lines_before,
        min_lines_after=args.min_lines_after,
        tolerance=args.tolerance,
    )
    return Geometry(
        capacity_height=args.height if args.height is not None else page.capacity_height,
        width=args.width if args.width is not None else page.width,
        line_height=page.line_height,
        min_lines_before=page.min_lines_before,
        min_lines_after=page.min_lines_after,
        tolerance=page.tolerance,
    )


def _document_json(*, document: Document) -> List[Dict[str, object]]:
    """Return a JSON-ready description of each page.

    Args:
        document: Paginated document.
    Returns:
        List of page dictionaries.
    """

    return [
        {
            "number": page.number,
            "height": round(page.height, 2),
            "overflows": page.overflows,
            "blocks": [
                {"kind": block_kind(block), "text": block.text_content}
                for block in page.blocks
            ],
        }
        for page in document
    ]


def _summary_lines(*, document: Document) -> List[str]:
    """Return a human-readable summary of each page.

    Args:
        document: Paginated document.
    Returns:
        Lines of text to print.
    """

    lines: List[str] = []
    for page in document:
        flag = "  [over capacity]" if page.overflows else ""
        lines.append(f"Page {page.number}: {page.height:.1f}px{flag}")
        for block in page.blocks:
            preview = block.text_content[:_PREVIEW_CHARS]
            lines.append(f"  {block_kind(block):<9} {preview}")
    for warning in document.warnings:
        lines.append(f"warning: {warning}")
    return lines


def main() -> None:
    """Paginate the given HTML file and print the result.

    Example:
        >>> main()  # doctest: +SKIP
    """

    args = _parse_args()
    try:
        geometry = _geometry(args=args)
        oracle = ReportLabOracle(
            build_styles(
                line_height=geometry.line_height,
                font_name=args.font_name,
                font_size=args.font_size,
            )
        )
        document = paginate(blocks_from_file(args.input), geometry, oracle)
    except PaginationError as exc:
        raise SystemExit(f"error: {exc.message}") from exc
    if args.json:
        print(json.dumps(_document_json(document=document), indent=2))
        return
    print("\n".join(_summary_lines(document=document)))


if __name__ == "__main__":
    main()
