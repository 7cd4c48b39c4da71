"""Page geometry and paragraph styles for pagination."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from reportlab.lib.enums import TA_LEFT
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet

from ..exceptions import GeometryError
from .layout_constants import (
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_HEIGHT,
    DEFAULT_MIN_LINES,
    DEFAULT_TOLERANCE,
    MM_TO_PX,
)

_BOLD_FONTS = {
    "Helvetica": "Helvetica-Bold",
    "Times-Roman": "Times-Bold",
    "Courier": "Courier-Bold",
}
_HEADING_SCALE = {1: 2.0, 2: 1.5, 3: 1.17, 4: 1.0, 5: 0.83, 6: 0.67}


def mm_to_px(mm: float) -> int:
    """Convert millimetres to whole pixels at 96 dpi.

    Example:
        >>> mm_to_px(25)
        94
    """

    return int(math.floor(mm * MM_TO_PX + 0.5))


@dataclass(frozen=True, slots=True)
class Geometry:
    """Page geometry used for every page of a document.

    Attributes:
        capacity_height: Height budget of a page's content area.
        width: Width of the content area, passed to the layout oracle.
        line_height: Height of one body text line.
        min_lines_before: Fewest paragraph lines allowed at a page bottom.
        min_lines_after: Fewest paragraph lines allowed at a page top.
        tolerance: Allowance added to ``capacity_height`` in fit tests.

    Example:
        >>> Geometry().capacity_height
        935.0
    """

    capacity_height: float = 935.0
    width: float = 624.0
    line_height: float = DEFAULT_LINE_HEIGHT
    min_lines_before: int = DEFAULT_MIN_LINES
    min_lines_after: int = DEFAULT_MIN_LINES
    tolerance: float = DEFAULT_TOLERANCE

    def __post_init__(self) -> None:
        """Reject geometry that cannot hold a layout."""

        for name in ("capacity_height", "width", "line_height"):
            value = getattr(self, name)
            if not _is_number(value) or not math.isfinite(value) or value <= 0:
                raise GeometryError(f"{name} must be a positive number: {value!r}")
        for name in ("min_lines_before", "min_lines_after"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise GeometryError(f"{name} must be an integer >= 1: {value!r}")
        if (
            not _is_number(self.tolerance)
            or not math.isfinite(self.tolerance)
            or self.tolerance < 0
        ):
            raise GeometryError(f"tolerance must be >= 0: {self.tolerance!r}")

    @property
    def fit_limit(self) -> float:
        """Return the tallest content height that still counts as fitting."""

        return self.capacity_height + self.tolerance

    @property
    def min_split_lines(self) -> int:
        """Return the fewest lines a paragraph needs before it may be split."""

        return self.min_lines_before + self.min_lines_after

    @classmethod
    def from_page(
        cls,
        *,
        page_width_mm: float = 210.0,
        page_height_mm: float = 297.0,
        margin_top_mm: float = 25.0,
        margin_bottom_mm: float = 25.0,
        margin_left_mm: float = 30.0,
        margin_right_mm: float = 15.0,
        line_height: float = DEFAULT_LINE_HEIGHT,
        min_lines_before: int = DEFAULT_MIN_LINES,
        min_lines_after: int = DEFAULT_MIN_LINES,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> "Geometry":
        """Build geometry from a page size and margins given in millimetres.

        Args:
            page_width_mm: Page width.
            page_height_mm: Page height.
            margin_top_mm: Top margin.
            margin_bottom_mm: Bottom margin.
            margin_left_mm: Left margin.
            margin_right_mm: Right margin.
            line_height: Body line height in pixels.
            min_lines_before: Orphan minimum.
            min_lines_after: Widow minimum.
            tolerance: Rounding allowance in pixels.
        Returns:
            Geometry whose content area is the page minus its margins.

        Example:
            >>> Geometry.from_page().width
            624.0
        """

        height = (
            mm_to_px(page_height_mm)
            - mm_to_px(margin_top_mm)
            - mm_to_px(margin_bottom_mm)
        )
        width = (
            mm_to_px(page_width_mm)
            - mm_to_px(margin_left_mm)
            - mm_to_px(margin_right_mm)
        )
        return cls(
            capacity_height=float(height),
            width=float(width),
            line_height=line_height,
            min_lines_before=min_lines_before,
            min_lines_after=min_lines_after,
            tolerance=tolerance,
        )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def build_styles(
    *,
    line_height: float = DEFAULT_LINE_HEIGHT,
    font_name: str = DEFAULT_FONT_NAME,
    font_size: float = DEFAULT_FONT_SIZE,
) -> Dict[str, ParagraphStyle]:
    """Create the paragraph styles used to measure blocks.

    Args:
        line_height: Leading of body text.
        font_name: Registered reportlab font for body text.
        font_size: Body font size.
    Returns:
        Mapping of style keys to ParagraphStyle objects.

    Example:
        >>> styles = build_styles()
        >>> sorted(styles)[:3]
        ['body', 'generic', 'h1']
    """

    base = getSampleStyleSheet()
    body = ParagraphStyle(
        "body",
        parent=base["Normal"],
        fontName=font_name,
        fontSize=font_size,
        leading=line_height,
        alignment=TA_LEFT,
        spaceBefore=0,
        spaceAfter=font_size * 0.5,
    )
    styles: Dict[str, ParagraphStyle] = {
        "body": body,
        "list_item": ParagraphStyle("list_item", parent=body, spaceAfter=0),
        "generic": ParagraphStyle("generic", parent=body),
    }
    bold = _BOLD_FONTS.get(font_name, font_name)
    for level, scale in _HEADING_SCALE.items():
        size = font_size * scale
        styles[f"h{level}"] = ParagraphStyle(
            f"h{level}",
            parent=body,
            fontName=bold,
            fontSize=size,
            leading=size * 1.25,
            spaceBefore=size * 0.5,
            spaceAfter=size * 0.25,
        )
    return styles
