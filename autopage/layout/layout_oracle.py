"""Layout oracles: the measurement boundary of the pagination engine."""

from __future__ import annotations

import html as htmllib
import math
from dataclasses import dataclass, field
from typing import Dict, Protocol, Sequence, Tuple

from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Flowable, ListFlowable, ListItem, Paragraph, Spacer

from ..exceptions import OracleContractError
from ..layout_utils import stack_height
from ..models import Block, GenericBlock, HeadingBlock, ListBlock, ParagraphBlock
from .layout_settings import build_styles


class LayoutOracle(Protocol):
    """Measures rendered blocks.

    Heights must be non-decreasing as text is appended to a paragraph;
    the paragraph splitter's binary search relies on it.
    """

    def measure_height(self, content: Sequence[Block], max_width: float) -> float:
        """Return the height of ``content`` stacked at ``max_width``."""

    def measure_line_count(
        self, content: Block, max_width: float, line_height: float
    ) -> int:
        """Return how many ``line_height`` lines ``content`` occupies (>= 1)."""


class ReportLabOracle:
    """Measure blocks by wrapping them as reportlab flowables.

    Example:
        >>> oracle = ReportLabOracle()
        >>> oracle.measure_height([ParagraphBlock("Hello")], 400) > 0
        True
    """

    def __init__(self, styles: Dict[str, ParagraphStyle] | None = None) -> None:
        self.styles = styles if styles is not None else build_styles()

    def flowable_for(self, block: Block) -> Flowable:
        """Return the flowable used to measure ``block``.

        Args:
            block: Block to convert.
        Returns:
            Paragraph, ListFlowable or Spacer.
        """

        if isinstance(block, HeadingBlock):
            level = min(max(block.level, 1), 6)
            return Paragraph(_markup(block.text), self.styles[f"h{level}"])
        if isinstance(block, ParagraphBlock):
            return Paragraph(_markup(block.text), self.styles["body"])
        if isinstance(block, ListBlock):
            return self._list_flowable(block)
        if isinstance(block, GenericBlock) and block.height is not None:
            return Spacer(1, block.height)
        return Paragraph(_markup(block.text_content), self.styles["generic"])

    def _list_flowable(self, block: ListBlock) -> Flowable:
        """Return a ListFlowable numbered from ``block.start``."""

        if not block.items:
            return Spacer(1, 0)
        items = [
            ListItem(Paragraph(_markup(item), self.styles["list_item"]))
            for item in block.items
        ]
        if block.ordered:
            return ListFlowable(items, bulletType="1", start=block.start)
        return ListFlowable(items, bulletType="bullet")

    def measure_height(self, content: Sequence[Block], max_width: float) -> float:
        flowables = [self.flowable_for(block) for block in content]
        return stack_height(flowables, max_width)

    def measure_line_count(
        self, content: Block, max_width: float, line_height: float
    ) -> int:
        height = self.measure_height([content], max_width)
        return max(1, round(height / line_height))


def _markup(text: str) -> str:
    return htmllib.escape(text, quote=False)


@dataclass(slots=True)
class MeasurementCache:
    """Memoize and validate oracle measurements for one pagination pass.

    Repeated requests for the same content and width, common during the
    paragraph binary search, reach the wrapped oracle only once. Every
    result is checked; invalid ones raise OracleContractError.

    Args:
        oracle: Oracle to wrap.
    """

    oracle: LayoutOracle
    _heights: Dict[Tuple[Tuple[Block, ...], float], float] = field(
        default_factory=dict
    )
    _lines: Dict[Tuple[Block, float, float], int] = field(default_factory=dict)

    def measure_height(self, content: Sequence[Block], max_width: float) -> float:
        key = (tuple(content), max_width)
        if key in self._heights:
            return self._heights[key]
        height = self.oracle.measure_height(key[0], max_width)
        self._heights[key] = _checked_height(value=height)
        return self._heights[key]

    def measure_line_count(
        self, content: Block, max_width: float, line_height: float
    ) -> int:
        key = (content, max_width, line_height)
        if key in self._lines:
            return self._lines[key]
        lines = self.oracle.measure_line_count(content, max_width, line_height)
        self._lines[key] = _checked_line_count(value=lines)
        return self._lines[key]


def _checked_height(*, value: object) -> float:
    """Return ``value`` as a height or raise OracleContractError.

    Args:
        value: Measurement returned by an oracle.
    Returns:
        The height as a float.
    """

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise OracleContractError(f"height must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise OracleContractError(f"height must be finite and >= 0, got {value!r}")
    return float(value)


def _checked_line_count(*, value: object) -> int:
    """Return ``value`` as a line count or raise OracleContractError.

    Args:
        value: Line count returned by an oracle.
    Returns:
        The line count.
    """

    if isinstance(value, bool) or not isinstance(value, int):
        raise OracleContractError(f"line count must be an integer, got {value!r}")
    if value < 1:
        raise OracleContractError(f"line count must be >= 1, got {value!r}")
    return value
