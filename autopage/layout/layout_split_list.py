"""Split a list between items, never stranding a single item."""

from __future__ import annotations

from ..models import ListBlock
from .layout_oracle import LayoutOracle
from .layout_types import SplitResult


def split_list(
    block: ListBlock,
    *,
    remaining_height: float,
    oracle: LayoutOracle,
    max_width: float,
) -> SplitResult | None:
    """Split ``block`` so its leading items fill ``remaining_height``.

    Items are added one at a time and the growing list is re-measured, so
    bullet widths and item spacing are accounted for as they would render.

    Args:
        block: List to split.
        remaining_height: Space left on the current page.
        oracle: Measurement source.
        max_width: Wrapping width.
    Returns:
        SplitResult with the fitting items and the remainder (an empty list
        when everything fit), or None when fewer than two items fit.

    Example:
        >>> split_list(ListBlock(()), remaining_height=10, oracle=None, max_width=1) is None
        True
    """

    if not block.items:
        return None
    count_fit = _count_fitting_items(
        block=block,
        remaining_height=remaining_height,
        oracle=oracle,
        max_width=max_width,
    )
    if count_fit == 0:
        return None
    if count_fit == 1 and len(block.items) > 1:
        return None
    return SplitResult(fit=block.slice(0, count_fit), rest=block.slice(count_fit))


def _count_fitting_items(
    *,
    block: ListBlock,
    remaining_height: float,
    oracle: LayoutOracle,
    max_width: float,
) -> int:
    """Return how many leading items fit within ``remaining_height``."""

    count_fit = 0
    for idx in range(len(block.items)):
        candidate = block.slice(0, idx + 1)
        if oracle.measure_height([candidate], max_width) > remaining_height:
            break
        count_fit = idx + 1
    return count_fit
