"""
Measurement helpers for reportlab flowables.
"""

from __future__ import annotations

from typing import Sequence

from reportlab.platypus import Flowable

_MAX_WRAP_HEIGHT = 10_000_000


def measure_height(flowable: Flowable, width: float) -> float:
    """Return the wrapped height for a flowable at the given width."""

    _, height = flowable.wrapOn(None, width, _MAX_WRAP_HEIGHT)
    return height


def stack_height(flowables: Sequence[Flowable], width: float) -> float:
    """Return the height of flowables stacked top to bottom.

    Space after a flowable and space before the next one are both kept
    between neighbours; nothing is added above the first or below the last.
    """

    total = 0.0
    for idx, flowable in enumerate(flowables):
        total += measure_height(flowable, width)
        if idx > 0:
            total += flowable.getSpaceBefore()
        if idx + 1 < len(flowables):
            total += flowable.getSpaceAfter()
    return total
