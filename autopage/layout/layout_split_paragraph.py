"""Split a paragraph between words with widow and orphan control."""

from __future__ import annotations

from typing import Sequence

from ..models import ParagraphBlock
from ..text import join_tokens
from .layout_oracle import LayoutOracle
from .layout_types import SplitResult


def split_paragraph(
    paragraph: ParagraphBlock,
    *,
    remaining_height: float,
    min_lines_before: int,
    min_lines_after: int,
    oracle: LayoutOracle,
    max_width: float,
    line_height: float,
) -> SplitResult | None:
    """Split ``paragraph`` so its first part fills ``remaining_height``.

    The prefix length is found by binary search over token counts, which
    assumes the oracle's height and line count never shrink as tokens are
    appended. Text with floats or other out-of-flow content breaks that
    assumption and may yield a smaller split than possible.

    Args:
        paragraph: Paragraph to split.
        remaining_height: Space left on the current page.
        min_lines_before: Fewest lines the first part may have.
        min_lines_after: Fewest lines the second part may have.
        oracle: Measurement source.
        max_width: Wrapping width.
        line_height: Height of one line.
    Returns:
        SplitResult whose fragments join back into the paragraph text, or
        None when no split point satisfies the line minimums.
    """

    tokens = paragraph.tokens
    if not tokens:
        return None
    total_lines = oracle.measure_line_count(paragraph, max_width, line_height)
    if total_lines < min_lines_before + min_lines_after:
        return None
    best = _longest_prefix(
        tokens=tokens,
        total_lines=total_lines,
        remaining_height=remaining_height,
        min_lines_before=min_lines_before,
        min_lines_after=min_lines_after,
        oracle=oracle,
        max_width=max_width,
        line_height=line_height,
    )
    if best <= 0 or best >= len(tokens):
        return None
    return SplitResult(
        fit=ParagraphBlock(join_tokens(tokens, 0, best)),
        rest=ParagraphBlock(join_tokens(tokens, best)),
    )


def _longest_prefix(
    *,
    tokens: Sequence[str],
    total_lines: int,
    remaining_height: float,
    min_lines_before: int,
    min_lines_after: int,
    oracle: LayoutOracle,
    max_width: float,
    line_height: float,
) -> int:
    """Return the largest token count that may end the first fragment.

    Args:
        tokens: Paragraph tokens.
        total_lines: Line count of the whole paragraph.
        remaining_height: Space left on the page.
        min_lines_before: Orphan minimum.
        min_lines_after: Widow minimum.
        oracle: Measurement source.
        max_width: Wrapping width.
        line_height: Height of one line.
    Returns:
        Token count, or 0 when no prefix qualifies.
    """

    lo, hi, best = 1, len(tokens) - 1, 0
    while lo <= hi:
        mid = (lo + hi) // 2
        prefix = ParagraphBlock(join_tokens(tokens, 0, mid))
        height = oracle.measure_height([prefix], max_width)
        if height > remaining_height:
            hi = mid - 1
            continue
        lines_used = oracle.measure_line_count(prefix, max_width, line_height)
        if lines_used < min_lines_before:
            lo = mid + 1
        elif total_lines - lines_used < min_lines_after:
            hi = mid - 1
        else:
            best = mid
            lo = mid + 1
    return best
