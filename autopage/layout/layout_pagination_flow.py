"""Block flow: distribute blocks over fixed-capacity pages."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import replace
from typing import Deque, Iterable, List, Sequence, Tuple

from ..models import Block, Document, ListBlock, Page, ParagraphBlock, block_kind
from .layout_constants import DEBUG_PAGINATION
from .layout_oracle import LayoutOracle, MeasurementCache
from .layout_settings import Geometry
from .layout_split_list import split_list
from .layout_split_paragraph import split_paragraph
from .layout_types import _FlowState, _PageDraft

logger = logging.getLogger(__name__)


def _debug(*, msg: str) -> None:
    """Print pagination debug output when enabled.

    Args:
        msg: Message to print.
    Returns:
        None.
    """

    if DEBUG_PAGINATION:
        print(msg)


class PageFlow:
    """Fill pages greedily, splitting or relocating blocks that overflow.

    Headings and generic blocks move to the next page whole. Paragraphs are
    split between words when both parts keep enough lines; lists are split
    between items when at least two items stay behind. A block that fits on
    no page and cannot be split is placed alone on its own page and
    reported in ``Document.warnings``.

    Example:
        >>> from autopage.layout.layout_oracle import ReportLabOracle
        >>> flow = PageFlow(geometry=Geometry(), oracle=ReportLabOracle())
        >>> flow.run([ParagraphBlock("Hello")]).page_count
        1
    """

    def __init__(self, *, geometry: Geometry, oracle: LayoutOracle) -> None:
        self.geometry = geometry
        self.oracle = MeasurementCache(oracle=oracle)
        self.state = _FlowState()
        self.pending: Deque[Block] = deque()

    def run(self, blocks: Iterable[Block]) -> Document:
        """Lay out ``blocks`` and return the numbered document.

        Args:
            blocks: Blocks in reading order.
        Returns:
            Document with pages numbered from 1.
        """

        self.pending.extend(blocks)
        while self.pending:
            self._place(self.pending.popleft())
        pages = number_pages(pages=self._finished_pages())
        logger.debug("Paginated into %d pages", len(pages))
        return Document(pages=pages, warnings=tuple(self.state.warnings))

    def _content_height(self, *, page: _PageDraft) -> float:
        return self.oracle.measure_height(page.blocks, self.geometry.width)

    def _fits(self, *, page: _PageDraft) -> bool:
        return self._content_height(page=page) <= self.geometry.fit_limit

    def _remaining_height(self) -> float:
        """Return the capacity left on the current page."""

        used = self._content_height(page=self.state.current)
        return self.geometry.capacity_height - used

    def _place(self, block: Block) -> None:
        """Append ``block`` to the current page or handle its overflow.

        Args:
            block: Block to place.
        Returns:
            None.
        """

        page = self.state.current
        page.blocks.append(block)
        if self._fits(page=page):
            return
        page.blocks.pop()
        _debug(
            msg=(
                f"[flow] overflow page={len(self.state.pages)} "
                f"kind={block_kind(block)} remaining={self._remaining_height():.2f}"
            )
        )
        if isinstance(block, ParagraphBlock):
            self._place_paragraph(block)
        elif isinstance(block, ListBlock):
            self._place_list(block)
        else:
            self._relocate(block)

    def _relocate(self, block: Block) -> None:
        """Move ``block`` to a fresh page, or pin it if the page is fresh.

        Args:
            block: Block that did not fit.
        Returns:
            None.
        """

        if self.state.current.is_empty:
            self._force_place(block)
            return
        self.state.open_page()
        self.pending.appendleft(block)

    def _force_place(self, block: Block) -> None:
        """Append ``block`` without a fit check, recording any overflow.

        Args:
            block: Block to place.
        Returns:
            None.
        """

        page = self.state.current
        page.blocks.append(block)
        height = self._content_height(page=page)
        if height <= self.geometry.fit_limit:
            return
        message = (
            f"{block_kind(block)} block on page {len(self.state.pages)} is "
            f"{height:.1f} tall; page capacity is {self.geometry.capacity_height:.1f}"
        )
        logger.warning(message)
        self.state.warnings.append(message)

    def _place_paragraph(self, block: ParagraphBlock) -> None:
        """Split an overflowing paragraph or move it to the next page.

        Args:
            block: Paragraph that did not fit.
        Returns:
            None.
        """

        geometry = self.geometry
        total_lines = self.oracle.measure_line_count(
            block, geometry.width, geometry.line_height
        )
        if total_lines < geometry.min_split_lines:
            self._relocate(block)
            return
        split = split_paragraph(
            block,
            remaining_height=self._remaining_height(),
            min_lines_before=geometry.min_lines_before,
            min_lines_after=geometry.min_lines_after,
            oracle=self.oracle,
            max_width=geometry.width,
            line_height=geometry.line_height,
        )
        if split is None:
            self._relocate(block)
            return
        page = self.state.current
        page.blocks.append(split.fit)
        if self._fits(page=page):
            self.state.open_page()
            self.pending.appendleft(split.rest)
            return
        # Line-count estimate and pixel height disagreed; move the fit part
        # and keep the rest with it.
        page.blocks.pop()
        _debug(msg=f"[flow] rollback paragraph fit page={len(self.state.pages)}")
        self.state.open_page()
        self._force_place(split.fit)
        self.pending.appendleft(split.rest)

    def _place_list(self, block: ListBlock) -> None:
        """Split an overflowing list or move it to the next page.

        Args:
            block: List that did not fit.
        Returns:
            None.
        """

        split = split_list(
            block,
            remaining_height=self._remaining_height(),
            oracle=self.oracle,
            max_width=self.geometry.width,
        )
        if split is None:
            self._relocate(block)
            return
        page = self.state.current
        page.blocks.append(split.fit)
        if not self._fits(page=page):
            page.blocks.pop()
            if not page.is_empty:
                self._relocate(block)
                return
            self._force_place(split.fit)
        if split.rest.items:
            self.state.open_page()
            self.pending.appendleft(split.rest)

    def _finished_pages(self) -> Tuple[Page, ...]:
        """Return unnumbered pages with their measured heights."""

        return tuple(
            Page(
                blocks=tuple(draft.blocks),
                capacity=self.geometry.capacity_height,
                number=0,
                height=self._content_height(page=draft),
                tolerance=self.geometry.tolerance,
            )
            for draft in self.state.pages
        )


def number_pages(*, pages: Sequence[Page]) -> Tuple[Page, ...]:
    """Return ``pages`` numbered 1..N in order.

    Example:
        >>> pages = number_pages(pages=[Page((), 10, 0), Page((), 10, 0)])
        >>> [page.number for page in pages]
        [1, 2]
    """

    return tuple(replace(page, number=idx) for idx, page in enumerate(pages, start=1))


def paginate(
    blocks: Iterable[Block], geometry: Geometry, oracle: LayoutOracle
) -> Document:
    """Paginate ``blocks`` into pages of ``geometry.capacity_height``.

    Each call starts from an empty document; the result depends only on the
    blocks, the geometry, and the oracle's measurements.

    Args:
        blocks: Blocks in reading order.
        geometry: Page geometry shared by all pages.
        oracle: Measurement source.
    Returns:
        Document whose pages hold the blocks, split where needed.
    """

    block_list: List[Block] = list(blocks)
    _debug(msg=f"[flow] paginate blocks={len(block_list)}")
    return PageFlow(geometry=geometry, oracle=oracle).run(block_list)
