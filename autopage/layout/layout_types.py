"""Data structures shared by the pagination flow and splitters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..models import Block


@dataclass(frozen=True, slots=True)
class SplitResult:
    """Two fragments of a block split at a page boundary.

    Args:
        fit: Leading fragment that fits the space left on the page.
        rest: Trailing fragment carried to the next page; an empty list when
            every list item fit.
    """

    fit: Block
    rest: Block


@dataclass(slots=True)
class _PageDraft:
    """A page still being filled."""

    blocks: List[Block] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.blocks


@dataclass(slots=True)
class _FlowState:
    """Mutable state for one pagination pass."""

    pages: List[_PageDraft] = field(default_factory=lambda: [_PageDraft()])
    warnings: List[str] = field(default_factory=list)

    @property
    def current(self) -> _PageDraft:
        return self.pages[-1]

    def open_page(self) -> _PageDraft:
        """Start a new page unless the current one is still empty.

        Returns:
            The page that now receives content.
        """

        if not self.current.is_empty:
            self.pages.append(_PageDraft())
        return self.current
