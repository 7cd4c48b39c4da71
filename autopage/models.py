"""
Typed containers for paginated rich-text content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from .text import split_words


@dataclass(frozen=True, slots=True)
class HeadingBlock:
    """A heading; never split across pages.

    Attributes:
        text: Heading text.
        level: Heading level, 1 (largest) through 6.
    """

    text: str
    level: int = 1

    @property
    def text_content(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class ParagraphBlock:
    """A run of flowing text that may be split between words.

    Example:
        >>> ParagraphBlock("one  two").tokens
        ('one', '  ', 'two')
    """

    text: str

    @property
    def tokens(self) -> Tuple[str, ...]:
        """Return words and whitespace runs; joining them gives ``text`` back."""

        return tuple(split_words(self.text))

    @property
    def text_content(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class ListBlock:
    """An ordered or unordered list of atomic items.

    Attributes:
        items: Item texts in display order.
        ordered: True for numbered lists.
        start: Number shown on the first item of an ordered list. A list
            continued on a later page starts where its first part stopped.
    """

    items: Tuple[str, ...]
    ordered: bool = False
    start: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def text_content(self) -> str:
        return "".join(self.items)

    def slice(self, start: int, stop: int | None = None) -> "ListBlock":
        """Return a new list holding ``items[start:stop]`` with numbering kept.

        Example:
            >>> ListBlock(("a", "b", "c"), ordered=True).slice(1).start
            2
        """

        return ListBlock(
            items=self.items[start:stop],
            ordered=self.ordered,
            start=self.start + start,
        )


@dataclass(frozen=True, slots=True)
class GenericBlock:
    """Any other block-level content (tables, images, unknown elements).

    Attributes:
        text: Text used for measurement and content checks.
        tag: Source element name, kept for callers that re-render.
        height: Fixed height in layout units; when set it replaces text
            measurement.
    """

    text: str = ""
    tag: str = "div"
    height: float | None = None

    @property
    def text_content(self) -> str:
        return self.text


Block = Union[HeadingBlock, ParagraphBlock, ListBlock, GenericBlock]


def block_kind(block: Block) -> str:
    """Return a short name for the block type, e.g. ``"paragraph"``.

    Example:
        >>> block_kind(HeadingBlock("Intro"))
        'heading'
    """

    if isinstance(block, HeadingBlock):
        return "heading"
    if isinstance(block, ParagraphBlock):
        return "paragraph"
    if isinstance(block, ListBlock):
        return "list"
    return "generic"


@dataclass(frozen=True, slots=True)
class Page:
    """A finished page of blocks.

    Attributes:
        blocks: Blocks in reading order.
        capacity: Height budget the page was filled against.
        number: 1-based page number.
        height: Measured height of ``blocks``.
        tolerance: Rounding allowance used for the fit test.
    """

    blocks: Tuple[Block, ...]
    capacity: float
    number: int
    height: float = 0.0
    tolerance: float = 0.0

    @property
    def overflows(self) -> bool:
        """Return True when the content is taller than the page allows."""

        return self.height > self.capacity + self.tolerance

    @property
    def is_empty(self) -> bool:
        return not self.blocks


@dataclass(frozen=True, slots=True)
class Document:
    """Paginated output: pages in order plus layout warnings."""

    pages: Tuple[Page, ...]
    warnings: Tuple[str, ...] = ()

    def __iter__(self) -> Iterator[Page]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __getitem__(self, index: int) -> Page:
        return self.pages[index]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def blocks(self) -> List[Block]:
        """Return every block across all pages in reading order."""

        result: List[Block] = []
        for page in self.pages:
            result.extend(page.blocks)
        return result

    def text_content(self) -> str:
        """Return the concatenated text of all blocks.

        Example:
            >>> Document(pages=()).text_content()
            ''
        """

        return "".join(block.text_content for block in self.blocks())
