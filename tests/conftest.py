import math
from typing import List, Sequence

import pytest

from autopage.layout.layout_settings import Geometry
from autopage.models import (
    Block,
    HeadingBlock,
    ListBlock,
    ParagraphBlock,
)


class CharOracle:
    """Deterministic oracle: text wraps every ``chars_per_line`` characters.

    Paragraph and generic text take ``ceil(len / chars_per_line)`` lines,
    each list item at least one line, headings a fixed height. ``gap`` is
    added between neighbouring blocks.
    """

    def __init__(
        self,
        *,
        chars_per_line: int = 10,
        line_height: float = 10.0,
        heading_height: float = 20.0,
        gap: float = 0.0,
    ) -> None:
        self.chars_per_line = chars_per_line
        self.line_height = line_height
        self.heading_height = heading_height
        self.gap = gap
        self.height_calls = 0
        self.line_calls = 0

    def _lines(self, text: str) -> int:
        return math.ceil(len(text) / self.chars_per_line)

    def block_height(self, block: Block) -> float:
        if isinstance(block, HeadingBlock):
            return self.heading_height
        if isinstance(block, ParagraphBlock):
            return self._lines(block.text) * self.line_height
        if isinstance(block, ListBlock):
            return sum(max(1, self._lines(item)) for item in block.items) * self.line_height
        if block.height is not None:
            return block.height
        return self._lines(block.text) * self.line_height

    def measure_height(self, content: Sequence[Block], max_width: float) -> float:
        self.height_calls += 1
        blocks = list(content)
        total = sum(self.block_height(block) for block in blocks)
        return total + self.gap * max(0, len(blocks) - 1)

    def measure_line_count(self, content: Block, max_width: float, line_height: float) -> int:
        self.line_calls += 1
        return max(1, round(self.block_height(content) / line_height))


def words_text(count: int, word_length: int = 9) -> str:
    """Return ``count`` distinct words of ``word_length`` chars joined by spaces."""

    words: List[str] = []
    for idx in range(count):
        stem = f"w{idx}"
        words.append((stem + "x" * word_length)[:word_length])
    return " ".join(words)


@pytest.fixture
def oracle() -> CharOracle:
    return CharOracle()


@pytest.fixture
def geometry() -> Geometry:
    """Ten 10px lines per page."""

    return Geometry(capacity_height=100.0, width=100.0, line_height=10.0)


@pytest.fixture
def char_oracle_factory():
    def _create(**kwargs) -> CharOracle:
        return CharOracle(**kwargs)

    return _create


@pytest.fixture
def make_words():
    return words_text
