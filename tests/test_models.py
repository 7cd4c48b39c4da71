"""
Unit tests for autopage.models and autopage.text.
"""

import pytest

from autopage.models import (
    Document,
    GenericBlock,
    HeadingBlock,
    ListBlock,
    Page,
    ParagraphBlock,
    block_kind,
)
from autopage.text import join_tokens, split_words


class TestSplitWords:
    """Tests for split_words()."""

    @pytest.mark.parametrize(
        "text",
        ["", "one", "  lead", "trail  ", "a b\tc\n\nd", "été  naïve"],
    )
    def test_split_words_when_joined_then_original_text(self, text):
        assert "".join(split_words(text)) == text

    def test_split_words_when_whitespace_runs_then_single_tokens(self):
        assert split_words("a  b\n c") == ["a", "  ", "b", "\n ", "c"]

    def test_split_words_when_empty_then_no_tokens(self):
        assert split_words("") == []

    def test_join_tokens_when_range_given_then_slice_joined(self):
        tokens = split_words("one two three")

        assert join_tokens(tokens, 0, 3) == "one two"
        assert join_tokens(tokens, 3) == " three"


class TestBlocks:
    """Tests for block types."""

    def test_list_block_when_items_list_then_coerced_to_tuple(self):
        block = ListBlock(["a", "b"])

        assert block.items == ("a", "b")
        assert hash(block) == hash(ListBlock(("a", "b")))

    def test_list_block_slice_when_sliced_then_numbering_continues(self):
        block = ListBlock(("a", "b", "c", "d"), ordered=True, start=3)

        assert block.slice(0, 2) == ListBlock(("a", "b"), ordered=True, start=3)
        assert block.slice(2) == ListBlock(("c", "d"), ordered=True, start=5)

    def test_text_content_when_blocks_then_plain_text(self):
        assert HeadingBlock("T").text_content == "T"
        assert ListBlock(("a", "b")).text_content == "ab"
        assert GenericBlock(height=4).text_content == ""

    @pytest.mark.parametrize(
        "block,kind",
        [
            (HeadingBlock("h"), "heading"),
            (ParagraphBlock("p"), "paragraph"),
            (ListBlock(()), "list"),
            (GenericBlock(), "generic"),
        ],
    )
    def test_block_kind_when_called_then_name(self, block, kind):
        assert block_kind(block) == kind

    def test_paragraph_when_frozen_then_cannot_change(self):
        with pytest.raises(AttributeError):
            ParagraphBlock("x").text = "y"


class TestDocument:
    """Tests for Page and Document helpers."""

    def test_page_overflows_when_beyond_tolerance_then_true(self):
        assert Page((), capacity=100, number=1, height=100.6, tolerance=0.5).overflows
        assert not Page((), capacity=100, number=1, height=100.5, tolerance=0.5).overflows

    def test_document_when_iterated_then_pages_in_order(self):
        pages = (
            Page((HeadingBlock("a"),), 10, 1),
            Page((ParagraphBlock("b"), ListBlock(("c",))), 10, 2),
        )
        document = Document(pages=pages)

        assert list(document) == list(pages)
        assert len(document) == 2
        assert document[1].number == 2
        assert document.blocks() == [HeadingBlock("a"), ParagraphBlock("b"), ListBlock(("c",))]
        assert document.text_content() == "abc"

    def test_document_when_built_then_hashable_with_tuple_warnings(self):
        document = Document(pages=(Page((), 10, 1),), warnings=("tall",))

        assert isinstance(document.warnings, tuple)
        assert hash(document) == hash(Document(pages=(Page((), 10, 1),), warnings=("tall",)))
