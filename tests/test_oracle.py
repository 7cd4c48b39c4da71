"""
Unit tests for autopage.layout.layout_oracle.
"""

import math

import pytest
from reportlab.platypus import ListFlowable, Paragraph

from autopage.exceptions import OracleContractError, PaginationError
from autopage.layout.layout_oracle import MeasurementCache, ReportLabOracle
from autopage.layout.layout_pagination import paginate
from autopage.layout.layout_settings import Geometry, build_styles
from autopage.models import GenericBlock, HeadingBlock, ListBlock, ParagraphBlock


class _FixedOracle:
    """Oracle that returns the same measurement for everything."""

    def __init__(self, *, height=10.0, lines=1):
        self.height = height
        self.lines = lines

    def measure_height(self, content, max_width):
        return self.height

    def measure_line_count(self, content, max_width, line_height):
        return self.lines


class TestMeasurementCache:
    """Tests for MeasurementCache validation and memoization."""

    @pytest.mark.parametrize("height", [-1.0, math.nan, math.inf, "10", True, None])
    def test_measure_height_when_invalid_then_raises(self, height):
        cache = MeasurementCache(oracle=_FixedOracle(height=height))

        with pytest.raises(OracleContractError):
            cache.measure_height([ParagraphBlock("x")], 100.0)

    @pytest.mark.parametrize("lines", [0, -2, 1.5, "3", False])
    def test_measure_line_count_when_invalid_then_raises(self, lines):
        cache = MeasurementCache(oracle=_FixedOracle(lines=lines))

        with pytest.raises(OracleContractError):
            cache.measure_line_count(ParagraphBlock("x"), 100.0, 10.0)

    def test_measure_height_when_zero_then_accepted(self):
        cache = MeasurementCache(oracle=_FixedOracle(height=0))

        assert cache.measure_height([], 100.0) == 0.0

    def test_measure_height_when_repeated_then_oracle_called_once(self, char_oracle_factory):
        oracle = char_oracle_factory()
        cache = MeasurementCache(oracle=oracle)
        content = [ParagraphBlock("hello world"), HeadingBlock("Title")]

        first = cache.measure_height(content, 100.0)
        second = cache.measure_height(list(content), 100.0)

        assert first == second == 40.0
        assert oracle.height_calls == 1

    def test_measure_height_when_width_changes_then_measured_again(self, char_oracle_factory):
        oracle = char_oracle_factory()
        cache = MeasurementCache(oracle=oracle)

        cache.measure_height([ParagraphBlock("hello")], 100.0)
        cache.measure_height([ParagraphBlock("hello")], 200.0)

        assert oracle.height_calls == 2

    def test_measure_line_count_when_repeated_then_oracle_called_once(self, char_oracle_factory):
        oracle = char_oracle_factory()
        cache = MeasurementCache(oracle=oracle)

        cache.measure_line_count(ParagraphBlock("hello"), 100.0, 10.0)
        cache.measure_line_count(ParagraphBlock("hello"), 100.0, 10.0)

        assert oracle.line_calls == 1

    def test_paginate_when_oracle_breaks_contract_then_error_propagates(self, geometry):
        oracle = _FixedOracle(height=math.nan)

        with pytest.raises(PaginationError) as excinfo:
            paginate([ParagraphBlock("text")], geometry, oracle)

        assert isinstance(excinfo.value, OracleContractError)
        assert "nan" in excinfo.value.message


class TestReportLabOracle:
    """Tests for the reportlab-backed oracle."""

    @pytest.fixture
    def rl_oracle(self):
        return ReportLabOracle(build_styles(line_height=24.0, font_size=16.0))

    def test_measure_height_when_text_grows_then_never_shrinks(self, rl_oracle):
        words = ("lorem ipsum dolor sit amet consectetur adipiscing elit " * 12).split()
        heights = [
            rl_oracle.measure_height([ParagraphBlock(" ".join(words[:count]))], 300.0)
            for count in range(1, len(words) + 1)
        ]

        assert all(later >= earlier for earlier, later in zip(heights, heights[1:]))
        assert heights[-1] > heights[0]

    def test_measure_line_count_when_short_text_then_one_line(self, rl_oracle):
        assert rl_oracle.measure_line_count(ParagraphBlock("Hello"), 600.0, 24.0) == 1

    def test_measure_line_count_when_long_text_then_many_lines(self, rl_oracle):
        text = "word " * 200

        assert rl_oracle.measure_line_count(ParagraphBlock(text), 300.0, 24.0) > 5

    def test_measure_height_when_fixed_height_generic_then_exact(self, rl_oracle):
        assert rl_oracle.measure_height([GenericBlock(height=42.0)], 300.0) == pytest.approx(42.0)

    def test_measure_height_when_empty_list_then_zero(self, rl_oracle):
        assert rl_oracle.measure_height([ListBlock(())], 300.0) == pytest.approx(0.0)

    def test_measure_height_when_stacked_then_includes_spacing(self, rl_oracle):
        first = ParagraphBlock("First paragraph.")
        second = ParagraphBlock("Second paragraph.")

        single = rl_oracle.measure_height([first], 600.0)
        stacked = rl_oracle.measure_height([first, second], 600.0)

        assert stacked == pytest.approx(2 * single + 8.0)

    def test_measure_height_when_markup_characters_then_escaped(self, rl_oracle):
        height = rl_oracle.measure_height([ParagraphBlock("a < b & c > d")], 600.0)

        assert height == pytest.approx(24.0)

    def test_flowable_for_when_ordered_list_then_numbered_list(self, rl_oracle):
        flowable = rl_oracle.flowable_for(ListBlock(("a", "b"), ordered=True, start=5))

        assert isinstance(flowable, ListFlowable)

    def test_flowable_for_when_heading_then_heading_style(self, rl_oracle):
        flowable = rl_oracle.flowable_for(HeadingBlock("Title", level=2))

        assert isinstance(flowable, Paragraph)
        assert flowable.style.name == "h2"

    def test_paginate_when_long_document_then_pages_fit(self):
        geometry = Geometry.from_page()
        oracle = ReportLabOracle()
        blocks = []
        for idx in range(12):
            blocks.append(HeadingBlock(f"Section {idx}", level=2))
            blocks.append(ParagraphBlock("The quick brown fox jumps over the lazy dog. " * 30))
            blocks.append(ListBlock(tuple(f"Point {idx}.{j}" for j in range(6)), ordered=True))

        document = paginate(blocks, geometry, oracle)

        assert document.page_count > 3
        assert not any(page.overflows for page in document)
        assert document.text_content() == "".join(block.text_content for block in blocks)
