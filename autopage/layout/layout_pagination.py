"""Public pagination helpers."""

from __future__ import annotations

from .layout_oracle import LayoutOracle, MeasurementCache, ReportLabOracle
from .layout_pagination_flow import PageFlow, number_pages, paginate
from .layout_settings import Geometry, build_styles
from .layout_types import SplitResult

__all__ = [
    "Geometry",
    "LayoutOracle",
    "MeasurementCache",
    "PageFlow",
    "ReportLabOracle",
    "SplitResult",
    "build_styles",
    "number_pages",
    "paginate",
]
