"""Shared constants for page geometry and pagination."""

from __future__ import annotations

import os

MM_TO_PX = 96 / 25.4
DEFAULT_TOLERANCE = 0.5
DEFAULT_MIN_LINES = 2
DEFAULT_LINE_HEIGHT = 24.0
DEFAULT_FONT_NAME = "Helvetica"
DEFAULT_FONT_SIZE = 16.0
DEBUG_PAGINATION = os.getenv("DEBUG_PAGINATION", "0") not in {
    "",
    "0",
    "false",
    "False",
}
