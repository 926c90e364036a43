#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

PAGE_WIDTH_MM = 210.0

PAGE_HEIGHT_MM = 297.0

CSS_DPI = 96.0

MM_PER_INCH = 25.4

PT_PER_INCH = 72.0

MIN_COLUMNS = 1

MAX_COLUMNS = 12

MIN_FONT_SIZE_PT = 6.0

MAX_FONT_SIZE_PT = 96.0

MIN_LINE_SPACING = 1.0

MAX_LINE_SPACING = 4.0

MIN_MARGIN_MM = 0.0

MAX_MARGIN_MM = 40.0

MIN_GAP_MM = 0.0

MIN_CUSTOM_WIDTH_MM = 0.5

# Floating-point slack for width and height comparisons, in px.
FIT_TOLERANCE_PX = 0.1

MIN_CONTENT_WIDTH_PX = 1.0

MIN_AVAILABLE_WIDTH_MM = 1.0

MIN_COLUMN_HEIGHT_PX = 16.0

BLANK_LINE = "\u00a0"


__all__ = [
    "BLANK_LINE",
    "CSS_DPI",
    "FIT_TOLERANCE_PX",
    "MAX_COLUMNS",
    "MAX_FONT_SIZE_PT",
    "MAX_LINE_SPACING",
    "MAX_MARGIN_MM",
    "MIN_AVAILABLE_WIDTH_MM",
    "MIN_COLUMNS",
    "MIN_COLUMN_HEIGHT_PX",
    "MIN_CONTENT_WIDTH_PX",
    "MIN_CUSTOM_WIDTH_MM",
    "MIN_FONT_SIZE_PT",
    "MIN_GAP_MM",
    "MIN_LINE_SPACING",
    "MIN_MARGIN_MM",
    "MM_PER_INCH",
    "PAGE_HEIGHT_MM",
    "PAGE_WIDTH_MM",
    "PT_PER_INCH",
]
