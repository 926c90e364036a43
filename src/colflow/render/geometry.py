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

from dataclasses import dataclass

from ..core.models import LayoutMetrics

# Share of the font size above the baseline, used to place text inside a line box.
ASCENT_RATIO = 0.8


@dataclass(frozen=True)
class ColumnBox:
    left_px: float
    top_px: float
    width_px: float
    height_px: float


def column_box(metrics: LayoutMetrics, index: int) -> ColumnBox:
    widths = metrics.column_widths_px
    offsets = metrics.column_offsets_px
    if not widths:
        raise ValueError("metrics have no columns")
    slot = min(index, len(widths) - 1)
    return ColumnBox(
        left_px=metrics.margins_px.left + offsets[slot],
        top_px=metrics.margins_px.top,
        width_px=widths[slot],
        height_px=metrics.column_height_px,
    )


def line_top_px(metrics: LayoutMetrics, line_index: int) -> float:
    return metrics.margins_px.top + line_index * metrics.line_height_px


def glyph_top_px(metrics: LayoutMetrics, line_index: int) -> float:
    """Top of the glyph box, with the leading split evenly above and below."""
    leading = metrics.line_height_px - metrics.font_size_px
    return line_top_px(metrics, line_index) + leading / 2


def baseline_px(metrics: LayoutMetrics, line_index: int) -> float:
    return glyph_top_px(metrics, line_index) + metrics.font_size_px * ASCENT_RATIO
