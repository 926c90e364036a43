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

import logging
from collections.abc import Sequence

from ..core.bounds import (
    MIN_AVAILABLE_WIDTH_MM,
    MIN_COLUMN_HEIGHT_PX,
    MIN_CONTENT_WIDTH_PX,
    PAGE_HEIGHT_MM,
    PAGE_WIDTH_MM,
)
from ..core.models import ColumnMode, LayoutMetrics, Margins, MarginsPx
from ..core.units import mm_to_px, pt_to_px

logger = logging.getLogger(__name__)

__all__ = ["column_offsets", "resolve_metrics"]


def column_offsets(widths_px: Sequence[float], gap_px: float) -> tuple[float, ...]:
    offsets: list[float] = []
    offset = 0.0
    last = len(widths_px) - 1
    for index, width in enumerate(widths_px):
        offsets.append(offset)
        offset += width + (gap_px if index < last else 0.0)
    return tuple(offsets)


def _custom_widths(
    requested_mm: Sequence[float],
    column_count: int,
    available_mm: float,
    available_px: float,
) -> tuple[tuple[float, ...], float]:
    requested = [max(float(value), 0.0) for value in requested_mm[:column_count]]
    requested.extend([0.0] * (column_count - len(requested)))
    total = sum(requested)
    if total <= 0:
        width = available_px / column_count
        return tuple(width for _ in range(column_count)), 1.0
    scale = available_mm / total
    return tuple(mm_to_px(value * scale) for value in requested), scale


def resolve_metrics(
    columns: int,
    mode: ColumnMode,
    custom_widths_mm: Sequence[float],
    gap_mm: float,
    margins: Margins,
    font_size_pt: float,
    line_spacing: float,
) -> LayoutMetrics:
    """Turn page, margin, column and font settings into pixel geometry.

    The page is fixed A4 portrait at 96 px per inch. Degenerate geometry is
    floored silently: the content width to 1px, the width left for columns
    after gaps to 1px and the column height to 16px. In custom mode the
    requested widths keep their ratios and are scaled to fill the available
    width exactly; the applied factor is reported as ``custom_scale``.
    """
    page_width_px = mm_to_px(PAGE_WIDTH_MM)
    page_height_px = mm_to_px(PAGE_HEIGHT_MM)
    margins_px = MarginsPx(
        top=mm_to_px(margins.top),
        right=mm_to_px(margins.right),
        bottom=mm_to_px(margins.bottom),
        left=mm_to_px(margins.left),
    )

    gap_count = max(columns - 1, 0)
    content_width_px = max(page_width_px - margins_px.left - margins_px.right, MIN_CONTENT_WIDTH_PX)
    gap_px = mm_to_px(gap_mm)
    available_px = max(content_width_px - gap_px * gap_count, MIN_CONTENT_WIDTH_PX)
    available_mm = max(
        PAGE_WIDTH_MM - margins.left - margins.right - gap_mm * gap_count,
        MIN_AVAILABLE_WIDTH_MM,
    )

    column_count = max(columns, 1)
    scale = 1.0
    if mode == "custom":
        widths, scale = _custom_widths(custom_widths_mm, column_count, available_mm, available_px)
    else:
        width = available_px / column_count
        widths = tuple(width for _ in range(column_count))

    column_height_px = max(
        page_height_px - margins_px.top - margins_px.bottom,
        MIN_COLUMN_HEIGHT_PX,
    )
    font_size_px = pt_to_px(font_size_pt)
    line_height_px = font_size_px * line_spacing

    logger.debug(
        "resolved %d %s columns (scale %.4f), column height %.2fpx, line height %.2fpx",
        column_count,
        mode,
        scale,
        column_height_px,
        line_height_px,
    )
    return LayoutMetrics(
        page_width_px=page_width_px,
        page_height_px=page_height_px,
        margins_px=margins_px,
        column_widths_px=widths,
        column_offsets_px=column_offsets(widths, gap_px),
        column_height_px=column_height_px,
        gap_px=gap_px,
        font_size_px=font_size_px,
        line_height_px=line_height_px,
        custom_scale=scale,
    )
