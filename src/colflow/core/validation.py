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

import math
from collections.abc import Sequence
from dataclasses import replace

from .bounds import (
    MAX_COLUMNS,
    MAX_FONT_SIZE_PT,
    MAX_LINE_SPACING,
    MAX_MARGIN_MM,
    MIN_AVAILABLE_WIDTH_MM,
    MIN_COLUMNS,
    MIN_CUSTOM_WIDTH_MM,
    MIN_FONT_SIZE_PT,
    MIN_GAP_MM,
    MIN_LINE_SPACING,
    MIN_MARGIN_MM,
    PAGE_WIDTH_MM,
)
from .models import LayoutRequest, Margins


def clamp_float(value: float, *, min_val: float, max_val: float | None = None) -> float:
    """Clamp value into [min_val, max_val]; no error is raised."""
    result = max(float(value), min_val)
    if max_val is not None:
        result = min(result, max_val)
    return result


def clamp_int(value: int, *, min_val: int, max_val: int) -> int:
    return min(max(int(value), min_val), max_val)


def _finite_or(value: float, fallback: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(number):
        return fallback
    return number


def normalize_margins(margins: Margins) -> Margins:
    defaults = Margins()

    def _side(value: float, default: float) -> float:
        return clamp_float(
            _finite_or(value, default),
            min_val=MIN_MARGIN_MM,
            max_val=MAX_MARGIN_MM,
        )

    return Margins(
        top=_side(margins.top, defaults.top),
        right=_side(margins.right, defaults.right),
        bottom=_side(margins.bottom, defaults.bottom),
        left=_side(margins.left, defaults.left),
    )


def normalize_request(request: LayoutRequest) -> LayoutRequest:
    """Apply the input limits a caller enforces before the layout core runs.

    Out-of-range numbers are clamped to the nearest valid value. NaN and infinite
    inputs fall back to the defaults of :class:`LayoutRequest`. Custom widths are
    resized to the column count and floored at the minimum custom width.
    """
    defaults = LayoutRequest()
    columns_value = _finite_or(request.columns, defaults.columns)
    columns = clamp_int(int(columns_value), min_val=MIN_COLUMNS, max_val=MAX_COLUMNS)
    margins = normalize_margins(request.margins)
    gap_mm = clamp_float(_finite_or(request.gap_mm, defaults.gap_mm), min_val=MIN_GAP_MM)
    font_size = clamp_float(
        _finite_or(request.font_size, defaults.font_size),
        min_val=MIN_FONT_SIZE_PT,
        max_val=MAX_FONT_SIZE_PT,
    )
    line_spacing = clamp_float(
        _finite_or(request.line_spacing, defaults.line_spacing),
        min_val=MIN_LINE_SPACING,
        max_val=MAX_LINE_SPACING,
    )
    column_mode = request.column_mode if request.column_mode in ("equal", "custom") else "equal"
    available_mm = available_width_mm(columns, gap_mm, margins)
    widths = sync_column_widths(request.column_widths_mm, columns, available_mm)
    widths = tuple(
        clamp_float(_finite_or(width, MIN_CUSTOM_WIDTH_MM), min_val=MIN_CUSTOM_WIDTH_MM)
        for width in widths
    )
    return replace(
        request,
        text=request.text or "",
        columns=columns,
        font_size=font_size,
        line_spacing=line_spacing,
        margins=margins,
        gap_mm=gap_mm,
        column_mode=column_mode,
        column_widths_mm=widths,
    )


def available_width_mm(columns: int, gap_mm: float, margins: Margins) -> float:
    total_gap = gap_mm * max(columns - 1, 0)
    return max(PAGE_WIDTH_MM - margins.left - margins.right - total_gap, MIN_AVAILABLE_WIDTH_MM)


def sync_column_widths(
    widths_mm: Sequence[float],
    columns: int,
    available_mm: float,
) -> tuple[float, ...]:
    """Resize a custom width list to exactly ``columns`` entries.

    Missing entries get an equal share of the available width, rounded to
    two decimals; surplus entries are dropped.
    """
    result = list(widths_mm[:columns])
    if len(result) < columns:
        fallback = round(max(available_mm / max(columns, 1), 1.0), 2)
        result.extend([fallback] * (columns - len(result)))
    return tuple(float(width) for width in result)


def default_column_widths(columns: int, gap_mm: float, margins: Margins) -> tuple[float, ...]:
    per_column = available_width_mm(columns, gap_mm, margins) / max(columns, 1)
    return tuple(round(per_column, 2) for _ in range(columns))


__all__ = [
    "available_width_mm",
    "clamp_float",
    "clamp_int",
    "default_column_widths",
    "normalize_margins",
    "normalize_request",
    "sync_column_widths",
]
