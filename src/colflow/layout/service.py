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
import math

from ..core.bounds import FIT_TOLERANCE_PX
from ..core.models import LayoutConfig, LayoutMetrics, LayoutRequest, LayoutResult, Page
from ..core.units import px_to_mm
from ..core.validation import normalize_request
from ..measure import MeasurementCache, TextMeasurer
from .assembler import empty_page
from .flow import flow
from .metrics import resolve_metrics
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

__all__ = [
    "compute_layout",
    "describe_layout",
    "layout_document",
    "lines_per_column",
    "metrics_for_request",
]


def compute_layout(
    config: LayoutConfig,
    metrics: LayoutMetrics,
    measurer: TextMeasurer,
) -> tuple[Page, ...]:
    column_count = max(config.columns, 1)
    if not metrics.column_widths_px:
        return (empty_page(column_count),)
    measure = MeasurementCache(measurer, config.font_family, metrics.font_size_px)
    tokens = tokenize(config.text)
    pages = flow(tokens, metrics, column_count, measure)
    logger.debug(
        "laid out %d tokens into %d page(s) using %d distinct measurements",
        len(tokens),
        len(pages),
        len(measure),
    )
    return pages


def metrics_for_request(request: LayoutRequest) -> LayoutMetrics:
    return resolve_metrics(
        request.columns,
        request.column_mode,
        request.column_widths_mm,
        request.gap_mm,
        request.margins,
        request.font_size,
        request.line_spacing,
    )


def layout_document(
    request: LayoutRequest,
    measurer: TextMeasurer,
    *,
    normalize: bool = True,
) -> LayoutResult:
    """Lay out ``request.text`` from scratch.

    The result depends only on the request and the measurer, so repeated
    calls with the same inputs give equal results.
    """
    if normalize:
        request = normalize_request(request)
    metrics = metrics_for_request(request)
    pages = compute_layout(request.layout_config(), metrics, measurer)
    return LayoutResult(metrics=metrics, pages=pages, columns=max(request.columns, 1))


def lines_per_column(metrics: LayoutMetrics) -> int:
    if metrics.line_height_px <= 0:
        return 0
    usable = metrics.column_height_px + FIT_TOLERANCE_PX
    return max(math.floor(usable / metrics.line_height_px), 0)


def describe_layout(result: LayoutResult) -> list[tuple[str, str]]:
    metrics = result.metrics
    widths = ", ".join(f"{px_to_mm(width):.2f}" for width in metrics.column_widths_px)
    line_count = sum(len(column.lines) for page in result.pages for column in page.columns)
    return [
        ("Pages", str(result.page_count)),
        ("Columns", str(result.columns)),
        ("Column widths (mm)", widths),
        ("Custom scale", f"{metrics.custom_scale:.2f}"),
        ("Font size (px)", f"{metrics.font_size_px:.2f}"),
        ("Line height (px)", f"{metrics.line_height_px:.2f}"),
        ("Lines per column", str(lines_per_column(metrics))),
        ("Lines", str(line_count)),
    ]
