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

"""Multi-column A4 text layout: tokenizing, greedy wrapping and pagination."""

from __future__ import annotations

from .core.models import (
    Column,
    ColumnMode,
    LayoutConfig,
    LayoutMetrics,
    LayoutRequest,
    LayoutResult,
    Margins,
    MarginsPx,
    Page,
    Token,
    TokenKind,
)
from .layout import compute_layout, flow, layout_document, resolve_metrics, tokenize
from .measure import (
    FixedAdvanceMeasurer,
    MeasurementCache,
    MeasurementUnavailable,
    TextMeasurer,
    measurer_for,
)

__all__ = [
    "Column",
    "ColumnMode",
    "FixedAdvanceMeasurer",
    "LayoutConfig",
    "LayoutMetrics",
    "LayoutRequest",
    "LayoutResult",
    "Margins",
    "MarginsPx",
    "MeasurementCache",
    "MeasurementUnavailable",
    "Page",
    "TextMeasurer",
    "Token",
    "TokenKind",
    "compute_layout",
    "flow",
    "layout_document",
    "measurer_for",
    "resolve_metrics",
    "tokenize",
]
