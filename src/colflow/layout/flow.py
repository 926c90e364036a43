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
from collections.abc import Iterable

from ..core.bounds import BLANK_LINE, FIT_TOLERANCE_PX
from ..core.models import Column, LayoutMetrics, Page, Token, TokenKind
from ..measure import MeasurementCache
from .assembler import assemble_pages, empty_page

logger = logging.getLogger(__name__)

__all__ = ["FlowBuilder", "flow"]


class FlowBuilder:
    """Cursor state for one layout pass.

    Owns the page being filled, the lines of the current column, the pending
    line buffer and the vertical cursor. A builder is used for exactly one
    pass and never shared.
    """

    def __init__(
        self,
        metrics: LayoutMetrics,
        column_count: int,
        measure: MeasurementCache,
    ) -> None:
        if not metrics.column_widths_px:
            raise ValueError("metrics must provide at least one column width")
        self._widths = metrics.column_widths_px
        self._column_height = metrics.column_height_px
        self._line_height = metrics.line_height_px
        self._column_count = max(column_count, 1)
        self._measure = measure

        self._pages: list[Page] = []
        self._page_columns: list[Column] = []
        self._column_lines: list[str] = []
        self._cursor_y = 0.0
        self._line = ""
        self._line_width = 0.0

    def column_width(self) -> float:
        index = len(self._page_columns)
        if index < len(self._widths):
            return self._widths[index]
        return self._widths[-1]

    def feed(self, token: Token) -> None:
        if token.kind is TokenKind.NEWLINE:
            self._commit_line(self._line)
        elif token.kind is TokenKind.SPACE:
            self._feed_space(token.value)
        else:
            self._feed_word(token.value)

    def finish(self) -> tuple[Page, ...]:
        if self._line:
            self._commit_line(self._line)
        if self._column_lines or self._page_columns:
            self._page_columns.append(Column(lines=tuple(self._column_lines)))
            self._column_lines = []
            self._pages.append(Page(columns=tuple(self._page_columns)))
            self._page_columns = []
        return assemble_pages(self._pages, self._column_count)

    def _fits(self, width: float, column_width: float) -> bool:
        return width <= column_width + FIT_TOLERANCE_PX

    def _feed_space(self, value: str) -> None:
        if not self._line:
            return
        width = self._measure.width(value)
        if self._fits(self._line_width + width, self.column_width()):
            self._line += value
            self._line_width += width
        else:
            self._commit_line(self._line)

    def _feed_word(self, word: str) -> None:
        width = self._measure.width(word)
        if self._line and not self._fits(self._line_width + width, self.column_width()):
            self._commit_line(self._line)
        if not self._line:
            # settle the column first so the width check uses the one the word lands in
            self._ensure_room()
        if self._fits(width, self.column_width()):
            self._line += word
            self._line_width += width
            return
        self._split_word(word)

    def _ensure_room(self) -> None:
        if self._cursor_y + self._line_height <= self._column_height + FIT_TOLERANCE_PX:
            return
        if not self._column_lines:
            # a line taller than the whole column still goes into an empty one
            return
        self._finish_column()

    def _finish_column(self) -> None:
        self._page_columns.append(Column(lines=tuple(self._column_lines)))
        self._column_lines = []
        self._cursor_y = 0.0
        if len(self._page_columns) == self._column_count:
            self._pages.append(Page(columns=tuple(self._page_columns)))
            self._page_columns = []
            logger.debug("page %d complete", len(self._pages))

    def _commit_line(self, raw_line: str) -> None:
        trimmed = raw_line.rstrip()
        self._ensure_room()
        self._column_lines.append(trimmed or BLANK_LINE)
        self._cursor_y += self._line_height
        self._line = ""
        self._line_width = 0.0

    def _longest_fitting_prefix(self, text: str, column_width: float) -> int:
        low, high, best = 1, len(text), 0
        while low <= high:
            mid = (low + high) // 2
            if self._fits(self._measure.width(text[:mid]), column_width):
                best = mid
                low = mid + 1
            else:
                high = mid - 1
        return max(best, 1)

    def _split_word(self, word: str) -> None:
        remaining = word
        pieces = 0
        while remaining:
            self._ensure_room()
            column_width = self.column_width()
            size = self._longest_fitting_prefix(remaining, column_width)
            segment = remaining[:size]
            pieces += 1
            if size == len(remaining):
                self._line = segment
                self._line_width = self._measure.width(segment)
                remaining = ""
            else:
                self._commit_line(segment)
                remaining = remaining[size:]
        logger.debug("split %d-character word into %d pieces", len(word), pieces)


def flow(
    tokens: Iterable[Token],
    metrics: LayoutMetrics,
    column_count: int,
    measure: MeasurementCache,
) -> tuple[Page, ...]:
    """Greedily wrap tokens into lines, lines into columns, columns into pages.

    Every page carries exactly ``column_count`` columns and at least one page
    is always returned.
    """
    if not metrics.column_widths_px:
        return (empty_page(column_count),)
    builder = FlowBuilder(metrics, column_count, measure)
    for token in tokens:
        builder.feed(token)
    return builder.finish()
