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
from typing import Protocol, runtime_checkable


class MeasurementUnavailable(RuntimeError):
    """Raised when a backend cannot produce a usable width for some text."""


@runtime_checkable
class TextMeasurer(Protocol):
    def measure(self, text: str, font_family: str, font_size_px: float) -> float: ...


class FixedAdvanceMeasurer:
    """Monospace metric: every character advances ``advance_em`` of the font size."""

    def __init__(self, advance_em: float = 0.6) -> None:
        if not math.isfinite(advance_em) or advance_em < 0:
            raise ValueError("advance_em must be a non-negative number")
        self.advance_em = float(advance_em)

    def measure(self, text: str, font_family: str, font_size_px: float) -> float:
        _ = font_family
        return len(text) * self.advance_em * font_size_px


class MeasurementCache:
    """Width lookups for a single layout pass.

    Binds one font family and size, memoizes every measured string and
    rejects widths that are negative or not finite.
    """

    def __init__(self, measurer: TextMeasurer, font_family: str, font_size_px: float) -> None:
        self._measurer = measurer
        self.font_family = font_family
        self.font_size_px = font_size_px
        self._widths: dict[str, float] = {}

    def width(self, text: str) -> float:
        cached = self._widths.get(text)
        if cached is not None:
            return cached
        value = self._measurer.measure(text, self.font_family, self.font_size_px)
        try:
            width = float(value)
        except (TypeError, ValueError) as exc:
            raise MeasurementUnavailable(f"measurement for {text!r} is not a number") from exc
        if not math.isfinite(width) or width < 0:
            raise MeasurementUnavailable(
                f"measurement for {text!r} returned unusable width {width!r} "
                f"({self.font_family}, {self.font_size_px:g}px)"
            )
        self._widths[text] = width
        return width

    def __len__(self) -> int:
        return len(self._widths)
