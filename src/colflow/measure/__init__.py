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

"""Text measurement backends."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from .base import (
    FixedAdvanceMeasurer,
    MeasurementCache,
    MeasurementUnavailable,
    TextMeasurer,
)

MeasureBackend = Literal["fixed", "fpdf", "pillow"]
MEASURE_BACKENDS: tuple[str, ...] = ("fixed", "fpdf", "pillow")


def measurer_for(kind: str, font_path: str | Path | None = None) -> TextMeasurer:
    normalized = kind.strip().lower()
    if normalized == "fixed":
        return FixedAdvanceMeasurer()
    if normalized == "fpdf":
        from .fpdf_backend import FpdfMeasurer

        return FpdfMeasurer(font_path)
    if normalized == "pillow":
        from .pillow_backend import PillowMeasurer

        return PillowMeasurer(font_path)
    expected = ", ".join(MEASURE_BACKENDS)
    raise ValueError(f"unknown measure backend: {kind} (expected one of {expected})")


__all__ = [
    "FixedAdvanceMeasurer",
    "MEASURE_BACKENDS",
    "MeasureBackend",
    "MeasurementCache",
    "MeasurementUnavailable",
    "TextMeasurer",
    "measurer_for",
]
