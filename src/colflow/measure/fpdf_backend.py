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

from pathlib import Path

from fpdf import FPDF
from fpdf.errors import FPDFException

from ..core.units import pt_to_px, px_to_pt
from .base import MeasurementUnavailable

CUSTOM_FONT_FAMILY = "colflow-custom"

_SERIF_FAMILIES = frozenset(
    {"times", "times new roman", "georgia", "garamond", "lora", "noto serif"}
)
_MONO_FAMILIES = frozenset({"courier", "courier new", "monospace"})


def core_font_family(font_family: str) -> str:
    """Map a requested family onto one of the PDF core fonts."""
    name = font_family.strip().strip("'\"").lower()
    if name in _SERIF_FAMILIES or (name.endswith(" serif") and "sans" not in name):
        return "times"
    if name in _MONO_FAMILIES or "mono" in name:
        return "courier"
    return "helvetica"


def load_font(pdf: FPDF, font_path: str | Path | None) -> str | None:
    """Register a TTF/OTF with ``pdf`` and return its family, if one is given."""
    if font_path is None:
        return None
    path = Path(font_path).expanduser()
    if not path.is_file():
        raise MeasurementUnavailable(f"font file not found: {path}")
    try:
        pdf.add_font(CUSTOM_FONT_FAMILY, fname=str(path))
    except (OSError, FPDFException) as exc:
        raise MeasurementUnavailable(f"unable to load font {path}: {exc}") from exc
    return CUSTOM_FONT_FAMILY


class FpdfMeasurer:
    """Widths from fpdf2 font metrics.

    Without a font file only the Latin-1 core fonts are available; text they
    cannot encode raises :class:`MeasurementUnavailable`.
    """

    def __init__(self, font_path: str | Path | None = None) -> None:
        self._pdf = FPDF(unit="pt")
        self._custom_family = load_font(self._pdf, font_path)

    def resolve_family(self, font_family: str) -> str:
        if self._custom_family is not None:
            return self._custom_family
        return core_font_family(font_family)

    def measure(self, text: str, font_family: str, font_size_px: float) -> float:
        family = self.resolve_family(font_family)
        try:
            self._pdf.set_font(family, size=px_to_pt(font_size_px))
            width_pt = self._pdf.get_string_width(text)
        except FPDFException as exc:
            raise MeasurementUnavailable(f"cannot measure {text!r} with {family}: {exc}") from exc
        return pt_to_px(width_pt)
