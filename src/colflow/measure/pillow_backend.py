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
from typing import Union

from PIL import ImageFont

from .base import MeasurementUnavailable

PillowFont = Union[ImageFont.ImageFont, ImageFont.FreeTypeFont]


class PillowMeasurer:
    """Widths from Pillow's FreeType rendering.

    The family name is informational only: glyphs come from ``font_path`` or
    Pillow's bundled default font.
    """

    def __init__(self, font_path: str | Path | None = None) -> None:
        self._font_path = Path(font_path).expanduser() if font_path is not None else None
        if self._font_path is not None and not self._font_path.is_file():
            raise MeasurementUnavailable(f"font file not found: {self._font_path}")
        self._fonts: dict[float, PillowFont] = {}

    def font(self, font_size_px: float) -> PillowFont:
        cached = self._fonts.get(font_size_px)
        if cached is not None:
            return cached
        try:
            if self._font_path is not None:
                font: PillowFont = ImageFont.truetype(str(self._font_path), size=font_size_px)
            else:
                font = ImageFont.load_default(size=font_size_px)
        except OSError as exc:
            raise MeasurementUnavailable(f"unable to load font: {exc}") from exc
        self._fonts[font_size_px] = font
        return font

    def measure(self, text: str, font_family: str, font_size_px: float) -> float:
        _ = font_family
        return float(self.font(font_size_px).getlength(text))
