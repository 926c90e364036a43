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

import io
import zipfile
from pathlib import Path

from PIL import Image, ImageColor, ImageDraw

from ..core.bounds import BLANK_LINE
from ..core.models import LayoutResult
from ..measure.pillow_backend import PillowMeasurer
from .geometry import column_box, glyph_top_px

DEFAULT_ZIP_NAME = "multi-column-layout-pages.zip"
DEFAULT_PIXEL_RATIO = 2.0


def page_image_name(page_index: int) -> str:
    return f"page-{page_index + 1}.png"


def _color_to_rgb(value: str, fallback: tuple[int, int, int]) -> tuple[int, int, int]:
    normalized = value.strip()
    if not normalized:
        return fallback
    try:
        rgb = ImageColor.getrgb(normalized)
    except ValueError as exc:
        raise ValueError(f"invalid color: {value}") from exc
    return (int(rgb[0]), int(rgb[1]), int(rgb[2]))


def render_page_image(
    result: LayoutResult,
    page_index: int,
    *,
    measurer: PillowMeasurer | None = None,
    font_path: str | Path | None = None,
    pixel_ratio: float = DEFAULT_PIXEL_RATIO,
    background: str = "#ffffff",
    color: str = "#000000",
) -> Image.Image:
    if pixel_ratio <= 0:
        raise ValueError("pixel_ratio must be positive")
    if not 0 <= page_index < len(result.pages):
        raise IndexError(f"page index out of range: {page_index}")
    metrics = result.metrics
    fonts = measurer or PillowMeasurer(font_path)
    font = fonts.font(metrics.font_size_px * pixel_ratio)
    size = (
        max(1, round(metrics.page_width_px * pixel_ratio)),
        max(1, round(metrics.page_height_px * pixel_ratio)),
    )
    image = Image.new("RGB", size, _color_to_rgb(background, (255, 255, 255)))
    draw = ImageDraw.Draw(image)
    fill = _color_to_rgb(color, (0, 0, 0))

    page = result.pages[page_index]
    for column_index, column in enumerate(page.columns):
        box = column_box(metrics, column_index)
        for line_index, line in enumerate(column.lines):
            if line == BLANK_LINE:
                continue
            x = box.left_px * pixel_ratio
            y = glyph_top_px(metrics, line_index) * pixel_ratio
            draw.text((x, y), line, font=font, fill=fill)
    return image


def page_png_bytes(
    result: LayoutResult,
    page_index: int,
    *,
    measurer: PillowMeasurer | None = None,
    font_path: str | Path | None = None,
    pixel_ratio: float = DEFAULT_PIXEL_RATIO,
) -> bytes:
    image = render_page_image(
        result,
        page_index,
        measurer=measurer,
        font_path=font_path,
        pixel_ratio=pixel_ratio,
    )
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def write_png_pages(
    result: LayoutResult,
    output_dir: str | Path,
    *,
    font_path: str | Path | None = None,
    pixel_ratio: float = DEFAULT_PIXEL_RATIO,
) -> list[Path]:
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    measurer = PillowMeasurer(font_path)
    written: list[Path] = []
    for index in range(len(result.pages)):
        path = directory / page_image_name(index)
        path.write_bytes(page_png_bytes(result, index, measurer=measurer, pixel_ratio=pixel_ratio))
        written.append(path)
    return written


def write_png_zip(
    result: LayoutResult,
    zip_path: str | Path,
    *,
    font_path: str | Path | None = None,
    pixel_ratio: float = DEFAULT_PIXEL_RATIO,
) -> Path:
    path = Path(zip_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    measurer = PillowMeasurer(font_path)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as bundle:
        for index in range(len(result.pages)):
            data = page_png_bytes(result, index, measurer=measurer, pixel_ratio=pixel_ratio)
            bundle.writestr(page_image_name(index), data)
    return path
