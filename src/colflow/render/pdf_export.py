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

from ..core.bounds import BLANK_LINE
from ..core.models import LayoutResult
from ..core.units import px_to_mm, px_to_pt
from ..measure.fpdf_backend import core_font_family, load_font
from .geometry import baseline_px, column_box

DEFAULT_PDF_NAME = "multi-column-layout.pdf"


def build_pdf(
    result: LayoutResult,
    *,
    font_family: str,
    font_path: str | Path | None = None,
    title: str | None = None,
) -> FPDF:
    """Draw every page of ``result`` as text on an A4 portrait PDF."""
    metrics = result.metrics
    pdf = FPDF(orientation="portrait", unit="mm", format="A4")
    pdf.set_auto_page_break(False)
    pdf.set_creator("colflow")
    if title:
        pdf.set_title(title)
    family = load_font(pdf, font_path) or core_font_family(font_family)
    font_size_pt = px_to_pt(metrics.font_size_px)

    for page_number, page in enumerate(result.pages, start=1):
        pdf.add_page()
        pdf.set_font(family, size=font_size_pt)
        for column_index, column in enumerate(page.columns):
            box = column_box(metrics, column_index)
            x_mm = px_to_mm(box.left_px)
            for line_index, line in enumerate(column.lines):
                if line == BLANK_LINE:
                    continue
                y_mm = px_to_mm(baseline_px(metrics, line_index))
                try:
                    pdf.text(x_mm, y_mm, line)
                except FPDFException as exc:
                    raise RuntimeError(
                        f"unable to draw page {page_number}, column {column_index + 1}: {exc}"
                    ) from exc
    return pdf


def render_pdf(
    result: LayoutResult,
    output_path: str | Path,
    *,
    font_family: str,
    font_path: str | Path | None = None,
    title: str | None = None,
) -> Path:
    path = Path(output_path)
    pdf = build_pdf(result, font_family=font_family, font_path=font_path, title=title)
    path.parent.mkdir(parents=True, exist_ok=True)
    pdf.output(str(path))
    return path
