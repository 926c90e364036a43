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
from typing import Literal

import typer

from ...config import load_app_config
from ...layout import layout_document
from ...measure import measurer_for
from ...render.pdf_export import DEFAULT_PDF_NAME, render_pdf
from ...render.png_export import DEFAULT_ZIP_NAME, write_png_pages, write_png_zip
from ..api import console, status
from ..core.common import _apply_ui_defaults, _cli_state, _run_cli
from ..core.log import _warn
from ..core.options import (
    LayoutOptions,
    column_widths_option,
    columns_option,
    equal_option,
    font_file_option,
    font_option,
    font_size_option,
    gap_option,
    input_argument,
    line_spacing_option,
    margin_option,
    margin_side_option,
    measure_option,
    read_input_text,
)

ExportFormat = Literal["pdf", "png", "zip"]

_EXPORT_HELP = (
    "Lay out text and export the pages (PDF, PNG files or a ZIP of PNGs).\n\n"
    "Examples:\n"
    "  colflow export notes.txt -o notes.pdf\n"
    "  colflow export notes.txt --format png -o pages/\n"
    "  colflow export notes.txt --format zip --font-file NotoSans-Regular.ttf\n"
)

# Each renderer measures with the same font engine that draws the glyphs.
_NATIVE_BACKENDS: dict[str, str] = {"pdf": "fpdf", "png": "pillow", "zip": "pillow"}


def register(app: typer.Typer) -> None:
    app.command(help=_EXPORT_HELP)(export)


def default_output_path(format: ExportFormat) -> Path:
    if format == "pdf":
        return Path.cwd() / DEFAULT_PDF_NAME
    if format == "zip":
        return Path.cwd() / DEFAULT_ZIP_NAME
    return Path.cwd() / "pages"


def export(
    ctx: typer.Context,
    input: str = input_argument(),
    format: ExportFormat = typer.Option(
        "pdf",
        "--format",
        "-f",
        help="Output format.",
        rich_help_panel="Outputs",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (pdf/zip) or directory (png). Defaults to the current directory.",
        rich_help_panel="Outputs",
    ),
    pixel_ratio: float | None = typer.Option(
        None,
        "--pixel-ratio",
        help="Raster scale for PNG output (1 = 96 dpi).",
        rich_help_panel="Outputs",
    ),
    columns: int | None = columns_option(),
    font: str | None = font_option(),
    font_size: float | None = font_size_option(),
    line_spacing: float | None = line_spacing_option(),
    gap: float | None = gap_option(),
    column_widths: str | None = column_widths_option(),
    equal: bool = equal_option(),
    margin: float | None = margin_option(),
    margin_top: float | None = margin_side_option("top"),
    margin_right: float | None = margin_side_option("right"),
    margin_bottom: float | None = margin_side_option("bottom"),
    margin_left: float | None = margin_side_option("left"),
    measure: str | None = measure_option(
        "Width backend (defaults to the renderer's own: fpdf for pdf, pillow for png/zip)."
    ),
    font_file: Path | None = font_file_option(),
) -> None:
    state = _cli_state(ctx)
    options = LayoutOptions(
        columns=columns,
        font=font,
        font_size=font_size,
        line_spacing=line_spacing,
        gap=gap,
        column_widths=column_widths,
        equal=equal,
        margin=margin,
        margin_top=margin_top,
        margin_right=margin_right,
        margin_bottom=margin_bottom,
        margin_left=margin_left,
        measure=measure,
        font_file=font_file,
    )

    def _run() -> None:
        app_config = load_app_config(state.config)
        quiet_value = _apply_ui_defaults(state, app_config)
        request = options.request(app_config, read_input_text(input))
        font_path = options.font_path(app_config)
        native = _NATIVE_BACKENDS[format]
        backend = options.measure or native
        if backend != native:
            _warn(
                f"measuring with {backend} but drawing with {native}; lines may not fit exactly",
                quiet=quiet_value,
            )
        ratio = pixel_ratio if pixel_ratio is not None else app_config.export.pixel_ratio
        if ratio <= 0:
            raise ValueError("--pixel-ratio must be positive")
        output_path = output or default_output_path(format)

        with status(f"Exporting {format.upper()}...", quiet=quiet_value):
            result = layout_document(request, measurer_for(backend, font_path))
            if format == "pdf":
                written = [
                    render_pdf(
                        result,
                        output_path,
                        font_family=request.font_family,
                        font_path=font_path,
                    )
                ]
            elif format == "zip":
                written = [
                    write_png_zip(result, output_path, font_path=font_path, pixel_ratio=ratio)
                ]
            else:
                written = write_png_pages(
                    result,
                    output_path,
                    font_path=font_path,
                    pixel_ratio=ratio,
                )
        if quiet_value:
            return
        pages_label = "page" if result.page_count == 1 else "pages"
        console.print(f"[success]Exported {result.page_count} {pages_label}[/success]")
        for path in written:
            console.print(f"[dim]- wrote {path}[/dim]")

    _run_cli(_run, debug=state.debug)
