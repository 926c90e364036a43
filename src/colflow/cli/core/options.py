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

import sys
from dataclasses import dataclass
from pathlib import Path

import typer

from ...config import AppConfig, build_layout_request
from ...core.models import LayoutRequest, Margins
from .common import _parse_widths, _widths_callback

_LAYOUT_PANEL = "Layout"
_MARGINS_PANEL = "Margins"
_MEASURE_PANEL = "Measurement"


def input_argument():
    return typer.Argument(..., help="Text file to lay out ('-' reads stdin).")


def columns_option():
    return typer.Option(
        None, "--columns", "-n", help="Number of columns (1-12).", rich_help_panel=_LAYOUT_PANEL
    )


def font_option():
    return typer.Option(None, "--font", help="Font family name.", rich_help_panel=_LAYOUT_PANEL)


def font_size_option():
    return typer.Option(
        None, "--font-size", help="Font size in points (6-96).", rich_help_panel=_LAYOUT_PANEL
    )


def line_spacing_option():
    return typer.Option(
        None,
        "--line-spacing",
        help="Line height as a multiple of the font size (1-4).",
        rich_help_panel=_LAYOUT_PANEL,
    )


def gap_option():
    return typer.Option(
        None, "--gap", help="Gap between columns in mm.", rich_help_panel=_LAYOUT_PANEL
    )


def column_widths_option():
    return typer.Option(
        None,
        "--column-widths",
        help="Comma-separated custom column widths in mm (scaled to fit; implies custom mode).",
        callback=_widths_callback,
        rich_help_panel=_LAYOUT_PANEL,
    )


def equal_option():
    return typer.Option(
        False,
        "--equal",
        help="Force equal column widths even if the config defines custom widths.",
        rich_help_panel=_LAYOUT_PANEL,
    )


def margin_option():
    return typer.Option(
        None, "--margin", help="Set all four margins in mm (0-40).", rich_help_panel=_MARGINS_PANEL
    )


def margin_side_option(side: str):
    return typer.Option(
        None,
        f"--margin-{side}",
        help=f"{side.capitalize()} margin in mm.",
        rich_help_panel=_MARGINS_PANEL,
    )


def measure_option(help_text: str = "Width backend: fixed, fpdf or pillow."):
    return typer.Option(None, "--measure", help=help_text, rich_help_panel=_MEASURE_PANEL)


def font_file_option():
    return typer.Option(
        None,
        "--font-file",
        help="TTF/OTF font used for measuring and drawing (needed for non-Latin text).",
        rich_help_panel=_MEASURE_PANEL,
    )


@dataclass(frozen=True)
class LayoutOptions:
    columns: int | None = None
    font: str | None = None
    font_size: float | None = None
    line_spacing: float | None = None
    gap: float | None = None
    column_widths: str | None = None
    equal: bool = False
    margin: float | None = None
    margin_top: float | None = None
    margin_right: float | None = None
    margin_bottom: float | None = None
    margin_left: float | None = None
    measure: str | None = None
    font_file: Path | None = None

    def margins(self, defaults: Margins) -> Margins:
        base = Margins.uniform(self.margin) if self.margin is not None else defaults
        return Margins(
            top=base.top if self.margin_top is None else self.margin_top,
            right=base.right if self.margin_right is None else self.margin_right,
            bottom=base.bottom if self.margin_bottom is None else self.margin_bottom,
            left=base.left if self.margin_left is None else self.margin_left,
        )

    def request(self, config: AppConfig, text: str) -> LayoutRequest:
        if self.equal and self.column_widths is not None:
            raise ValueError("use either --equal or --column-widths, not both")
        widths = _parse_widths(self.column_widths) if self.column_widths is not None else None
        return build_layout_request(
            config.layout,
            text,
            columns=self.columns,
            font_family=self.font,
            font_size=self.font_size,
            line_spacing=self.line_spacing,
            gap_mm=self.gap,
            margins=self.margins(config.layout.margins),
            column_widths_mm=widths,
            column_mode="equal" if self.equal else None,
        )

    def font_path(self, config: AppConfig) -> Path | None:
        if self.font_file is not None:
            return self.font_file
        return config.measure.font_path


def read_input_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"input file not found: {path}")
    return path.read_text(encoding="utf-8")
