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

import typer

from ...config import load_app_config
from ...layout import describe_layout, layout_document
from ...measure import measurer_for
from ...render.json_export import layout_to_json, write_layout_json
from ..api import build_kv_table, build_page_table, console, status
from ..core.common import _apply_ui_defaults, _cli_state, _run_cli
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

_LAYOUT_HELP = (
    "Flow text into A4 pages of columns and summarize the result.\n\n"
    "Examples:\n"
    "  colflow layout notes.txt\n"
    "  colflow layout notes.txt --columns 3 --font-size 10 --preview\n"
    "  colflow layout notes.txt --column-widths 60,30,30 --json layout.json\n"
    "  cat notes.txt | colflow layout - --json -\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_LAYOUT_HELP)(layout)


def layout(
    ctx: typer.Context,
    input: str = input_argument(),
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
    measure: str | None = measure_option(),
    font_file: Path | None = font_file_option(),
    json_output: str | None = typer.Option(
        None,
        "--json",
        help="Write the computed pages as JSON to this path ('-' prints to stdout).",
        rich_help_panel="Outputs",
    ),
    preview: bool = typer.Option(
        False,
        "--preview",
        help="Print every page's columns as text.",
        rich_help_panel="Outputs",
    ),
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
        measurer = measurer_for(
            options.measure or app_config.measure.backend,
            options.font_path(app_config),
        )
        with status("Laying out text...", quiet=quiet_value or json_output == "-"):
            result = layout_document(request, measurer)

        if json_output == "-":
            typer.echo(layout_to_json(result))
            return
        if json_output:
            path = write_layout_json(result, Path(json_output))
            if not quiet_value:
                console.print(f"[dim]- wrote {path}[/dim]")
        if quiet_value:
            return
        console.print(build_kv_table(describe_layout(result), title="Layout"))
        if preview:
            for page_number, page in enumerate(result.pages, start=1):
                console.print(build_page_table(page, page_number=page_number))

    _run_cli(_run, debug=state.debug)
