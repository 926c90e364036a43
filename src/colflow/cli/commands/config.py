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

import os
import shlex
import subprocess
from pathlib import Path

import typer

from ...config import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    init_user_config,
    load_app_config,
    resolve_config_path,
    user_config_path,
)
from ..api import build_kv_table, console, format_hint
from ..core.common import _cli_state, _run_cli

_CONFIG_HELP = (
    "Show, check or edit the TOML config that supplies layout defaults.\n\n"
    "Without options the active config opens in $VISUAL / $EDITOR. The packaged\n"
    "defaults are never edited in place; a user copy is created first.\n\n"
    "Examples:\n"
    "  colflow config --print-path\n"
    "  colflow config --check\n"
    "  colflow config --config ./print.toml --editor nano\n"
)

_SYSTEM_OPENERS = frozenset({"default", "system"})


def register(app: typer.Typer) -> None:
    app.command(help=_CONFIG_HELP)(config)


def config(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file to use instead of the active one.",
        rich_help_panel="Config",
    ),
    editor: str | None = typer.Option(
        None,
        "--editor",
        "-e",
        help="Editor command ('default' hands the file to the system opener).",
        rich_help_panel="Behavior",
    ),
    print_path: bool = typer.Option(
        False,
        "--print-path",
        help="Print the resolved config path and exit.",
        rich_help_panel="Behavior",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        help="Parse the config and print the layout defaults it yields.",
        rich_help_panel="Behavior",
    ),
) -> None:
    state = _cli_state(ctx)
    config_value = config or state.config

    def _run() -> None:
        path = resolve_config_path(config_value)
        if print_path:
            console.print(str(path))
            return
        if check:
            console.print(build_kv_table(_describe_config(load_app_config(path)), title=str(path)))
            return
        if path == DEFAULT_CONFIG_PATH:
            init_user_config()
            path = user_config_path()
            if not state.quiet:
                console.print(format_hint(f"Editing a user copy of the defaults at {path}"))
        _edit(path, editor=editor, quiet=state.quiet)

    _run_cli(_run, debug=state.debug)


def _describe_config(app_config: AppConfig) -> list[tuple[str, str]]:
    layout = app_config.layout
    margins = layout.margins
    widths = ", ".join(f"{width:g}" for width in layout.column_widths_mm) or "-"
    return [
        ("Columns", str(layout.columns)),
        ("Column mode", layout.column_mode),
        ("Column widths (mm)", widths),
        ("Gap (mm)", f"{layout.gap_mm:g}"),
        ("Font", f"{layout.font_family} {layout.font_size:g}pt x{layout.line_spacing:g}"),
        (
            "Margins (mm)",
            f"{margins.top:g} {margins.right:g} {margins.bottom:g} {margins.left:g}",
        ),
        ("Measure backend", app_config.measure.backend),
        ("Font file", str(app_config.measure.font_path or "-")),
        ("Pixel ratio", f"{app_config.export.pixel_ratio:g}"),
    ]


def _edit(path: Path, *, editor: str | None, quiet: bool) -> None:
    if not path.is_file():
        raise FileNotFoundError(f"config file not found: {path}")
    command = _editor_command(editor)
    if command is None:
        if not quiet:
            console.print(f"[muted]Opening {path}[/muted]")
        typer.launch(str(path))
        return
    if not quiet:
        console.print(f"[muted]Opening {path} with {command[0]}[/muted]")
    subprocess.run([*command, str(path)], check=False)


def _editor_command(editor: str | None) -> list[str] | None:
    """Split --editor, then $VISUAL, then $EDITOR; None means the system opener."""
    if editor is not None:
        value = editor.strip()
    else:
        value = (os.environ.get("VISUAL") or os.environ.get("EDITOR") or "").strip()
    if not value or value.lower() in _SYSTEM_OPENERS:
        return None
    return shlex.split(value, posix=os.name != "nt")
