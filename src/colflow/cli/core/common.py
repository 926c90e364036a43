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

import importlib.metadata
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import typer
from rich.markup import escape
from rich.traceback import install as install_rich_traceback

from ...config import AppConfig
from ..api import configure_ui, console_err


@dataclass(frozen=True)
class CliState:
    """Global flags shared by every command."""

    config: str | None = None
    debug: bool = False
    quiet: bool = False
    no_color: bool = False


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[error]Error:[/error] {escape(str(exc))}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _cli_state(ctx: typer.Context) -> CliState:
    state = ctx.find_object(CliState)
    return state if state is not None else CliState()


def _apply_ui_defaults(state: CliState, app_config: AppConfig) -> bool:
    """Fold the config file's [ui] table into the flags and return the quiet setting."""
    if app_config.ui.no_color and not state.no_color:
        configure_ui(no_color=True)
    return state.quiet or app_config.ui.quiet


def _parse_widths(value: str) -> tuple[float, ...]:
    widths: list[float] = []
    for index, raw in enumerate(value.split(","), start=1):
        text = raw.strip()
        if not text:
            raise ValueError(f"column width {index} is empty")
        try:
            width = float(text)
        except ValueError as exc:
            raise ValueError(f"column width {index} must be a number: {text}") from exc
        if not math.isfinite(width):
            raise ValueError(f"column width {index} must be finite")
        widths.append(width)
    return tuple(widths)


def _widths_callback(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        _parse_widths(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return value.strip()


def _get_version() -> str:
    try:
        return importlib.metadata.version("colflow")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
