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

import typer
from rich.markup import escape

from . import command_registry
from .api import console, console_err
from .core.common import CliState, _get_version
from .startup import run_startup

app = typer.Typer(add_completion=False, help="colflow: flow plain text into multi-column A4 pages.")

_GLOBAL_PANEL = "Global"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"colflow {_get_version()}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def cli(
    ctx: typer.Context,
    config: str | None = typer.Option(
        None,
        "--config",
        help="Read defaults from this TOML file instead of the user config.",
        rich_help_panel=_GLOBAL_PANEL,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log layout decisions and show full tracebacks.",
        rich_help_panel="Debug",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only print errors.", rich_help_panel=_GLOBAL_PANEL
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable colored output.", rich_help_panel=_GLOBAL_PANEL
    ),
    init_config: bool = typer.Option(
        False,
        "--init-config",
        help="Write the default config to the user config directory and exit.",
        is_eager=True,
        rich_help_panel="Config",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit.",
    ),
) -> None:
    _ = version
    try:
        done = run_startup(quiet=quiet, no_color=no_color, debug=debug, init_config=init_config)
    except OSError as exc:
        console_err.print(f"[error]Error:[/error] {escape(str(exc))}")
        raise typer.Exit(code=2)
    if done:
        raise typer.Exit()
    ctx.obj = CliState(config=config, debug=debug, quiet=quiet, no_color=no_color)
    if ctx.invoked_subcommand is None:
        console_err.print(
            "[error]Error:[/error] No command given. Run `colflow --help` to list the commands."
        )
        raise typer.Exit(code=2)


command_registry.register(app)


def main() -> None:
    app()
