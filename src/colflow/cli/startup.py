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

import logging

from rich.traceback import install as install_rich_traceback

from ..config import init_user_config, user_config_needs_init
from .api import configure_ui, console
from .core.log import configure_logging

logger = logging.getLogger(__name__)


def run_startup(
    *,
    quiet: bool,
    no_color: bool,
    debug: bool,
    init_config: bool,
) -> bool:
    """Prepare console, logging and the user config; True means the run is complete."""
    configure_ui(no_color=no_color)
    configure_logging(debug=debug)
    if debug:
        install_rich_traceback(show_locals=True)
    if init_config:
        console.print(f"User config ready at {init_user_config()}")
        return True
    _seed_user_config(quiet=quiet)
    return False


def _seed_user_config(*, quiet: bool) -> None:
    if not user_config_needs_init():
        return
    try:
        config_dir = init_user_config()
    except OSError as exc:
        logger.debug("Running on packaged defaults: %s", exc)
        return
    if not quiet:
        console.print(f"[muted]Created user config in {config_dir}[/muted]")
