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
import sys
from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

NO_COLOR_ENV = "NO_COLOR"

THEME = Theme(
    {
        "title": "bold cyan",
        "subtitle": "dim",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
        "column.header": "bold cyan",
    }
)


def _stream_is_tty(stream: object) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def _build_console(*, stderr: bool) -> Console:
    stream = sys.__stderr__ if stderr else sys.__stdout__
    return Console(
        stderr=stderr,
        theme=THEME,
        force_terminal=_stream_is_tty(stream) or None,
        no_color=bool(os.environ.get(NO_COLOR_ENV)),
    )


@dataclass
class UIContext:
    console: Console = field(default_factory=lambda: _build_console(stderr=False))
    console_err: Console = field(default_factory=lambda: _build_console(stderr=True))

    def set_color(self, enabled: bool) -> None:
        self.console.no_color = not enabled
        self.console_err.no_color = not enabled


DEFAULT_CONTEXT = UIContext()


def get_context() -> UIContext:
    return DEFAULT_CONTEXT


def format_hint(help_text: str) -> Text:
    hint = Text("Hint: ", style="muted")
    hint.append(help_text, style="subtitle")
    return hint
