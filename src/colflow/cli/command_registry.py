#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    config as config_command,
    export as export_command,
    layout as layout_command,
)


def register(app: typer.Typer) -> None:
    layout_command.register(app)
    export_command.register(app)
    config_command.register(app)
