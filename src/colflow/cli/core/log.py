#!/usr/bin/env python3
from __future__ import annotations

import logging

from rich.logging import RichHandler

from ..ui import console_err

_HANDLER_NAME = "colflow-rich"


def _warn(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[warning]Warning:[/warning] {message}")


def configure_logging(*, debug: bool) -> None:
    logger = logging.getLogger("colflow")
    if not debug:
        logger.setLevel(logging.WARNING)
        return
    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        handler = RichHandler(console=console_err, show_path=False, rich_tracebacks=True)
        handler.set_name(_HANDLER_NAME)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
