#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from rich import box
from rich.status import Status
from rich.table import Table

from ...core.models import Page
from .state import THEME, UIContext, format_hint, get_context

DEFAULT_CONTEXT = get_context()
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    if no_color:
        (context or DEFAULT_CONTEXT).set_color(False)


@contextmanager
def status(
    message: str, *, quiet: bool, context: UIContext | None = None
) -> Iterator[Status | None]:
    """Show a spinner on a terminal, a single line elsewhere, nothing when quiet."""
    target = (context or DEFAULT_CONTEXT).console
    if quiet:
        yield None
    elif not target.is_terminal:
        target.print(f"[subtitle]{message}[/subtitle]")
        yield None
    else:
        with target.status(f"[subtitle]{message}[/subtitle]", spinner="dots") as spinner:
            yield spinner


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, title_style="title", show_header=False, box=box.MINIMAL)
    table.add_column(style="muted", justify="right", no_wrap=True)
    table.add_column(overflow="fold")
    for label, value in rows:
        table.add_row(label, value)
    return table


def build_page_table(page: Page, *, page_number: int) -> Table:
    table = Table(
        title=f"Page {page_number}",
        title_style="title",
        box=box.SIMPLE_HEAD,
        header_style="column.header",
        show_lines=False,
        expand=True,
    )
    for index in range(len(page.columns)):
        table.add_column(f"Col {index + 1}", overflow="fold")
    depth = max((len(column.lines) for column in page.columns), default=0)
    for row in range(depth):
        table.add_row(
            *(column.lines[row] if row < len(column.lines) else "" for column in page.columns)
        )
    return table


__all__ = [
    "THEME",
    "build_kv_table",
    "build_page_table",
    "configure_ui",
    "console",
    "console_err",
    "format_hint",
    "status",
]
