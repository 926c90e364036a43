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

from collections.abc import Sequence

from ..core.models import Column, Page

__all__ = ["assemble_pages", "empty_page", "pad_page"]


def empty_page(columns: int) -> Page:
    return Page(columns=tuple(Column() for _ in range(max(columns, 1))))


def pad_page(page: Page, columns: int) -> Page:
    missing = max(columns, 1) - len(page.columns)
    if missing <= 0:
        return page
    return Page(columns=page.columns + tuple(Column() for _ in range(missing)))


def assemble_pages(pages: Sequence[Page], columns: int) -> tuple[Page, ...]:
    """Pad the final page to ``columns`` columns; never return an empty sequence."""
    if not pages:
        return (empty_page(columns),)
    return (*pages[:-1], pad_page(pages[-1], columns))
