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

from .bounds import CSS_DPI, MM_PER_INCH, PT_PER_INCH


def mm_to_px(value_mm: float) -> float:
    return value_mm * CSS_DPI / MM_PER_INCH


def px_to_mm(value_px: float) -> float:
    return value_px * MM_PER_INCH / CSS_DPI


def pt_to_px(value_pt: float) -> float:
    return value_pt * CSS_DPI / PT_PER_INCH


def px_to_pt(value_px: float) -> float:
    return value_px * PT_PER_INCH / CSS_DPI
