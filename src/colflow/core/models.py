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

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

ColumnMode = Literal["equal", "custom"]


class TokenKind(str, Enum):
    NEWLINE = "newline"
    SPACE = "space"
    WORD = "word"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: str


@dataclass(frozen=True)
class Margins:
    top: float = 10.0
    right: float = 10.0
    bottom: float = 10.0
    left: float = 10.0

    @classmethod
    def uniform(cls, value: float) -> Margins:
        return cls(top=value, right=value, bottom=value, left=value)

    def to_dict(self) -> dict[str, float]:
        return {"top": self.top, "right": self.right, "bottom": self.bottom, "left": self.left}


@dataclass(frozen=True)
class MarginsPx:
    top: float
    right: float
    bottom: float
    left: float

    def to_dict(self) -> dict[str, float]:
        return {"top": self.top, "right": self.right, "bottom": self.bottom, "left": self.left}


@dataclass(frozen=True)
class LayoutConfig:
    text: str
    columns: int
    font_family: str
    font_size: float
    line_spacing: float


@dataclass(frozen=True)
class LayoutMetrics:
    page_width_px: float
    page_height_px: float
    margins_px: MarginsPx
    column_widths_px: tuple[float, ...]
    column_offsets_px: tuple[float, ...]
    column_height_px: float
    gap_px: float
    font_size_px: float
    line_height_px: float
    custom_scale: float = 1.0

    def to_dict(self) -> dict[str, object]:
        return {
            "page_width_px": self.page_width_px,
            "page_height_px": self.page_height_px,
            "margins_px": self.margins_px.to_dict(),
            "column_widths_px": list(self.column_widths_px),
            "column_offsets_px": list(self.column_offsets_px),
            "column_height_px": self.column_height_px,
            "gap_px": self.gap_px,
            "font_size_px": self.font_size_px,
            "line_height_px": self.line_height_px,
            "custom_scale": self.custom_scale,
        }


@dataclass(frozen=True)
class Column:
    lines: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"lines": list(self.lines)}


@dataclass(frozen=True)
class Page:
    columns: tuple[Column, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"columns": [column.to_dict() for column in self.columns]}


@dataclass(frozen=True)
class LayoutRequest:
    """Every user-facing layout parameter, in the units the user types them."""

    text: str = ""
    columns: int = 8
    font_family: str = "Noto Sans"
    font_size: float = 12.0
    line_spacing: float = 1.4
    margins: Margins = field(default_factory=Margins)
    gap_mm: float = 2.0
    column_mode: ColumnMode = "equal"
    column_widths_mm: tuple[float, ...] = ()

    def layout_config(self) -> LayoutConfig:
        return LayoutConfig(
            text=self.text,
            columns=self.columns,
            font_family=self.font_family,
            font_size=self.font_size,
            line_spacing=self.line_spacing,
        )


@dataclass(frozen=True)
class LayoutResult:
    metrics: LayoutMetrics
    pages: tuple[Page, ...]
    columns: int

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def to_dict(self) -> dict[str, object]:
        return {
            "columns": self.columns,
            "metrics": self.metrics.to_dict(),
            "pages": [page.to_dict() for page in self.pages],
        }
