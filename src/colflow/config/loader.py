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

import math
import tomllib
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

from ..core.models import ColumnMode, LayoutRequest, Margins
from ..measure import MEASURE_BACKENDS
from .installer import resolve_config_path


@dataclass(frozen=True)
class LayoutDefaults:
    columns: int = 8
    font_family: str = "Noto Sans"
    font_size: float = 12.0
    line_spacing: float = 1.4
    gap_mm: float = 2.0
    column_mode: ColumnMode = "equal"
    column_widths_mm: tuple[float, ...] = ()
    margins: Margins = field(default_factory=Margins)


@dataclass(frozen=True)
class MeasureDefaults:
    backend: str = "fpdf"
    font_path: Path | None = None


@dataclass(frozen=True)
class ExportDefaults:
    pixel_ratio: float = 2.0


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class AppConfig:
    path: Path | None = None
    layout: LayoutDefaults = field(default_factory=LayoutDefaults)
    measure: MeasureDefaults = field(default_factory=MeasureDefaults)
    export: ExportDefaults = field(default_factory=ExportDefaults)
    ui: UiDefaults = field(default_factory=UiDefaults)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    ui = _Section(data, "ui")
    return AppConfig(
        path=config_path,
        layout=_read_layout(_Section(data, "layout"), _Section(data, "margins")),
        measure=_read_measure(_Section(data, "measure"), base_dir=config_path.parent),
        export=_read_export(_Section(data, "export")),
        ui=UiDefaults(quiet=ui.flag("quiet", False), no_color=ui.flag("no_color", False)),
    )


def build_layout_request(
    defaults: LayoutDefaults,
    text: str,
    *,
    columns: int | None = None,
    font_family: str | None = None,
    font_size: float | None = None,
    line_spacing: float | None = None,
    gap_mm: float | None = None,
    margins: Margins | None = None,
    column_widths_mm: Sequence[float] | None = None,
    column_mode: ColumnMode | None = None,
) -> LayoutRequest:
    """Merge explicit overrides onto config defaults.

    Passing custom widths without a mode switches the request to custom mode.
    """
    widths = defaults.column_widths_mm if column_widths_mm is None else tuple(column_widths_mm)
    mode = column_mode
    if mode is None:
        mode = "custom" if column_widths_mm is not None else defaults.column_mode
    return LayoutRequest(
        text=text,
        columns=defaults.columns if columns is None else columns,
        font_family=defaults.font_family if font_family is None else font_family,
        font_size=defaults.font_size if font_size is None else font_size,
        line_spacing=defaults.line_spacing if line_spacing is None else line_spacing,
        margins=defaults.margins if margins is None else margins,
        gap_mm=defaults.gap_mm if gap_mm is None else gap_mm,
        column_mode=mode,
        column_widths_mm=tuple(float(width) for width in widths),
    )


def _read_layout(layout: _Section, margins: _Section) -> LayoutDefaults:
    defaults = LayoutDefaults()
    edges = Margins()
    mode = layout.choice("column_mode", ("equal", "custom"), defaults.column_mode)
    return LayoutDefaults(
        columns=layout.integer("columns", defaults.columns),
        font_family=layout.text("font_family", defaults.font_family),
        font_size=layout.number("font_size", defaults.font_size),
        line_spacing=layout.number("line_spacing", defaults.line_spacing),
        gap_mm=layout.number("gap_mm", defaults.gap_mm),
        column_mode=cast(ColumnMode, mode),
        column_widths_mm=layout.numbers("column_widths_mm"),
        margins=Margins(
            top=margins.number("top", edges.top),
            right=margins.number("right", edges.right),
            bottom=margins.number("bottom", edges.bottom),
            left=margins.number("left", edges.left),
        ),
    )


def _read_measure(measure: _Section, *, base_dir: Path) -> MeasureDefaults:
    backend = measure.choice("backend", MEASURE_BACKENDS, MeasureDefaults.backend)
    font_path = None
    font_value = measure.text("font_path", "")
    if font_value:
        font_path = Path(font_value).expanduser()
        if not font_path.is_absolute():
            font_path = base_dir / font_path
    return MeasureDefaults(backend=backend, font_path=font_path)


def _read_export(export: _Section) -> ExportDefaults:
    pixel_ratio = export.number("pixel_ratio", ExportDefaults.pixel_ratio)
    if pixel_ratio <= 0:
        raise ValueError("export.pixel_ratio must be a positive number")
    return ExportDefaults(pixel_ratio=pixel_ratio)


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class _Section:
    """Typed reads from one TOML table. Absent keys give the default, bad ones raise."""

    def __init__(self, data: dict[str, object], name: str) -> None:
        table = data.get(name)
        self._values: dict[str, object] = table if isinstance(table, dict) else {}
        self._name = name

    def _label(self, key: str) -> str:
        return f"{self._name}.{key}"

    def text(self, key: str, default: str) -> str:
        value = self._values.get(key)
        if value is None:
            return default
        if not isinstance(value, str):
            raise ValueError(f"{self._label(key)} must be a string")
        return value.strip() or default

    def choice(self, key: str, choices: Sequence[str], default: str) -> str:
        value = self.text(key, default).lower()
        if value not in choices:
            raise ValueError(f"{self._label(key)} must be one of: {', '.join(choices)}")
        return value

    def flag(self, key: str, default: bool) -> bool:
        value = self._values.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        word = str(value).strip().lower() if isinstance(value, (int, str)) else ""
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        raise ValueError(f"{self._label(key)} must be a boolean")

    def number(self, key: str, default: float) -> float:
        value = self._values.get(key)
        if value is None:
            return default
        return _coerce_number(value, self._label(key))

    def integer(self, key: str, default: int) -> int:
        value = self._values.get(key)
        if value is None:
            return default
        number = _coerce_number(value, self._label(key), kind="an integer")
        if not number.is_integer():
            raise ValueError(f"{self._label(key)} must be an integer")
        return int(number)

    def numbers(self, key: str) -> tuple[float, ...]:
        value = self._values.get(key)
        if value is None:
            return ()
        label = self._label(key)
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"{label} must be a list of numbers")
        return tuple(
            _coerce_number(item, f"{label}[{index}]") for index, item in enumerate(value)
        )


def _coerce_number(value: object, label: str, *, kind: str = "a number") -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{label} must be {kind}")
    try:
        number = float(value)
    except ValueError as exc:
        raise ValueError(f"{label} must be {kind}") from exc
    if not math.isfinite(number):
        raise ValueError(f"{label} must be a finite number")
    return number
