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

import json
from pathlib import Path

from ..core.models import LayoutResult


def layout_to_dict(result: LayoutResult) -> dict[str, object]:
    payload = result.to_dict()
    payload["page_count"] = result.page_count
    return payload


def layout_to_json(result: LayoutResult, *, indent: int | None = 2) -> str:
    return json.dumps(layout_to_dict(result), indent=indent, ensure_ascii=False)


def write_layout_json(result: LayoutResult, output_path: str | Path) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(layout_to_json(result) + "\n", encoding="utf-8")
    return path
