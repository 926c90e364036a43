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

import unittest

from colflow.core.models import LayoutRequest, Margins
from colflow.core.validation import (
    available_width_mm,
    clamp_float,
    clamp_int,
    default_column_widths,
    normalize_margins,
    normalize_request,
    sync_column_widths,
)


class TestClamp(unittest.TestCase):
    def test_clamp_float(self) -> None:
        self.assertEqual(clamp_float(5.0, min_val=1.0, max_val=4.0), 4.0)
        self.assertEqual(clamp_float(-1.0, min_val=0.0), 0.0)
        self.assertEqual(clamp_float(1e9, min_val=0.0), 1e9)

    def test_clamp_int(self) -> None:
        self.assertEqual(clamp_int(20, min_val=1, max_val=12), 12)
        self.assertEqual(clamp_int(0, min_val=1, max_val=12), 1)


class TestNormalizeRequest(unittest.TestCase):
    def test_out_of_range_values_are_clamped(self) -> None:
        cases = (
            ({"columns": 20}, "columns", 12),
            ({"columns": 0}, "columns", 1),
            ({"font_size": 200.0}, "font_size", 96.0),
            ({"font_size": 1.0}, "font_size", 6.0),
            ({"line_spacing": 0.5}, "line_spacing", 1.0),
            ({"line_spacing": 9.0}, "line_spacing", 4.0),
            ({"gap_mm": -3.0}, "gap_mm", 0.0),
        )
        for overrides, field, expected in cases:
            with self.subTest(overrides=overrides):
                request = normalize_request(LayoutRequest(**overrides))
                self.assertEqual(getattr(request, field), expected)

    def test_non_finite_values_fall_back_to_defaults(self) -> None:
        request = normalize_request(
            LayoutRequest(font_size=float("nan"), line_spacing=float("inf"), gap_mm=float("nan"))
        )
        self.assertEqual(request.font_size, 12.0)
        self.assertEqual(request.line_spacing, 1.4)
        self.assertEqual(request.gap_mm, 2.0)

    def test_margins_are_clamped_per_side(self) -> None:
        margins = normalize_margins(Margins(top=-5.0, right=50.0, bottom=float("nan"), left=12.5))
        self.assertEqual(margins, Margins(top=0.0, right=40.0, bottom=10.0, left=12.5))

    def test_unknown_column_mode_falls_back_to_equal(self) -> None:
        request = normalize_request(LayoutRequest(column_mode="diagonal"))  # type: ignore[arg-type]
        self.assertEqual(request.column_mode, "equal")

    def test_custom_widths_are_synced_to_column_count(self) -> None:
        request = normalize_request(
            LayoutRequest(columns=3, gap_mm=2.0, column_mode="custom", column_widths_mm=(50.0,))
        )
        self.assertEqual(request.column_widths_mm, (50.0, 62.0, 62.0))

    def test_custom_widths_are_floored(self) -> None:
        request = normalize_request(
            LayoutRequest(columns=2, column_mode="custom", column_widths_mm=(0.1, -4.0))
        )
        self.assertEqual(request.column_widths_mm, (0.5, 0.5))

    def test_none_text_becomes_empty(self) -> None:
        request = normalize_request(LayoutRequest(text=None))  # type: ignore[arg-type]
        self.assertEqual(request.text, "")

    def test_valid_request_is_unchanged(self) -> None:
        request = LayoutRequest(
            text="hello",
            columns=3,
            column_mode="custom",
            column_widths_mm=(40.0, 60.0, 80.0),
        )
        self.assertEqual(normalize_request(request), request)


class TestColumnWidthHelpers(unittest.TestCase):
    def test_available_width(self) -> None:
        self.assertAlmostEqual(available_width_mm(8, 2.0, Margins()), 176.0)
        self.assertAlmostEqual(available_width_mm(1, 2.0, Margins()), 190.0)

    def test_available_width_is_floored(self) -> None:
        self.assertEqual(available_width_mm(12, 40.0, Margins()), 1.0)

    def test_default_column_widths(self) -> None:
        self.assertEqual(default_column_widths(8, 2.0, Margins()), (22.0,) * 8)

    def test_sync_pads_and_truncates(self) -> None:
        self.assertEqual(sync_column_widths((10.0, 20.0, 30.0), 2, 100.0), (10.0, 20.0))
        self.assertEqual(sync_column_widths((10.0,), 3, 100.0), (10.0, 33.33, 33.33))

    def test_sync_fallback_never_below_one_mm(self) -> None:
        self.assertEqual(sync_column_widths((), 4, 1.0), (1.0, 1.0, 1.0, 1.0))


if __name__ == "__main__":
    unittest.main()
