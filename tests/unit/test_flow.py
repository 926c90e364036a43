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

from colflow.core.bounds import BLANK_LINE
from colflow.layout.flow import FlowBuilder
from colflow.measure import MeasurementCache, MeasurementUnavailable
from tests.test_support import (
    CharMeasurer,
    ConstantMeasurer,
    all_lines,
    make_metrics,
    page_lines,
    run_flow,
    visible_characters,
)


class TestLineWrapping(unittest.TestCase):
    def test_greedy_wrap_at_spaces(self) -> None:
        pages = run_flow("aaaa bbbb cccc", make_metrics((9.0,)))
        self.assertEqual(page_lines(pages), [[["aaaa bbbb", "cccc"]]])

    def test_line_fits_within_tolerance(self) -> None:
        pages = run_flow("aaaa bbbb", make_metrics((8.95,)))
        self.assertEqual(all_lines(pages), ["aaaa bbbb"])

    def test_line_beyond_tolerance_wraps(self) -> None:
        pages = run_flow("aaaa bbbb", make_metrics((8.8,)))
        self.assertEqual(all_lines(pages), ["aaaa", "bbbb"])

    def test_blank_line_uses_placeholder(self) -> None:
        pages = run_flow("A\n\nB", make_metrics((10.0,)))
        self.assertEqual(all_lines(pages), ["A", BLANK_LINE, "B"])

    def test_trailing_whitespace_is_trimmed(self) -> None:
        pages = run_flow("ab  \ncd", make_metrics((10.0,)))
        self.assertEqual(all_lines(pages), ["ab", "cd"])

    def test_leading_whitespace_is_dropped(self) -> None:
        pages = run_flow("   ab", make_metrics((10.0,)))
        self.assertEqual(all_lines(pages), ["ab"])

    def test_whitespace_after_wrap_is_dropped(self) -> None:
        pages = run_flow("aaaaa     bbbbb", make_metrics((6.0,)))
        self.assertEqual(all_lines(pages), ["aaaaa", "bbbbb"])

    def test_whitespace_only_line_becomes_placeholder(self) -> None:
        pages = run_flow("a\n   \nb", make_metrics((10.0,)))
        self.assertEqual(all_lines(pages), ["a", BLANK_LINE, "b"])


class TestLongWords(unittest.TestCase):
    def test_long_word_is_split_into_fitting_pieces(self) -> None:
        word = "abcdefghijklmnopqrstuvwxy"
        pages = run_flow(word, make_metrics((10.0,)))
        lines = all_lines(pages)
        self.assertEqual(lines, ["abcdefghij", "klmnopqrst", "uvwxy"])
        self.assertEqual("".join(lines), word)

    def test_split_tail_keeps_collecting_words(self) -> None:
        pages = run_flow("abcdefghijkl x", make_metrics((10.0,)))
        self.assertEqual(all_lines(pages), ["abcdefghij", "kl x"])

    def test_long_word_after_text_starts_on_new_line(self) -> None:
        pages = run_flow("ab abcdefghijklm", make_metrics((10.0,)))
        self.assertEqual(all_lines(pages), ["ab", "abcdefghij", "klm"])

    def test_column_narrower_than_a_character_still_progresses(self) -> None:
        pages = run_flow("abc", make_metrics((0.5,)))
        self.assertEqual(all_lines(pages), ["a", "b", "c"])

    def test_unicode_without_spaces_is_split(self) -> None:
        text = "日本語のテキストを折り返す"
        pages = run_flow(text, make_metrics((4.0,)))
        lines = all_lines(pages)
        self.assertTrue(all(len(line) <= 4 for line in lines))
        self.assertEqual("".join(lines), text)


class TestColumnsAndPages(unittest.TestCase):
    def test_lines_overflow_into_next_column(self) -> None:
        metrics = make_metrics((10.0, 10.0), column_height=30.0, line_height=10.0)
        pages = run_flow("1\n2\n3\n4", metrics, columns=2)
        self.assertEqual(page_lines(pages), [[["1", "2", "3"], ["4"]]])

    def test_single_column_overflow_starts_new_page(self) -> None:
        metrics = make_metrics((10.0,), column_height=30.0, line_height=10.0)
        pages = run_flow("1\n2\n3\n4", metrics, columns=1)
        self.assertEqual(page_lines(pages), [[["1", "2", "3"]], [["4"]]])

    def test_exactly_full_column_stays_on_one_page(self) -> None:
        metrics = make_metrics((10.0,), column_height=30.0, line_height=10.0)
        for text in ("1\n2\n3", "1\n2\n3\n"):
            with self.subTest(text=text):
                pages = run_flow(text, metrics)
                self.assertEqual(page_lines(pages), [[["1", "2", "3"]]])

    def test_column_holds_as_many_lines_as_fit(self) -> None:
        metrics = make_metrics((10.0,), column_height=35.0, line_height=10.0)
        pages = run_flow("\n".join(str(n) for n in range(10)), metrics)
        self.assertEqual([len(page.columns[0].lines) for page in pages], [3, 3, 3, 1])

    def test_final_page_is_padded_with_empty_columns(self) -> None:
        pages = run_flow("hi", make_metrics((10.0, 10.0, 10.0)), columns=3)
        self.assertEqual(page_lines(pages), [[["hi"], [], []]])

    def test_empty_and_whitespace_text_give_one_empty_page(self) -> None:
        for text in ("", "   ", "\t "):
            with self.subTest(text=text):
                pages = run_flow(text, make_metrics((10.0, 10.0)), columns=2)
                self.assertEqual(page_lines(pages), [[[], []]])

    def test_each_column_uses_its_own_width(self) -> None:
        metrics = make_metrics((5.0, 10.0), column_height=10.0, line_height=10.0)
        pages = run_flow("aaaa bbbbbbbb cc", metrics, columns=2)
        self.assertEqual(
            page_lines(pages),
            [[["aaaa"], ["bbbbbbbb"]], [["cc"], []]],
        )

    def test_split_pieces_follow_the_column_they_land_in(self) -> None:
        metrics = make_metrics((10.0, 4.0), column_height=10.0, line_height=10.0)
        pages = run_flow("abcdefghijklmnop", metrics, columns=2)
        self.assertEqual(
            page_lines(pages),
            [[["abcdefghij"], ["klmn"]], [["op"], []]],
        )

    def test_line_taller_than_column_is_still_placed(self) -> None:
        metrics = make_metrics((10.0,), column_height=5.0, line_height=10.0)
        pages = run_flow("a\nb", metrics)
        self.assertEqual(page_lines(pages), [[["a"]], [["b"]]])

    def test_every_page_has_requested_column_count(self) -> None:
        metrics = make_metrics((6.0, 8.0, 7.0), column_height=20.0, line_height=10.0)
        text = "lorem ipsum dolor sit amet consectetur adipiscing elit " * 6
        pages = run_flow(text, metrics, columns=3)
        self.assertGreater(len(pages), 1)
        for page in pages:
            self.assertEqual(len(page.columns), 3)

    def test_visible_text_is_preserved_in_order(self) -> None:
        metrics = make_metrics((7.0, 12.0), column_height=30.0, line_height=10.0)
        text = "Pack my box\nwith five dozen liquor jugs.\n\n  Sphinxofblackquartz judge my vow"
        pages = run_flow(text, metrics, columns=2)
        self.assertEqual(visible_characters("".join(all_lines(pages))), visible_characters(text))


class TestFlowBuilder(unittest.TestCase):
    def test_rejects_metrics_without_columns(self) -> None:
        cache = MeasurementCache(CharMeasurer(), "Test Sans", 10.0)
        with self.assertRaises(ValueError):
            FlowBuilder(make_metrics(()), 1, cache)

    def test_flow_without_widths_returns_empty_page(self) -> None:
        pages = run_flow("text", make_metrics(()), columns=2)
        self.assertEqual(page_lines(pages), [[[], []]])

    def test_column_width_starts_with_first_column(self) -> None:
        cache = MeasurementCache(CharMeasurer(), "Test Sans", 10.0)
        builder = FlowBuilder(make_metrics((3.0, 5.0)), 2, cache)
        self.assertEqual(builder.column_width(), 3.0)

    def test_unusable_measurement_aborts_the_pass(self) -> None:
        for value in (float("nan"), float("inf"), -1.0):
            with self.subTest(value=value):
                with self.assertRaises(MeasurementUnavailable):
                    run_flow("word", make_metrics((10.0,)), measurer=ConstantMeasurer(value))

    def test_measurements_are_memoized_within_a_pass(self) -> None:
        measurer = CharMeasurer()
        run_flow("ab ab ab ab ab ab", make_metrics((100.0,)), measurer=measurer)
        self.assertEqual(measurer.calls, 2)


if __name__ == "__main__":
    unittest.main()
