"""Numeric data detection tests.

Covers which lines count as samples and how chart bounds are padded.
"""

from __future__ import annotations

import unittest

from scifileviewer.chart import DEFAULT_BOUNDS, ChartBounds, NumericSample, compute_bounds, extract_samples, extract_series
from scifileviewer.chart.series import parse_sample_line


class ExtractSamplesTests(unittest.TestCase):
    def test_comment_lines_are_skipped(self) -> None:
        samples = extract_samples("1 2\n#comment\n3 4\n")

        self.assertEqual(samples, [NumericSample(1.0, 2.0), NumericSample(3.0, 4.0)])

    def test_single_sample_is_not_chart_data(self) -> None:
        self.assertEqual(extract_samples("1 2\nhello world\n"), [])

    def test_non_finite_values_are_dropped(self) -> None:
        samples = extract_samples("1 NaN\n2 3\n4 5\ninf 1\n")

        self.assertEqual(samples, [(2.0, 3.0), (4.0, 5.0)])

    def test_commas_tabs_and_mixed_separators(self) -> None:
        samples = extract_samples("1,2\n3, 4\n5\t6,7\n")

        self.assertEqual(samples, [(1.0, 2.0), (3.0, 4.0), (5.0, 6.0)])

    def test_extra_columns_after_first_two_are_ignored(self) -> None:
        samples = extract_samples("0 1 ignored\n1 2 also ignored\n")

        self.assertEqual(samples, [(0.0, 1.0), (1.0, 2.0)])

    def test_crlf_line_endings_parse(self) -> None:
        self.assertEqual(extract_samples("1 2\r\n3 4\r\n"), [(1.0, 2.0), (3.0, 4.0)])

    def test_samples_keep_source_order(self) -> None:
        samples = extract_samples("5 1\n1 2\n3 3\n")

        self.assertEqual([sample.x for sample in samples], [5.0, 1.0, 3.0])

    def test_non_ascii_digits_are_not_numeric_data(self) -> None:
        self.assertEqual(extract_samples("１ ２\n٣ ٤\n"), [])


class ParseSampleLineTests(unittest.TestCase):
    def test_rejects_non_data_lines(self) -> None:
        for line in ("", "   ", "; note", "# 1 2", "abc 1", "1", "1_000 2", "1 2_0", "１ 2", "3 ٤", "½ 1"):
            with self.subTest(line=line):
                self.assertIsNone(parse_sample_line(line))

    def test_accepts_scientific_and_signed_numbers(self) -> None:
        self.assertEqual(parse_sample_line("  -1.5e3 +2E-2 "), (-1500.0, 0.02))


class ComputeBoundsTests(unittest.TestCase):
    def test_padding_is_five_percent_of_range(self) -> None:
        bounds = compute_bounds([NumericSample(0.0, 0.0), NumericSample(10.0, 10.0)])

        self.assertAlmostEqual(bounds.x_min, -0.5)
        self.assertAlmostEqual(bounds.x_max, 10.5)
        self.assertAlmostEqual(bounds.y_min, -0.5)
        self.assertAlmostEqual(bounds.y_max, 10.5)

    def test_degenerate_axes_widen_by_one(self) -> None:
        bounds = compute_bounds([NumericSample(5.0, 5.0), NumericSample(5.0, 5.0)])

        self.assertEqual(bounds, ChartBounds(4.0, 6.0, 4.0, 6.0))

    def test_only_flat_axis_is_widened(self) -> None:
        bounds = compute_bounds([NumericSample(1.0, 5.0), NumericSample(3.0, 5.0)])

        self.assertAlmostEqual(bounds.x_min, 0.9)
        self.assertAlmostEqual(bounds.x_max, 3.1)
        self.assertEqual(bounds.y_bounds, (4.0, 6.0))

    def test_extract_series_without_data_uses_default_bounds(self) -> None:
        samples, bounds = extract_series("just some text\n")

        self.assertEqual(samples, [])
        self.assertEqual(bounds, DEFAULT_BOUNDS)

    def test_extract_series_bounds_cover_all_samples(self) -> None:
        samples, bounds = extract_series("0 -2\n4 8\n2 3\n")

        self.assertEqual(len(samples), 3)
        for sample in samples:
            self.assertLessEqual(bounds.x_min, sample.x)
            self.assertGreaterEqual(bounds.x_max, sample.x)
            self.assertLessEqual(bounds.y_min, sample.y)
            self.assertGreaterEqual(bounds.y_max, sample.y)


if __name__ == "__main__":
    unittest.main()
