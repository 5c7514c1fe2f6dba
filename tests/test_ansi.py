"""Display-width tests for cell placement."""

import unittest

from scifileviewer import ansi as ansi_mod


class DisplayWidthTests(unittest.TestCase):
    def test_ascii_counts_one_column_per_char(self) -> None:
        self.assertEqual(ansi_mod.display_width("abc"), 3)

    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("漢字"), 4)
        self.assertEqual(ansi_mod.display_width("📁 "), 3)

    def test_combining_marks_take_no_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("e\u0301"), 1)

    def test_tabs_advance_to_next_stop(self) -> None:
        self.assertEqual(ansi_mod.display_width("ab\t"), 8)
        self.assertEqual(ansi_mod.expand_tabs("ab\tc"), "ab      c")

    def test_strip_ansi_removes_sgr_sequences(self) -> None:
        self.assertEqual(ansi_mod.strip_ansi("\x1b[38;2;1;2;3mhi\x1b[0m"), "hi")


if __name__ == "__main__":
    unittest.main()
