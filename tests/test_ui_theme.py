from __future__ import annotations

import unittest
from pathlib import Path

from scifileviewer.ui_theme import DEFAULT_THEME, EntryKind, IconMode, entry_kind_for, style_for


class EntryKindTests(unittest.TestCase):
    def test_directories_and_parent_row(self) -> None:
        self.assertIs(entry_kind_for("..", Path("/"), True), EntryKind.PARENT)
        self.assertIs(entry_kind_for("runs", Path("/x/runs"), True), EntryKind.DIRECTORY)

    def test_file_extensions(self) -> None:
        cases = {
            "water.xyz": EntryKind.MOLECULE,
            "1abc.pdb": EntryKind.MOLECULE,
            "cell.cif": EntryKind.MOLECULE,
            "trace.dat": EntryKind.DATA,
            "table.csv": EntryKind.DATA,
            "notes.txt": EntryKind.TEXT,
            "run.log": EntryKind.TEXT,
            "main.rs": EntryKind.CODE,
            "plot.py": EntryKind.CODE,
            "image.png": EntryKind.OTHER,
            "Makefile": EntryKind.OTHER,
        }
        for name, kind in cases.items():
            with self.subTest(name=name):
                self.assertIs(entry_kind_for(name, Path("/x") / name, False), kind)

    def test_directory_named_like_data_file_is_still_directory(self) -> None:
        self.assertIs(entry_kind_for("set.dat", Path("/x/set.dat"), True), EntryKind.DIRECTORY)


class StyleForTests(unittest.TestCase):
    def test_icon_mode_picks_glyph_set(self) -> None:
        glyph, color = style_for(EntryKind.PARENT, IconMode.GLYPH)
        emoji, emoji_color = style_for(EntryKind.PARENT, IconMode.EMOJI)

        self.assertEqual(glyph, "\uf062 ")
        self.assertEqual(emoji, "⬆️ ")
        self.assertEqual(color, DEFAULT_THEME.blue)
        self.assertEqual(emoji_color, color)

    def test_toggle_alternates_modes(self) -> None:
        self.assertIs(IconMode.GLYPH.toggled(), IconMode.EMOJI)
        self.assertIs(IconMode.EMOJI.toggled(), IconMode.GLYPH)


if __name__ == "__main__":
    unittest.main()
