"""Key routing tests for the application state machine.

Drives ``AppStateMachine.handle_key`` with normalized key tokens over a
temporary directory and checks the resulting model state.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from scifileviewer.runtime.layout import ViewportGeometry
from scifileviewer.runtime.machine import AppStateMachine
from scifileviewer.ui_theme import IconMode


class AppStateMachineTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        (self.root / "sub").mkdir()
        (self.root / "sub" / "inner.txt").write_text("inner\n", encoding="utf-8")
        (self.root / "data.dat").write_text("0 1\n1 4\n2 9\n", encoding="utf-8")
        (self.root / "notes.txt").write_text("".join(f"note {idx}\n" for idx in range(20)), encoding="utf-8")
        self.home = self.root / "sub"
        self.saved: list[Path] = []
        self.machine = AppStateMachine.create(
            self.root,
            resolve_home=lambda: self.home,
            save_last_directory=self.saved.append,
        )
        self.machine.update_viewport(ViewportGeometry(tree_rows=5, content_rows=3, popup_rows=12))

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _press(self, *keys: str) -> list[bool]:
        return [self.machine.handle_key(key) for key in keys]

    def _open(self, name: str) -> None:
        names = [entry.name for entry in self.machine.state.directory.entries]
        self.machine.state.directory.select(names.index(name))
        self._press("ENTER")

    def test_listing_starts_in_startup_directory(self) -> None:
        state = self.machine.state

        self.assertEqual(state.directory.current_path, self.root)
        self.assertEqual([entry.name for entry in state.directory.entries], ["..", "sub", "data.dat", "notes.txt"])
        self.assertTrue(state.chart_visible)
        self.assertIs(state.icon_mode, IconMode.GLYPH)

    def test_enter_on_file_opens_it_and_records_history(self) -> None:
        self.machine.consume_dirty()

        self._press("DOWN", "DOWN", "ENTER")

        state = self.machine.state
        self.assertEqual(state.viewer.path, self.root / "data.dat")
        self.assertEqual(state.recent.paths, [self.root / "data.dat"])
        self.assertTrue(state.viewer.has_chart_data)
        self.assertTrue(self.machine.consume_dirty())
        self.assertFalse(self.machine.consume_dirty())

    def test_enter_on_directory_and_backspace_return(self) -> None:
        self._press("DOWN", "ENTER")
        self.assertEqual(self.machine.state.directory.current_path, self.root / "sub")
        self.assertEqual(self.machine.state.directory.selected_index, 0)

        self._press("BACKSPACE")
        self.assertEqual(self.machine.state.directory.current_path, self.root)

    def test_selection_movement_does_not_force_full_redraw(self) -> None:
        self.machine.consume_dirty()

        self._press("DOWN", "DOWN", "UP")

        self.assertEqual(self.machine.state.directory.selected_index, 1)
        self.assertFalse(self.machine.state.dirty)

    def test_startup_and_home_shortcuts(self) -> None:
        self._press("BACKSPACE")
        self.assertEqual(self.machine.state.directory.current_path, self.root.parent)

        self._press(".")
        self.assertEqual(self.machine.state.directory.current_path, self.root)

        self._press("~")
        self.assertEqual(self.machine.state.directory.current_path, self.home)

    def test_home_shortcut_without_home_directory_is_noop(self) -> None:
        machine = AppStateMachine.create(self.root, resolve_home=lambda: None, save_last_directory=self.saved.append)

        machine.handle_key("~")

        self.assertEqual(machine.state.directory.current_path, self.root)

    def test_refresh_picks_up_new_files(self) -> None:
        (self.root / "zz.txt").write_text("", encoding="utf-8")

        self._press("r")

        self.assertIn("zz.txt", [entry.name for entry in self.machine.state.directory.entries])

    def test_content_scrolling_marks_dirty_only_when_offset_moves(self) -> None:
        self._open("notes.txt")
        self.machine.consume_dirty()

        self._press("k")
        self.assertFalse(self.machine.state.dirty)

        self._press("j")
        self.assertEqual(self.machine.state.viewer.scroll_offset, 1)
        self.assertTrue(self.machine.consume_dirty())

        self._press("END")
        self.assertEqual(self.machine.state.viewer.scroll_offset, 17)
        self._press("HOME")
        self.assertEqual(self.machine.state.viewer.scroll_offset, 0)
        self._press("d")
        self.assertEqual(self.machine.state.viewer.scroll_offset, 3)
        self._press("PAGE_UP")
        self.assertEqual(self.machine.state.viewer.scroll_offset, 0)

    def test_viewport_growth_that_moves_scroll_marks_dirty(self) -> None:
        self._open("notes.txt")
        self._press("END")
        self.machine.consume_dirty()

        self.machine.update_viewport(ViewportGeometry(tree_rows=5, content_rows=10, popup_rows=12))

        self.assertEqual(self.machine.state.viewer.scroll_offset, 10)
        self.assertTrue(self.machine.state.dirty)

    def test_chart_and_icon_toggles(self) -> None:
        self.machine.consume_dirty()

        self._press("c")
        self.assertFalse(self.machine.state.chart_visible)
        self.assertTrue(self.machine.consume_dirty())

        self._press("n")
        self.assertIs(self.machine.state.icon_mode, IconMode.EMOJI)
        self.assertTrue(self.machine.consume_dirty())

        self._press("c", "n")
        self.assertTrue(self.machine.state.chart_visible)
        self.assertIs(self.machine.state.icon_mode, IconMode.GLYPH)

    def test_popup_is_modal(self) -> None:
        self._open("data.dat")
        self._open("notes.txt")

        self._press("h")
        state = self.machine.state
        self.assertTrue(state.popup_open)
        self.assertEqual(state.popup_selected_index, 0)

        self._press("j", "c", "BACKSPACE")
        self.assertEqual(state.viewer.scroll_offset, 0)
        self.assertTrue(state.chart_visible)
        self.assertEqual(state.directory.current_path, self.root)
        self.assertTrue(state.popup_open)

    def test_popup_enter_opens_selected_file_and_closes(self) -> None:
        self._open("data.dat")
        self._open("notes.txt")

        self._press("h", "DOWN", "ENTER")

        state = self.machine.state
        self.assertFalse(state.popup_open)
        self.assertEqual(state.viewer.path, self.root / "data.dat")
        self.assertEqual(state.recent.paths, [self.root / "data.dat", self.root / "notes.txt"])

    def test_popup_selection_wraps(self) -> None:
        self._open("data.dat")
        self._open("notes.txt")

        self._press("h", "UP")

        self.assertEqual(self.machine.state.popup_selected_index, 1)

    def test_popup_close_keys_return_to_normal_mode(self) -> None:
        for key in ("ESC", "q", "h"):
            with self.subTest(key=key):
                self._press("h")
                self.machine.consume_dirty()

                self.assertFalse(self.machine.handle_key(key))

                self.assertFalse(self.machine.state.popup_open)
                self.assertTrue(self.machine.state.dirty)
        self.assertEqual(self.saved, [])

    def test_popup_enter_without_history_keeps_popup_open(self) -> None:
        self._press("h", "ENTER")

        self.assertTrue(self.machine.state.popup_open)
        self.assertIsNone(self.machine.state.viewer.path)

    def test_popup_scroll_follows_selection(self) -> None:
        self.machine.update_viewport(ViewportGeometry(tree_rows=5, content_rows=3, popup_rows=2))
        for idx in range(5):
            self.machine.open_file(self.root / f"f{idx}.txt")

        self._press("h", "DOWN", "DOWN", "DOWN")

        self.assertEqual(self.machine.state.popup_selected_index, 3)
        self.assertEqual(self.machine.state.popup_scroll_offset, 2)

    def test_quit_persists_current_directory(self) -> None:
        self._press("DOWN", "ENTER")

        self.assertEqual(self._press("q"), [True])
        self.assertEqual(self.saved, [self.root / "sub"])

    def test_snapshot_reflects_state(self) -> None:
        snapshot = self.machine.snapshot(50)
        self.assertEqual(snapshot.display_path, self.root)
        self.assertIsNone(snapshot.chart)
        self.assertFalse(snapshot.popup.is_open)

        self._open("data.dat")
        snapshot = self.machine.snapshot(50)
        self.assertEqual(snapshot.display_path, self.root / "data.dat")
        self.assertEqual(snapshot.content.rows, ((1, "0 1"), (2, "1 4"), (3, "2 9")))
        self.assertIsNotNone(snapshot.chart)
        self.assertEqual(snapshot.chart.total_points, 3)
        self.assertIn("Data points: 3", snapshot.stats)

        self._press("c")
        self.assertIsNone(self.machine.snapshot(50).chart)

    def test_snapshot_downsamples_long_series(self) -> None:
        path = self.root / "long.dat"
        path.write_text("".join(f"{idx} {idx % 17}\n" for idx in range(1000)), encoding="utf-8")
        self.machine.open_file(path)

        chart = self.machine.snapshot(50).chart

        self.assertEqual(chart.total_points, 1000)
        self.assertLessEqual(len(chart.points), 2 * 48 + 2)
        self.assertEqual(chart.points[0], (0.0, 0.0))
        self.assertEqual(chart.points[-1], (999.0, 999 % 17))


if __name__ == "__main__":
    unittest.main()
